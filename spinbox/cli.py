import argparse
import logging

from . import config as C
from .collision import local_penetration
from .errors import ConfigurationError
from .logging_config import setup_logging
from .simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="spinbox",
        description="A ball bouncing inside a rotating cube.",
    )
    parser.add_argument("--half-extent", type=float, default=C.HALF_EXTENT,
                        help="Half side length of the cube.")
    parser.add_argument("--radius", type=float, default=C.BALL_RADIUS, help="Ball radius.")
    parser.add_argument("--angular-velocity", type=float, nargs=3, default=list(C.ANGULAR_VELOCITY),
                        metavar=("X", "Y", "Z"), help="Cube spin in radians per tick.")
    parser.add_argument("--position", type=float, nargs=3, default=list(C.BALL_POSITION),
                        metavar=("X", "Y", "Z"), help="Initial ball position.")
    parser.add_argument("--velocity", type=float, nargs=3, default=list(C.BALL_VELOCITY),
                        metavar=("X", "Y", "Z"), help="Initial ball velocity in units per tick.")
    parser.add_argument("--rotation-mode", choices=C.ROTATION_MODES, default="euler",
                        help="How the cube orientation is accumulated.")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and log a summary.")
    parser.add_argument("--ticks", type=int, default=1000, help="Ticks to run with --headless.")
    parser.add_argument("--debug", action="store_true", help="Log every contact.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser


def config_from_args(args):
    return C.SimulationConfig(
        half_extent=args.half_extent,
        radius=args.radius,
        angular_velocity=tuple(args.angular_velocity),
        position=tuple(args.position),
        velocity=tuple(args.velocity),
        rotation_mode=args.rotation_mode,
    )


def run_headless(config, ticks):
    sim = Simulation.from_config(config)
    sim.run(ticks)
    worst = float(local_penetration(sim.boundary, sim.particle).max())
    logger.info(
        "%d ticks, %d contacts, ball at %s, velocity %s, worst face clearance %.6f",
        sim.ticks, sim.contacts, sim.ball_position, sim.ball_velocity, -worst,
    )
    return sim


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    try:
        config = config_from_args(args).validate()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.headless:
        if args.ticks < 0:
            logger.error("--ticks must not be negative, got %d", args.ticks)
            return 2
        run_headless(config, args.ticks)
        return 0

    # The window stack needs a display; keep it out of headless runs
    from .viewer import run
    run(config)
    return 0
