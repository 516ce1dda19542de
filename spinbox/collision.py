"""
Ball vs. rotating cube contact.

The cube's faces are not axis-aligned in world space, so the check is done
in the cube's co-rotating frame where it is a plain axis-aligned box. The
cube is also moving at the contact point: velocities are taken relative to
the frame velocity (omega x p) before reflecting and the frame velocity is
added back afterwards, evaluated at the corrected position.

Edges and corners are handled one axis at a time. That is an approximation,
not a simultaneous constraint solve, and it is kept on purpose since it
defines how the ball leaves a corner.
"""
import logging
from dataclasses import dataclass

import numpy as np

from .mathutils import frame_velocity

logger = logging.getLogger(__name__)

AXIS_NAMES = ("x", "y", "z")


@dataclass(frozen=True)
class Contact:
    """Local axes that were clamped this tick and the face (+1 / -1) hit on each."""

    axes: tuple = ()
    sides: tuple = ()

    def __bool__(self):
        return bool(self.axes)

    def describe(self):
        return ", ".join(
            f"{'+' if side > 0 else '-'}{AXIS_NAMES[axis]}"
            for axis, side in zip(self.axes, self.sides)
        )


NO_CONTACT = Contact()


class CollisionResolver:
    """Stateless: every call works only from the boundary and particle it is given."""

    def resolve(self, boundary, particle):
        omega = boundary.angular_velocity
        limit = boundary.half_extent - particle.radius

        v_rel_world = particle.velocity - frame_velocity(omega, particle.position)

        pos_local = boundary.world_to_local(particle.position)
        v_rel_local = boundary.world_to_local(v_rel_world)

        axes = []
        sides = []
        for axis in range(3):
            if abs(pos_local[axis]) + particle.radius > boundary.half_extent:
                side = 1.0 if pos_local[axis] >= 0.0 else -1.0
                pos_local[axis] = side * limit
                v_rel_local[axis] = -v_rel_local[axis]
                axes.append(axis)
                sides.append(int(side))

        if not axes:
            return NO_CONTACT

        new_position = boundary.local_to_world(pos_local)
        new_velocity = boundary.local_to_world(v_rel_local) + frame_velocity(omega, new_position)

        particle.position[:] = new_position
        particle.velocity[:] = new_velocity

        contact = Contact(tuple(axes), tuple(sides))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("contact on %s, position=%s velocity=%s",
                         contact.describe(), new_position, new_velocity)
        return contact


def local_penetration(boundary, particle):
    """Per-axis amount by which the ball pokes through each pair of faces (<= 0 when inside)."""
    pos_local = boundary.world_to_local(particle.position)
    return np.abs(pos_local) + particle.radius - boundary.half_extent
