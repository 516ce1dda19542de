"""
pygame + PyOpenGL window for watching the ball bounce around the spinning cube.

Keys:
    arrows  orbit the camera
    W / S   zoom in / out
    SPACE   pause
    R       restart from the initial config
    ESC     quit

One simulation tick per rendered frame; the viewer only reads the
simulation's observers.
"""
import logging
import math

import numpy as np
import pygame
from pygame.locals import DOUBLEBUF, OPENGL
from OpenGL.GL import *
from OpenGL.GLU import *

from . import config as C
from .geometry import wireframe_segments
from .simulation import Simulation

logger = logging.getLogger(__name__)

quadric = None

# ----------------------
# Rendering
# ----------------------
def draw_sphere(position, radius):
    global quadric
    if quadric is None:
        quadric = gluNewQuadric()
        gluQuadricNormals(quadric, GLU_SMOOTH)
    glPushMatrix()
    glTranslatef(*position)
    glColor3f(0.8, 0.25, 0.25)
    gluSphere(quadric, radius, C.SPHERE_SLICES, C.SPHERE_STACKS)
    glPopMatrix()

def draw_wire_cube(rotation, half_extent):
    glColor3f(0.2, 0.6, 0.9)
    glBegin(GL_LINES)
    for a, b in wireframe_segments(rotation, half_extent):
        glVertex3f(*a)
        glVertex3f(*b)
    glEnd()

def draw_axes(length):
    glBegin(GL_LINES)
    glColor3f(0.6, 0.2, 0.2)
    glVertex3f(0.0, 0.0, 0.0); glVertex3f(length, 0.0, 0.0)
    glColor3f(0.2, 0.6, 0.2)
    glVertex3f(0.0, 0.0, 0.0); glVertex3f(0.0, length, 0.0)
    glColor3f(0.2, 0.2, 0.6)
    glVertex3f(0.0, 0.0, 0.0); glVertex3f(0.0, 0.0, length)
    glEnd()

# ----------------------
# OpenGL/pygame
# ----------------------
def init_opengl():
    glEnable(GL_DEPTH_TEST)
    glDepthFunc(GL_LEQUAL)
    glClearColor(0.12, 0.12, 0.12, 1.0)
    glShadeModel(GL_SMOOTH)
    glEnable(GL_COLOR_MATERIAL)

def resize(w, h):
    if h == 0: h = 1
    glViewport(0, 0, w, h)
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluPerspective(C.FOV, w/float(h), C.NEAR, C.FAR)
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()

def camera_eye(distance, pitch_deg, yaw_deg):
    yaw_rad = math.radians(yaw_deg)
    pitch_rad = math.radians(pitch_deg)
    return np.array([
        distance * math.cos(pitch_rad) * math.sin(yaw_rad),
        distance * math.sin(pitch_rad),
        distance * math.cos(pitch_rad) * math.cos(yaw_rad),
    ], dtype=float)

# ----------------------
# Main loop
# ----------------------
def run(config=None):
    config = (config or C.SimulationConfig()).validate()
    sim = Simulation.from_config(config)

    pygame.init()
    pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT), DOUBLEBUF | OPENGL)
    pygame.display.set_caption("Ball in a Rotating Cube")
    init_opengl()
    resize(C.SCREEN_WIDTH, C.SCREEN_HEIGHT)

    cam_distance = max(C.CAM_DISTANCE, 3.5 * config.half_extent)
    cam_pitch = C.CAM_PITCH
    cam_yaw = C.CAM_YAW
    paused = False

    clock = pygame.time.Clock()
    running = True
    logger.info("Viewer started: %s", config)

    while running:
        frame_dt = clock.tick(C.FRAME_RATE) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    sim = Simulation.from_config(config)
                    logger.info("Restarted")
                elif event.key == pygame.K_SPACE:
                    paused = not paused

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            cam_yaw -= 50.0 * frame_dt
        if keys[pygame.K_RIGHT]:
            cam_yaw += 50.0 * frame_dt
        if keys[pygame.K_UP]:
            cam_pitch = min(89.0, cam_pitch + 50.0 * frame_dt)
        if keys[pygame.K_DOWN]:
            cam_pitch = max(-89.0, cam_pitch - 50.0 * frame_dt)
        if keys[pygame.K_w]:
            cam_distance = max(2.0 * config.half_extent, cam_distance - 60.0 * frame_dt)
        if keys[pygame.K_s]:
            cam_distance = min(10.0 * config.half_extent, cam_distance + 60.0 * frame_dt)

        if not paused:
            sim.tick()

        # render
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        glLoadIdentity()

        eye = camera_eye(cam_distance, cam_pitch, cam_yaw)
        gluLookAt(eye[0], eye[1], eye[2],
                  0.0, 0.0, 0.0,
                  0.0, 1.0, 0.0)

        draw_axes(0.5 * sim.half_extent)
        draw_wire_cube(sim.rotation, sim.half_extent)
        draw_sphere(sim.ball_position, sim.ball_radius)

        pygame.display.flip()

    logger.info("Viewer closed after %d ticks, %d contacts", sim.ticks, sim.contacts)
    pygame.quit()
