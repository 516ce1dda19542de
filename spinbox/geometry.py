import numpy as np

# ----------------------
# Cube wireframe
# ----------------------
CUBE_LOCAL_CORNERS = np.array([
    [ 1,  1,  1],
    [ 1, -1,  1],
    [-1, -1,  1],
    [-1,  1,  1],
    [ 1,  1, -1],
    [ 1, -1, -1],
    [-1, -1, -1],
    [-1,  1, -1],
], dtype=float)

CUBE_EDGES = [(0,1),(1,2),(2,3),(3,0),(4,5),(5,6),(6,7),(7,4),(0,4),(1,5),(2,6),(3,7)]

def cube_corners_world(rotation, half_extent):
    scaled = CUBE_LOCAL_CORNERS * half_extent  # (8,3)
    return (np.asarray(rotation, dtype=float) @ scaled.T).T

def wireframe_segments(rotation, half_extent):
    """(12, 2, 3) array of edge endpoints for the rotated cube."""
    corners = cube_corners_world(rotation, half_extent)
    idx = np.array(CUBE_EDGES, dtype=int)
    return corners[idx]
