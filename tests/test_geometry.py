import numpy as np

from spinbox.geometry import CUBE_EDGES, cube_corners_world, wireframe_segments
from spinbox.mathutils import rotation_from_euler


def test_unrotated_corners():
    corners = cube_corners_world(np.eye(3), 25.0)
    assert corners.shape == (8, 3)
    np.testing.assert_array_equal(np.abs(corners), np.full((8, 3), 25.0))
    assert len({tuple(c) for c in corners}) == 8


def test_edges_have_side_length_after_rotation():
    R = rotation_from_euler(0.4, -1.1, 2.3)
    segments = wireframe_segments(R, 25.0)
    assert segments.shape == (len(CUBE_EDGES), 2, 3)
    lengths = np.linalg.norm(segments[:, 1] - segments[:, 0], axis=1)
    np.testing.assert_allclose(lengths, 50.0)


def test_corners_follow_rotation():
    R = rotation_from_euler(0.0, 0.0, np.pi / 2)
    corners = cube_corners_world(R, 1.0)
    # (1, 1, 1) turns to (-1, 1, 1) about z
    np.testing.assert_allclose(corners[0], [-1.0, 1.0, 1.0], atol=1e-12)
