"""Tests for mesh vertex statistics."""

import pytest

from stlcodec import Face, Mesh, Vector3, compute_stats


def test_min_max_average():
    mesh = Mesh([
        Face([Vector3(0, 0, 0), Vector3(2, 0, 0), Vector3(0, 2, 0)]),
        Face([Vector3(0, 0, 4), Vector3(-2, 0, 4), Vector3(0, -2, 4)]),
    ])
    stats = compute_stats(mesh)
    assert stats.face_count == 2
    assert stats.vertex_count == 6
    assert stats.minimum == Vector3(-2, -2, 0)
    assert stats.maximum == Vector3(2, 2, 4)
    assert tuple(stats.average) == pytest.approx((0, 0, 2))
    assert stats.size == Vector3(4, 4, 4)


def test_empty_mesh():
    with pytest.raises(ValueError):
        compute_stats(Mesh())
