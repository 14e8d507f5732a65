"""Tests for Face construction and normal derivation."""

import pytest

from stlcodec.errors import DegenerateNormal
from stlcodec.face import Face
from stlcodec.vector import Vector3

A = Vector3(0, 0, 0)
B = Vector3(1, 0, 0)
C = Vector3(0, 1, 0)


class TestPositions:

    def test_empty_face_is_incomplete(self):
        face = Face()
        assert not face.complete
        assert face.positions == ()

    def test_fourth_append_is_ignored(self):
        face = Face()
        for p in (A, B, C):
            face.add_position(p)
        assert face.complete
        face.add_position(Vector3(9, 9, 9))
        assert face.complete
        assert face.positions == (A, B, C)

    def test_constructor_truncates_extra_positions(self):
        face = Face([A, B, C, Vector3(5, 5, 5)])
        assert face.positions == (A, B, C)


class TestNormals:

    def test_derived_normal_is_unnormalized_cross_product(self):
        face = Face([A, Vector3(2, 0, 0), Vector3(0, 2, 0)])
        assert not face.special_normals
        assert face.effective_normals() == (Vector3(0, 0, 4),) * 3

    def test_unit_triangle_derives_plus_z(self):
        face = Face([A, B, C])
        assert face.effective_normals() == (Vector3(0, 0, 1),) * 3
        assert face.single_normal() == Vector3(0, 0, 1)

    def test_supplied_normals_are_honored(self):
        down = Vector3(0, 0, -1)
        face = Face([A, B, C], [down, down, down])
        assert face.special_normals
        assert face.effective_normals() == (down, down, down)
        assert face.single_normal() == down

    def test_one_zero_normal_falls_back_to_derivation(self):
        down = Vector3(0, 0, -1)
        face = Face([A, B, C], [down, Vector3.zero(), down])
        assert face.normals is not None
        assert not face.special_normals
        assert face.effective_normals() == Face([A, B, C]).effective_normals()
        assert face.single_normal() == Vector3(0, 0, 1)

    def test_unit_supplied_normal_is_returned_unchanged(self):
        n = Vector3(0.26726123690605164, 0.5345224738121033, 0.8017836809158325)
        face = Face([A, B, C], [n, n, n])
        assert face.single_normal() is n

    def test_non_unit_supplied_normal_is_normalized(self):
        n = Vector3(0, 0, 2)
        face = Face([A, B, C], [n, n, n])
        assert face.single_normal() == Vector3(0, 0, 1)

    def test_short_normal_sequence_counts_as_none(self):
        face = Face([A, B, C], [Vector3(0, 0, 1)])
        assert face.normals is None
        assert not face.special_normals

    def test_degenerate_triangle_gives_zero_normal_and_warns(self):
        face = Face([A, B, Vector3(2, 0, 0)])
        with pytest.warns(DegenerateNormal):
            assert face.single_normal() == Vector3.zero()


class TestOutput:

    def test_binary_record_is_50_bytes(self):
        assert len(Face([A, B, C]).to_binary_stl()) == 50

    def test_incomplete_face_encodes_to_nothing(self):
        assert Face([A, B]).to_binary_stl() == b""

    def test_to_stl_dispatch(self):
        face = Face([A, B, C])
        assert face.to_stl("binary") == face.to_binary_stl()
        assert face.to_stl("ascii") == ""
        with pytest.raises(ValueError):
            face.to_stl("obj")

    def test_ascii_and_obj_are_empty(self):
        face = Face([A, B, C])
        assert face.to_ascii_stl() == ""
        assert face.to_obj() == ""
