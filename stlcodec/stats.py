# stlcodec/stats.py
"""Aggregate vertex statistics over a loaded mesh."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .mesh import Mesh
from .vector import Vector3


@dataclass(frozen=True)
class MeshStats:
    face_count: int
    vertex_count: int
    minimum: Vector3
    maximum: Vector3
    average: Vector3

    @property
    def size(self) -> Vector3:
        return self.maximum - self.minimum


def compute_stats(mesh: Mesh) -> MeshStats:
    """Min/max/average position over every vertex of every face.

    Vertices shared between faces are counted once per face.
    """
    verts = mesh.vertex_array()
    if verts.shape[0] == 0:
        raise ValueError("Mesh contains no vertices")
    return MeshStats(
        face_count=len(mesh),
        vertex_count=int(verts.shape[0]),
        minimum=Vector3.from_iterable(np.min(verts, axis=0)),
        maximum=Vector3.from_iterable(np.max(verts, axis=0)),
        average=Vector3.from_iterable(np.mean(verts, axis=0)),
    )
