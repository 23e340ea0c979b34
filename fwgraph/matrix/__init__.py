"""Packed symmetric matrices used to store all-pairs results.

This package provides the triangular-packed container `PackedSymmetricMatrix`
and its specializations `DistanceMatrix` and `PathMatrix`.
"""

from fwgraph.matrix.packed import (
    PackedSymmetricMatrix,
    triangular_index,
    triangular_size,
)
from fwgraph.matrix.path import Path
from fwgraph.matrix.path_matrix import DistanceMatrix, PathMatrix

__all__ = [
    "PackedSymmetricMatrix",
    "triangular_index",
    "triangular_size",
    "Path",
    "DistanceMatrix",
    "PathMatrix",
]
