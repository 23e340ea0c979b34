"""Triangular-packed storage for symmetric node-pair matrices.

An undirected n x n matrix satisfies ``M[i][j] == M[j][i]``, so only the
``n * (n + 1) / 2`` entries with ``i <= j`` are stored. Entries are flattened
column by column: column ``j`` holds rows ``0..j`` and starts at the
triangular number ``j * (j + 1) / 2``::

        j=0  j=1  j=2  j=3
    i=0  0    1    3    6
    i=1       2    4    7
    i=2            5    8
    i=3                 9

Every diagonal entry gets its own slot. All slots live in one contiguous
list, and a slot is addressed only through :func:`triangular_index`.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


def triangular_size(n: int) -> int:
    """Return the number of slots needed for an ``n``-node symmetric matrix.

    Args:
        n: Number of nodes.

    Returns:
        ``n * (n + 1) // 2``.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n`` is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Matrix dimension must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Matrix dimension must be non-negative, got {n}")
    return n * (n + 1) // 2


def triangular_index(i: int, j: int) -> int:
    """Map an unordered pair ``(i, j)`` to its packed slot.

    The pair is canonicalized to ``i <= j`` first, so ``triangular_index(i, j)
    == triangular_index(j, i)``. Over all ``0 <= i, j < n`` the image is
    exactly ``range(triangular_size(n))``.

    Example:
        >>> triangular_index(1, 3)
        7
        >>> triangular_index(3, 1)
        7
    """
    if i > j:
        i, j = j, i
    return j * (j + 1) // 2 + i


class PackedSymmetricMatrix(Generic[T]):
    """Symmetric matrix addressed by unordered node pairs.

    Args:
        n: Number of nodes (matrix dimension).
        default: Initial value shared by every slot. Stored as is, even
            when it is callable.
        default_factory: Zero-argument callable invoked once per slot. Use
            it for mutable values so slots never share an object.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n`` is negative, or both ``default`` and
            ``default_factory`` are given.

    Example:
        >>> m = PackedSymmetricMatrix(3, 0)
        >>> m[2, 0] = 5
        >>> m[0, 2]
        5
    """

    def __init__(
        self,
        n: int,
        default: Optional[T] = None,
        *,
        default_factory: Optional[Callable[[], T]] = None,
    ) -> None:
        if default is not None and default_factory is not None:
            raise ValueError("Pass either default or default_factory, not both")
        size = triangular_size(n)
        self._n = n
        if default_factory is not None:
            self._slots: List[T] = [default_factory() for _ in range(size)]
        else:
            self._slots = [default] * size  # type: ignore[list-item]

    @property
    def size(self) -> int:
        """Matrix dimension (number of nodes)."""
        return self._n

    def __len__(self) -> int:
        """Number of stored slots, ``n * (n + 1) // 2``."""
        return len(self._slots)

    def _idx(self, i: int, j: int) -> int:
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(
                f"Node pair ({i}, {j}) out of range for a {self._n}-node matrix"
            )
        return triangular_index(i, j)

    def get(self, i: int, j: int) -> T:
        """Return the value stored for the pair ``(i, j)``.

        Raises:
            IndexError: If ``i`` or ``j`` is outside ``[0, n)``.
        """
        return self._slots[self._idx(i, j)]

    def set(self, i: int, j: int, value: T) -> None:
        """Store ``value`` for the pair ``(i, j)`` (and thus ``(j, i)``).

        Raises:
            IndexError: If ``i`` or ``j`` is outside ``[0, n)``.
        """
        self._slots[self._idx(i, j)] = value

    def __getitem__(self, pair: Tuple[int, int]) -> T:
        i, j = pair
        return self.get(i, j)

    def __setitem__(self, pair: Tuple[int, int], value: T) -> None:
        i, j = pair
        self.set(i, j, value)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Yield canonical pairs ``(i, j)`` with ``i <= j`` in slot order."""
        for j in range(self._n):
            for i in range(j + 1):
                yield i, j

    def format_slot(self, value: T) -> str:
        """Render one slot for :meth:`format_triangle`."""
        return repr(value)

    def format_triangle(self) -> str:
        """Return a row-per-line dump of the stored triangle.

        Row ``j`` lists the slots ``(0, j) .. (j, j)``. Diagnostic only; the
        format may change between versions.
        """
        lines = []
        for j in range(self._n):
            start = triangular_index(0, j)
            row = self._slots[start : start + j + 1]
            lines.append("[" + ", ".join(self.format_slot(v) for v in row) + "]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_triangle()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, slots={len(self._slots)})"
