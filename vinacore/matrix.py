"""Dense, triangular and three-dimensional containers."""

from __future__ import annotations

import copy
from typing import Any

from vinacore.common import MAX_SZ, InternalError

_IMMUTABLE = (int, float, complex, bool, str, bytes, tuple, frozenset, type(None))


def _filled(filler: Any, count: int) -> list:
    if isinstance(filler, _IMMUTABLE):
        return [filler] * count
    return [copy.deepcopy(filler) for _ in range(count)]


def triangular_matrix_index(n: int, i: int, j: int) -> int:
    """Index of (i, j), i <= j < n, in a packed upper-triangular matrix."""
    if not (0 <= i <= j < n):
        raise IndexError(f"triangular index ({i}, {j}) invalid for dimension {n}")
    return i + j * (j + 1) // 2


def triangular_matrix_index_permissive(n: int, i: int, j: int) -> int:
    if i <= j:
        return triangular_matrix_index(n, i, j)
    return triangular_matrix_index(n, j, i)


def checked_multiply(*args: int) -> int:
    """Multiply sizes, raising MemoryError if the product overflows a size."""
    if not args:
        raise TypeError("checked_multiply needs at least one factor")
    if any(a < 0 for a in args):
        raise ValueError("sizes must be non-negative")
    result = args[0]
    for factor in args[1:]:
        if result == 0 or factor == 0:
            result = 0
            continue
        result *= factor
        if result > MAX_SZ:
            raise MemoryError("requested size is too large")
    return result


class Matrix:
    """A dense column-major matrix."""

    def __init__(self, rows: int = 0, cols: int = 0, filler: Any = 0.0):
        self._data = _filled(filler, rows * cols)
        self._rows = rows
        self._cols = cols

    @property
    def dim_1(self) -> int:
        return self._rows

    @property
    def dim_2(self) -> int:
        return self._cols

    def index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"matrix index ({i}, {j}) out of range")
        return i + self._rows * j

    def _position(self, key) -> int:
        if isinstance(key, tuple):
            return self.index(*key)
        return key

    def __getitem__(self, key):
        return self._data[self._position(key)]

    def __setitem__(self, key, value) -> None:
        self._data[self._position(key)] = value

    def __len__(self) -> int:
        return len(self._data)

    def resize(self, m: int, n: int, filler: Any) -> None:
        """Grow to m x n, keeping existing values; shrinking is an error."""
        if m == self._rows and n == self._cols:
            return
        if m < self._rows or n < self._cols:
            raise InternalError("matrix can only grow")
        data = _filled(filler, m * n)
        for j in range(self._cols):
            for i in range(self._rows):
                data[i + m * j] = self[i, j]
        self._data = data
        self._rows = m
        self._cols = n

    def append(self, other: "Matrix", filler: Any) -> None:
        """Place other diagonally below and right of the current contents."""
        m, n = self._rows, self._cols
        self.resize(m + other.dim_1, n + other.dim_2, filler)
        for i in range(other.dim_1):
            for j in range(other.dim_2):
                self[i + m, j + n] = other[i, j]


class TriangularMatrix:
    """A packed symmetric matrix including the diagonal."""

    def __init__(self, n: int = 0, filler: Any = 0.0):
        self._data = _filled(filler, n * (n + 1) // 2)
        self._dim = n

    @property
    def dim(self) -> int:
        return self._dim

    def index(self, i: int, j: int) -> int:
        return triangular_matrix_index(self._dim, i, j)

    def index_permissive(self, i: int, j: int) -> int:
        return self.index(i, j) if i < j else self.index(j, i)

    def _position(self, key) -> int:
        if isinstance(key, tuple):
            return self.index(*key)
        return key

    def __getitem__(self, key):
        return self._data[self._position(key)]

    def __setitem__(self, key, value) -> None:
        self._data[self._position(key)] = value

    def __len__(self) -> int:
        return len(self._data)


class StrictlyTriangularMatrix:
    """A packed upper-triangular matrix without the diagonal."""

    def __init__(self, n: int = 0, filler: Any = 0.0):
        self._data = _filled(filler, n * (n - 1) // 2 if n > 0 else 0)
        self._dim = n

    @property
    def dim(self) -> int:
        return self._dim

    def index(self, i: int, j: int) -> int:
        if not (0 <= i < j < self._dim):
            raise IndexError(f"strictly triangular index ({i}, {j}) invalid")
        return i + j * (j - 1) // 2

    def index_permissive(self, i: int, j: int) -> int:
        return self.index(i, j) if i < j else self.index(j, i)

    def _position(self, key) -> int:
        if isinstance(key, tuple):
            return self.index(*key)
        return key

    def __getitem__(self, key):
        return self._data[self._position(key)]

    def __setitem__(self, key, value) -> None:
        self._data[self._position(key)] = value

    def __len__(self) -> int:
        return len(self._data)

    def resize(self, n: int, filler: Any) -> None:
        """Grow to dimension n, preserving the existing values."""
        if n == self._dim:
            return
        if n < self._dim:
            raise InternalError("matrix can only grow")
        size = n * (n - 1) // 2
        self._data.extend(_filled(filler, size - len(self._data)))
        self._dim = n

    def append(self, other: "StrictlyTriangularMatrix", filler: Any) -> None:
        """Append other as a new diagonal block."""
        n = self._dim
        self.resize(n + other.dim, filler)
        for i in range(other.dim):
            for j in range(i + 1, other.dim):
                self[i + n, j + n] = other[i, j]

    def append_block(self, rectangular: Matrix, triangular: "StrictlyTriangularMatrix") -> None:
        """Append triangular as a new block, with rectangular joining it to the old one."""
        if self._dim != rectangular.dim_1:
            raise InternalError("rectangular block rows must match the dimension")
        if rectangular.dim_2 != triangular.dim:
            raise InternalError("rectangular block columns must match the new block")
        if rectangular.dim_2 == 0:
            return
        if rectangular.dim_1 == 0:
            self._data = copy.deepcopy(triangular._data)
            self._dim = triangular.dim
            return
        filler = rectangular[0, 0]
        n = self._dim
        self.append(triangular, filler)
        for i in range(rectangular.dim_1):
            for j in range(rectangular.dim_2):
                self[i, n + j] = rectangular[i, j]


class Array3D:
    """A dense three-dimensional array indexed as a[i, j, k]."""

    def __init__(self, i: int = 0, j: int = 0, k: int = 0, filler: Any = 0.0):
        self._filler = filler
        self._dims = (i, j, k)
        self._data = _filled(filler, checked_multiply(i, j, k))

    @property
    def dim0(self) -> int:
        return self._dims[0]

    @property
    def dim1(self) -> int:
        return self._dims[1]

    @property
    def dim2(self) -> int:
        return self._dims[2]

    def dim(self, i: int) -> int:
        if not 0 <= i < 3:
            raise IndexError(f"dimension {i} out of range")
        return self._dims[i]

    def resize(self, i: int, j: int, k: int) -> None:
        """Change the shape; existing contents are not kept in place."""
        size = checked_multiply(i, j, k)
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(_filled(self._filler, size - len(self._data)))
        self._dims = (i, j, k)

    def _position(self, key: tuple[int, int, int]) -> int:
        i, j, k = key
        ni, nj, nk = self._dims
        if not (0 <= i < ni and 0 <= j < nj and 0 <= k < nk):
            raise IndexError(f"array index {key} out of range")
        return i + ni * (j + nj * k)

    def __getitem__(self, key: tuple[int, int, int]):
        return self._data[self._position(key)]

    def __setitem__(self, key: tuple[int, int, int], value) -> None:
        self._data[self._position(key)] = value