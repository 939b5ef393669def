"""Dense row-major multidimensional arrays and views into them."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator, Sequence


def _row_major_strides(shape: Sequence[int]) -> tuple[tuple[int, ...], int]:
    strides = [0] * len(shape)
    length = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = length
        length *= shape[i]
    return tuple(strides), length


class TensorView:
    """A window onto shared storage, addressed through shape and strides."""

    __slots__ = ("shape", "strides", "data", "offset")

    def __init__(
        self, shape: Iterable[int], strides: Iterable[int], data: list, offset: int = 0
    ) -> None:
        self.shape = tuple(shape)
        self.strides = tuple(strides)
        if len(self.shape) != len(self.strides):
            raise ValueError("shape and strides differ in length")
        self.data = data
        self.offset = offset

    @property
    def ndim(self) -> int:
        return len(self.shape)

    def flatten_index(self, index: Iterable[int]) -> int:
        """Position in the storage of the element at the full ``index``."""
        index = tuple(index)
        if len(index) != self.ndim:
            raise IndexError(f"expected {self.ndim} indices, got {len(index)}")
        position = self.offset
        for i, extent, stride in zip(index, self.shape, self.strides):
            if not 0 <= i < extent:
                raise IndexError(f"index {i} outside [0, {extent})")
            position += i * stride
        return position

    def _sub(self, i: int) -> TensorView:
        if self.ndim == 0:
            raise TypeError("a 0-dimensional view cannot be indexed by an integer")
        if not 0 <= i < self.shape[0]:
            raise IndexError(f"index {i} outside [0, {self.shape[0]})")
        return TensorView(
            self.shape[1:], self.strides[1:], self.data, self.offset + self.strides[0] * i
        )

    def __getitem__(self, index: Any) -> Any:
        """Element for a tuple of indices, sub-view one dimension lower for an integer."""
        if isinstance(index, tuple):
            return self.data[self.flatten_index(index)]
        return self._sub(operator.index(index))

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, tuple):
            self.data[self.flatten_index(index)] = value
        elif self.ndim == 1:
            self._sub(operator.index(index)).value = value
        else:
            raise TypeError("assign through a full tuple of indices")

    @property
    def value(self) -> Any:
        """The single element of a 0-dimensional view."""
        if self.ndim:
            raise TypeError("only 0-dimensional views hold a single value")
        return self.data[self.offset]

    @value.setter
    def value(self, new: Any) -> None:
        if self.ndim:
            raise TypeError("only 0-dimensional views hold a single value")
        self.data[self.offset] = new

    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("a 0-dimensional view has no length")
        return self.shape[0]

    def __iter__(self) -> Iterator[TensorView]:
        return (self._sub(i) for i in range(len(self)))

    def tolist(self) -> Any:
        """Nested lists of the elements, or the element itself when 0-dimensional."""
        if self.ndim == 0:
            return self.value
        return [sub.tolist() for sub in self]


class Tensor:
    """An owned row-major array with a fixed shape."""

    def __init__(self, shape: Iterable[int], fill: Any = 0) -> None:
        self.assign(shape, fill)

    def assign(self, shape: Iterable[int], fill: Any = 0) -> None:
        """Reshape to ``shape`` and fill every element with ``fill``."""
        shape = tuple(operator.index(s) for s in shape)
        if any(s < 0 for s in shape):
            raise ValueError(f"extents must be non-negative, got {shape}")
        self.shape = shape
        self.strides, length = _row_major_strides(shape)
        self.data = [fill] * length

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return len(self.data)

    def flatten_index(self, index: Iterable[int]) -> int:
        """Position in the storage of the element at the full ``index``."""
        return self.view().flatten_index(index)

    def view(self) -> TensorView:
        """A view sharing this tensor's storage."""
        return TensorView(self.shape, self.strides, self.data, 0)

    def __getitem__(self, index: Any) -> Any:
        return self.view()[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.view()[index] = value

    def __len__(self) -> int:
        return len(self.view())

    def __iter__(self) -> Iterator[TensorView]:
        return iter(self.view())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Tensor:
        """An independent tensor with the same shape and elements."""
        result = Tensor(self.shape)
        result.data[:] = self.data
        return result

    def tolist(self) -> Any:
        return self.view().tolist()

    def __repr__(self) -> str:
        return f"Tensor(shape={self.shape})"