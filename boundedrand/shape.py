"""
Normalization of requested output shapes.

A scalar N or a 1-element sequence [N] asks for an N-by-N array; any longer
sequence lists the dimension sizes explicitly. Everything downstream works on
the canonical tuple.
"""

import math
import numbers
from typing import Sequence, Tuple, Union

import numpy as np

from boundedrand.errors import InvalidArgumentError

ShapeLike = Union[int, Sequence[int], np.ndarray]


def _as_dimension(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"shape dimensions must be integers, got {value!r}")
    if not math.isfinite(value) or value != int(value) or value < 0:
        raise InvalidArgumentError(f"shape dimensions must be non-negative integers, got {value}")
    return int(value)


def normalize_shape(shape: ShapeLike) -> Tuple[int, ...]:
    """
    Convert a shape descriptor to a tuple of dimension sizes.

    Args:
        shape: N, [N] or [M, N, ...].

    Returns:
        (N, N) for N or [N], otherwise the dimensions as a tuple of ints.

    Raises:
        InvalidArgumentError: For empty shapes, negative or non-integral sizes.
    """
    if isinstance(shape, np.ndarray):
        shape = shape.ravel().tolist()

    if isinstance(shape, Sequence) and not isinstance(shape, (str, bytes)):
        dims = [_as_dimension(dim) for dim in shape]
    else:
        dims = [_as_dimension(shape)]

    if not dims:
        raise InvalidArgumentError("shape must have at least one dimension")
    if len(dims) == 1:
        return (dims[0], dims[0])
    return tuple(dims)
