"""
PURPOSE: Resolve a bounds vector into a validated (a, m, b) triple.

RESPONSIBILITIES:
- Accept 1-, 2- or 3-element bounds vectors ([m], [a b], [a m b])
- Fill in the midpoint mode for 1- and 2-element vectors
- Reject modes lying outside the closed interval bounded by a and b
- Validate the PERT shape parameter lambda
- Single responsibility: validation and extraction, no sampling
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Union

import numpy as np

from boundedrand.errors import InvalidArgumentError


class SupportsBoundsArithmetic(Protocol):
    """Numeric values the samplers can work with.

    Plain floats satisfy this, as do dimensioned quantity types whose
    differences can be compared, divided into dimensionless ratios and
    scaled by a numpy array.
    """

    def __sub__(self, other: Any) -> Any: ...

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


BoundsLike = Union[SupportsBoundsArithmetic, Sequence[SupportsBoundsArithmetic], np.ndarray]


def is_nan(value) -> bool:
    """NaN is the only value that does not compare equal to itself."""
    return bool(value != value)


@dataclass(frozen=True)
class DistributionSpec:
    """Resolved parameters of a bounded, mode-aware distribution.

    Attributes:
        a: First element of the bounds vector.
        m: Mode. NaN requests a uniform distribution on [a, b].
        b: Last element of the bounds vector.
    """
    a: Any
    m: Any
    b: Any

    @property
    def is_degenerate(self) -> bool:
        return bool(self.a == self.b)

    @property
    def is_uniform(self) -> bool:
        return is_nan(self.m)

    @property
    def midpoint(self):
        return (self.a + self.b) / 2

    @property
    def width(self):
        return self.b - self.a


def _as_vector(bounds: BoundsLike) -> list:
    if isinstance(bounds, np.ndarray):
        if bounds.ndim > 1 and sum(dim > 1 for dim in bounds.shape) > 1:
            raise InvalidArgumentError(
                f"bounds must be a vector, got array of shape {bounds.shape}"
            )
        return list(bounds.ravel())
    if isinstance(bounds, (str, bytes)):
        raise InvalidArgumentError(f"bounds must be numeric, got {bounds!r}")
    if isinstance(bounds, Sequence):
        return list(bounds)
    # A bare scalar is a fixed constant, like a 1-element vector.
    return [bounds]


def resolve_bounds(bounds: BoundsLike) -> DistributionSpec:
    """
    Resolve a bounds vector into (a, m, b).

    Args:
        bounds: [m], [a, b] or [a, m, b]. A bare scalar is treated as [m].
            The order of a and b may be ascending or descending.

    Returns:
        DistributionSpec with a, m and b filled in.

    Raises:
        InvalidArgumentError: If bounds has any other length, or m lies
            strictly outside the interval bounded by a and b.
    """
    values = _as_vector(bounds)

    if len(values) == 3:
        a, m, b = values
    elif len(values) == 2:
        a, b = values
        m = (a + b) / 2
    elif len(values) == 1:
        a = m = b = values[0]
    else:
        raise InvalidArgumentError(
            f"bounds must have 1, 2 ([a b]) or 3 ([a m b]) elements, got {len(values)}"
        )

    spec = DistributionSpec(a=a, m=m, b=b)
    if not spec.is_uniform and ((m > a and m > b) or (m < a and m < b)):
        raise InvalidArgumentError(f"mode must lie between a and b, got a={a}, m={m}, b={b}")

    return spec


def validate_lambda(lambda_param) -> float:
    """
    Validate the PERT shape parameter.

    Args:
        lambda_param: Weight of the mode in the PERT mean. 0 gives a uniform
            distribution, larger values give a peakier one.

    Returns:
        lambda_param as a float.

    Raises:
        InvalidArgumentError: If lambda_param is not a finite, non-negative real scalar.
    """
    if isinstance(lambda_param, bool) or not isinstance(lambda_param, numbers.Real):
        raise InvalidArgumentError(f"lambda must be a real scalar, got {lambda_param!r}")

    value = float(lambda_param)
    if not math.isfinite(value) or value < 0:
        raise InvalidArgumentError(f"lambda must be finite and non-negative, got {lambda_param}")

    return value
