"""
PURPOSE: Triangular distribution sampler for bounded quantities.

RESPONSIBILITIES:
- Sample from the triangular distribution on [a, b] with mode m
- Fall back to uniform sampling when the mode is NaN
- Return constants without drawing when a == b
- Single responsibility: only sampling, no I/O or aggregation
"""

import logging
import numbers

import numpy as np

from boundedrand.bounds import BoundsLike, DistributionSpec, resolve_bounds
from boundedrand.config import DEFAULT_SHAPE
from boundedrand.shape import ShapeLike, normalize_shape
from boundedrand.uniform import RandomStateLike, draw_uniform

logger = logging.getLogger(__name__)


def triangular_icdf(u: np.ndarray, t: float) -> np.ndarray:
    """
    Inverse CDF of the triangular distribution on [0, 1] with mode t.

    Args:
        u: Probabilities in [0, 1].
        t: Mode position as a fraction of the interval, in [0, 1].

    Returns:
        Quantiles in [0, 1], same shape as u.
    """
    u = np.asarray(u, dtype=float)
    # np.where evaluates both branches; the clip keeps sqrt away from negatives.
    rising = np.sqrt(np.clip(t * u, 0.0, None))
    falling = 1.0 - np.sqrt(np.clip((1.0 - t) * (1.0 - u), 0.0, None))
    return np.where(u <= t, rising, falling)


def constant_samples(spec: DistributionSpec, shape) -> np.ndarray:
    """Samples for a == b: every element is the mode, no randomness consumed."""
    logger.debug("Degenerate bounds a == b == %s; returning constant array of shape %s", spec.a, shape)
    if isinstance(spec.m, numbers.Number):
        return np.full(shape, spec.m)
    # Scaling keeps the units of quantity types.
    return spec.m * np.ones(shape)


def uniform_samples(spec: DistributionSpec, u: np.ndarray) -> np.ndarray:
    """Samples for a NaN mode: uniform on [a, b]."""
    return spec.a + u * spec.width


def set_mode_first(samples: np.ndarray, mode) -> np.ndarray:
    """Overwrite the first element (C order) with the mode."""
    if samples.size:
        samples[(0,) * samples.ndim] = mode
    return samples


def sample_triangular(
    bounds: BoundsLike,
    shape: ShapeLike = DEFAULT_SHAPE,
    force_mode_first: bool = False,
    random_state: RandomStateLike = None,
) -> np.ndarray:
    """
    Sample from the triangular distribution.

    Args:
        bounds: [a, m, b], [a, b] (mode at the midpoint), [m] (constant), or
            [a, NaN, b] for a uniform distribution on [a, b].
        shape: N for an N-by-N array, or [M, N, ...] for explicit dimensions.
        force_mode_first: If True, the first element is set to the mode, so it
            can serve as the best guess alongside the uncertainty sample. With
            a NaN mode the midpoint is used.
        random_state: Seed or uniform source for reproducibility.

    Returns:
        numpy array of the requested shape.

    Raises:
        InvalidArgumentError: For malformed bounds, a mode outside [a, b] or
            an invalid shape.
    """
    spec = resolve_bounds(bounds)
    dims = normalize_shape(shape)

    if spec.is_degenerate:
        return constant_samples(spec, dims)

    u = draw_uniform(dims, random_state)

    mode = spec.m
    if spec.is_uniform:
        samples = uniform_samples(spec, u)
        mode = spec.midpoint
    else:
        t = float((spec.m - spec.a) / spec.width)
        samples = spec.a + spec.width * triangular_icdf(u, t)

    if force_mode_first:
        set_mode_first(samples, mode)

    return samples
