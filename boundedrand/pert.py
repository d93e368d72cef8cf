"""
PURPOSE: PERT distribution sampler for bounded quantities.

PERT is a Beta distribution rescaled onto [a, b], with shape parameters
derived from the minimum, most-likely and maximum values plus a weight
lambda on the mode:

    mu    = (a + lambda*m + b) / (lambda + 2)
    alpha = (mu - a)(2m - a - b) / ((m - mu)(b - a))
    beta  = alpha (b - mu) / (mu - a)

which simplify to alpha = 1 + lambda (m - a)/(b - a) and
beta = 1 + lambda (b - m)/(b - a); the simplified form is what gets computed.

Samples are drawn by inverse transform through scipy's inverse regularized
incomplete Beta function.

RESPONSIBILITIES:
- Derive Beta shape parameters without the m == mu singularity
- Sample via inverse transform of uniform variates
- Build the matching density function on request
- Single responsibility: only sampling, no I/O or aggregation

References:
    NASA, "Analytic Method for Probabilistic Cost and Schedule Risk Analysis"
    https://www.riskamp.com/beta-pert
"""

import logging
from dataclasses import dataclass
from typing import Any, Tuple, Union

import numpy as np
from scipy import special

from boundedrand.bounds import BoundsLike, DistributionSpec, resolve_bounds, validate_lambda
from boundedrand.config import DEFAULT_LAMBDA, DEFAULT_SHAPE, DIRAC_PDF_SENTINEL
from boundedrand.shape import ShapeLike, normalize_shape
from boundedrand.triangular import constant_samples, set_mode_first, uniform_samples
from boundedrand.uniform import RandomStateLike, draw_uniform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PertShape:
    """Beta shape parameters of a PERT distribution.

    Attributes:
        alpha (float): First Beta shape parameter.
        beta (float): Second Beta shape parameter.
        mean: PERT mean estimate mu, in the units of the bounds.
    """
    alpha: float
    beta: float
    mean: Any


@dataclass(frozen=True)
class PertDensity:
    """Probability density of Beta(alpha, beta) rescaled onto [a, b].

    Callable on scalars or arrays. Returns 0 outside the support.
    """
    alpha: float
    beta: float
    a: Any
    b: Any

    def __call__(self, x):
        z = np.asarray((np.asarray(x) - self.a) / (self.b - self.a), dtype=float)
        inside = (z >= 0.0) & (z <= 1.0)
        zc = np.clip(z, 0.0, 1.0)
        with np.errstate(divide="ignore"):
            density = (
                zc ** (self.alpha - 1.0) * (1.0 - zc) ** (self.beta - 1.0)
            ) / (abs(self.b - self.a) * special.beta(self.alpha, self.beta))
        result = np.where(inside, density, 0.0)
        return float(result) if result.ndim == 0 else result


@dataclass(frozen=True)
class DiracDensity:
    """Stand-in density for a == b.

    This approximates a point mass. It returns a very large finite value at
    x == a and 0 elsewhere, so it is not a true density and does not
    integrate to 1.
    """
    a: Any
    sentinel: float = DIRAC_PDF_SENTINEL

    def __call__(self, x):
        result = np.where(np.asarray(x) == self.a, self.sentinel, 0.0)
        return float(result) if result.ndim == 0 else result


Density = Union[PertDensity, DiracDensity]


def derive_pert_shape(spec: DistributionSpec, lambda_param: float = DEFAULT_LAMBDA) -> PertShape:
    """
    Derive Beta shape parameters from (a, m, b) and lambda.

    Args:
        spec: Resolved bounds with a != b and a non-NaN mode.
        lambda_param: Weight of the mode in the PERT mean.

    Returns:
        PertShape with alpha, beta and the PERT mean.
    """
    a, m, b = spec.a, spec.m, spec.b
    mu = (a + lambda_param * m + b) / (lambda_param + 2)

    # Same values as alpha = (mu-a)(2m-a-b)/((m-mu)(b-a)) and
    # beta = alpha (b-mu)/(mu-a), without the 0/0 when m == mu.
    t = float((m - a) / (b - a))
    alpha = 1.0 + lambda_param * t
    beta = 1.0 + lambda_param * (1.0 - t)
    logger.debug("PERT shape for mode %s, lambda %s: alpha=%s beta=%s", m, lambda_param, alpha, beta)
    return PertShape(alpha=alpha, beta=beta, mean=mu)


def pert_icdf(u: np.ndarray, alpha: float, beta: float) -> np.ndarray:
    """u-quantiles of Beta(alpha, beta) on [0, 1]."""
    return special.betaincinv(alpha, beta, u)


def sample_pert(
    bounds: BoundsLike,
    shape: ShapeLike = DEFAULT_SHAPE,
    force_mode_first: bool = False,
    lambda_param: float = DEFAULT_LAMBDA,
    random_state: RandomStateLike = None,
    return_pdf: bool = False,
) -> Union[np.ndarray, Tuple[np.ndarray, Density]]:
    """
    Sample from the PERT distribution.

    Args:
        bounds: [a, m, b], [a, b] (mode at the midpoint), [m] (constant), or
            [a, NaN, b] for a uniform distribution on [a, b].
        shape: N for an N-by-N array, or [M, N, ...] for explicit dimensions.
        force_mode_first: If True, the first element is set to the mode. With
            a NaN mode the midpoint is used.
        lambda_param: Non-negative shape parameter (default 4). Higher values
            give a peakier distribution; 0 gives a uniform one.
        random_state: Seed or uniform source for reproducibility.
        return_pdf: If True, also return the density function.

    Returns:
        numpy array of the requested shape, or (array, density) when
        return_pdf is True.

    Raises:
        InvalidArgumentError: For malformed bounds, a mode outside [a, b],
            an invalid shape, or a negative or non-finite lambda.

    Note:
        Inverting the incomplete Beta function is considerably slower than
        the triangular transform. Take care with very large shapes.
    """
    lambda_param = validate_lambda(lambda_param)
    spec = resolve_bounds(bounds)
    dims = normalize_shape(shape)

    if spec.is_degenerate:
        samples = constant_samples(spec, dims)
        return (samples, DiracDensity(a=spec.a)) if return_pdf else samples

    u = draw_uniform(dims, random_state)

    mode = spec.m
    if spec.is_uniform:
        samples = uniform_samples(spec, u)
        mode = spec.midpoint
        alpha, beta = 1.0, 1.0
    else:
        pert_shape = derive_pert_shape(spec, lambda_param)
        alpha, beta = pert_shape.alpha, pert_shape.beta
        samples = spec.a + spec.width * pert_icdf(u, alpha, beta)

    if force_mode_first:
        set_mode_first(samples, mode)

    if return_pdf:
        return samples, PertDensity(alpha=alpha, beta=beta, a=spec.a, b=spec.b)
    return samples
