"""
Pseudorandom samples from bounded, mode-aware distributions.

PURPOSE:
    Model uncertain quantities bracketed by a minimum, most-likely and
    maximum value, using either the triangular or the PERT distribution.

RESPONSIBILITIES:
    - Resolve and validate [a, m, b] bounds vectors
    - Sample triangular variates by closed-form inverse CDF
    - Sample PERT variates by inverse regularized incomplete Beta
    - Build the PERT density function on request

SRP/DRY CHECK:
    Each submodule has a single responsibility:
    - bounds.py: Parameter resolution and validation only
    - shape.py: Output shape normalization only
    - uniform.py: Source of uniform variates only
    - triangular.py: Triangular sampling only
    - pert.py: PERT shape derivation, sampling and density only
    - uncertain.py: Best-guess-first column samples only
"""

from .bounds import DistributionSpec, resolve_bounds, validate_lambda
from .errors import InvalidArgumentError
from .pert import DiracDensity, PertDensity, PertShape, derive_pert_shape, sample_pert
from .shape import normalize_shape
from .triangular import sample_triangular
from .uncertain import uncertain_variable

__version__ = "0.1.0"

__all__ = [
    "sample_triangular",
    "sample_pert",
    "uncertain_variable",
    "resolve_bounds",
    "validate_lambda",
    "normalize_shape",
    "derive_pert_shape",
    "DistributionSpec",
    "PertShape",
    "PertDensity",
    "DiracDensity",
    "InvalidArgumentError",
]
