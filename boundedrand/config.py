"""
PURPOSE: Default parameters for the bounded samplers.

RESPONSIBILITIES:
- PERT shape parameter default
- Output shape default
- Numeric tolerances and sentinels for degenerate cases
- Single responsibility: configuration only, no sampling logic
"""

import numpy as np

# Sampling Parameters
DEFAULT_LAMBDA = 4.0  # Classic PERT weighting of the mode: mean = (a + 4m + b) / 6
DEFAULT_SHAPE = (1, 1)  # Single draw, returned as a 1x1 array
DEFAULT_NUM_SAMPLES = 100_000  # Column length used by uncertain_variable
RANDOM_SEED = None  # Set to int for reproducibility, None for random

# Numeric Guards
DIRAC_PDF_SENTINEL = np.finfo(float).max  # Density value at x == a when a == b (point mass)


def get_defaults():
    """Return the default sampler configuration."""
    return {
        "lambda": DEFAULT_LAMBDA,
        "shape": DEFAULT_SHAPE,
        "num_samples": DEFAULT_NUM_SAMPLES,
        "random_seed": RANDOM_SEED,
    }
