"""
PURPOSE: Source of i.i.d. uniform variates on [0, 1).

RESPONSIBILITIES:
- Turn a random_state argument (seed, numpy generator or custom source) into
  something that can draw uniform arrays of a requested shape
- Single responsibility: randomness only, no distribution transforms
"""

from typing import Protocol, Tuple, Union, runtime_checkable

import numpy as np


@runtime_checkable
class UniformSource(Protocol):
    """Anything that draws uniform variates on [0, 1) in a requested shape.

    numpy's RandomState and Generator both satisfy this.
    """

    def random(self, size=None): ...


RandomStateLike = Union[int, np.random.RandomState, np.random.Generator, UniformSource, None]


def get_uniform_source(random_state: RandomStateLike = None) -> UniformSource:
    """
    Resolve random_state into a uniform source.

    Args:
        random_state: None for fresh OS entropy, an int seed for reproducible
            draws, or an existing source (numpy RandomState/Generator or any
            object with a random(size) method) to share its stream.

    Returns:
        A UniformSource.
    """
    if isinstance(random_state, UniformSource):
        return random_state
    return np.random.RandomState(random_state)


def draw_uniform(shape: Tuple[int, ...], random_state: RandomStateLike = None) -> np.ndarray:
    """Draw one batch of uniform variates with exactly the given shape."""
    source = get_uniform_source(random_state)
    u = np.asarray(source.random(size=shape), dtype=float)
    if u.shape != tuple(shape):
        raise ValueError(f"uniform source returned shape {u.shape}, expected {tuple(shape)}")
    return u
