"""
Uncertain variables: large column samples whose first element is the best guess.

Adding uncertain variables element-wise propagates the uncertainty, while the
first element of the total still holds the sum of the best guesses.
"""

from boundedrand.config import DEFAULT_LAMBDA, DEFAULT_NUM_SAMPLES
from boundedrand.errors import InvalidArgumentError
from boundedrand.pert import sample_pert
from boundedrand.triangular import sample_triangular

KINDS = ("pert", "triangular")


def uncertain_variable(
    bounds,
    n: int = DEFAULT_NUM_SAMPLES,
    kind: str = "pert",
    lambda_param: float = DEFAULT_LAMBDA,
    random_state=None,
):
    """
    Sample an (n, 1) column with the mode in the first row.

    Args:
        bounds: [a, m, b] guesstimate (or [a, b] / [m], see sample_pert).
        n: Number of samples.
        kind: "pert" or "triangular".
        lambda_param: PERT shape parameter, ignored for triangular.
        random_state: Seed or uniform source for reproducibility.

    Raises:
        InvalidArgumentError: For an unknown kind or invalid bounds.
    """
    if kind == "pert":
        return sample_pert(
            bounds, [n, 1], force_mode_first=True,
            lambda_param=lambda_param, random_state=random_state,
        )
    if kind == "triangular":
        return sample_triangular(bounds, [n, 1], force_mode_first=True, random_state=random_state)
    raise InvalidArgumentError(f"kind must be one of {KINDS}, got {kind!r}")


if __name__ == "__main__":
    # How much do a dime, nickel and quarter weigh together, in grams?
    # (The true answer is 12.9 g.)
    dime = uncertain_variable([1, 1.5, 3.5])
    nickel = uncertain_variable([3, 5, 6])
    quarter = uncertain_variable([5, 8, 10])
    total = dime + nickel + quarter
    print(f"best guess: {total[0, 0]:.2f} g, mean: {total.mean():.2f} g")
