"""Exceptions raised by the bounded samplers."""


class InvalidArgumentError(ValueError):
    """Raised for malformed bounds, an out-of-order mode, a bad shape or a bad lambda."""
