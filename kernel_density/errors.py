"""Exceptions raised by kernel_density."""

__all__ = ["KernelDensityError", "InvalidInputError", "DegenerateSampleError"]


class KernelDensityError(Exception):
    """Base class for all kernel_density errors."""


class InvalidInputError(KernelDensityError, ValueError):
    """An argument is outside the domain an operation accepts."""


class DegenerateSampleError(InvalidInputError):
    """The sample has zero spread, so a spread-based rule is undefined."""
