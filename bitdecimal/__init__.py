"""A 96-bit scaled decimal type with scale alignment, addition and rounding."""

__version__ = "0.1.0"
__all__ = ["value", "scaling", "arithmetic", "rounding"]