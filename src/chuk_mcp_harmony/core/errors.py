"""
Error taxonomy for the harmony core.

Each error also derives from the builtin exception callers would expect,
so ``except ValueError`` keeps working for invalid input.
"""


class HarmonyError(Exception):
    """Base class for all harmony errors."""


class InvalidArgumentError(HarmonyError, ValueError):
    """Non-positive frequency/ratio/denominator or another out-of-domain argument."""


class DivisionByZeroError(HarmonyError, ZeroDivisionError):
    """Division by (or inversion of) the zero rational."""


class ParseError(HarmonyError, ValueError):
    """Malformed pitch name or structure pattern."""


class UnsupportedInversionError(HarmonyError, ValueError):
    """Inversion index outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Inversion {index} is not supported for a structure of size {size}")
        self.index = index
        self.size = size
