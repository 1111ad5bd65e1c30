"""
BitInt

Arbitrary-width unsigned integers stored as explicit bit lists, with
bitwise logic, ripple-carry addition, saturating subtraction and Booth's
multiplication.
"""

__version__ = "1.0.0"

from bitint.bitint import BitInt
from bitint.ops import add, and_, mul, negate, or_, sub, xor

__all__ = [
    "BitInt",
    "and_",
    "or_",
    "xor",
    "add",
    "negate",
    "sub",
    "mul",
    "__version__",
]
