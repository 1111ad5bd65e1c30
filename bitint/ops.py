"""
Pure (non-mutating) BitInt operations.

Each function clones its first operand, applies the in-place method to the
clone and returns it. Neither argument is modified.
"""

from bitint.bitint import BitInt


def and_(a: BitInt, b: BitInt) -> BitInt:
    """Return a AND b; bits of a beyond b's width become zero."""
    return a.copy().and_(b)


def or_(a: BitInt, b: BitInt) -> BitInt:
    """Return a OR b; bits of a beyond b's width are kept as-is."""
    return a.copy().or_(b)


def xor(a: BitInt, b: BitInt) -> BitInt:
    """Return a XOR b; bits of a beyond b's width are kept as-is."""
    return a.copy().xor(b)


def add(a: BitInt, b: BitInt) -> BitInt:
    """Return a + b, max(len(a), len(b)) + 2 bits wide."""
    return a.copy().add(b)


def negate(a: BitInt) -> BitInt:
    """Return the two's complement of a, two bits wider than a."""
    return a.copy().negate()


def sub(a: BitInt, b: BitInt) -> BitInt:
    """Return a - b, or zero if b > a."""
    return a.copy().sub(b)


def mul(a: BitInt, b: BitInt) -> BitInt:
    """Return a * b, len(a) + len(b) bits wide."""
    return a.copy().mul(b)
