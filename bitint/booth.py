"""
Booth's multiplication over BitInt registers.

Booth's algorithm is a signed, two's-complement technique. BitInt is
unsigned, so both operands get a leading zero guard bit before the
registers are built; otherwise a set MSB would be read as a sign.

Register layout (r = (x + 1) + n + 1 bits, x = len(multiplicand),
y = len(multiplier), n = x + y):

    A = 0 | multiplicand | 0 ... 0 | 0
    S = -A mod 2**r
    P = 0 ... 0 | multiplier zero-extended to n bits | 0

The low guard bit of P starts as 0 and holds the previously shifted-out
multiplier bit for the pair test.
"""

# Import for type hints only
if False:  # noqa: SIM108
    from bitint.bitint import BitInt


def build_registers(multiplicand: "BitInt", multiplier: "BitInt") -> tuple:
    """
    Build the A, S and P registers at a common width.

    Args:
        multiplicand: Value being multiplied (not modified)
        multiplier: Value driving the add/subtract decisions (not modified)

    Returns:
        Tuple (a, s, p) of new BitInt registers, all the same width
    """
    product_width = multiplicand.length + multiplier.length
    register_width = multiplicand.length + 1 + product_width + 1

    a = multiplicand.copy()
    a.pad_front(1)
    a.pad_back(product_width + 1)

    # Negation widens by two; fold back to the register width
    s = a.copy()
    s.negate()
    s.truncate(register_width)

    p = multiplier.copy()
    p.pad_front(product_width - multiplier.length)
    p.pad_back(1)
    p.pad_front(multiplicand.length + 1)

    return a, s, p


def booth_step(p: "BitInt", a: "BitInt", s: "BitInt") -> None:
    """
    Run one Booth iteration on the accumulator in place.

    Inspects the two least significant bits of P:
    - 00 or 11: shift only
    - 01: P += A, then shift
    - 10: P += S (P -= A), then shift

    Args:
        p: Accumulator register (modified in place)
        a: Multiplicand register
        s: Negated multiplicand register
    """
    width = p.length
    bit1 = p.bits[width - 2]
    bit2 = p.bits[width - 1]

    if not bit1 and bit2:
        p.add(a)
        p.truncate(width)
    elif bit1 and not bit2:
        p.add(s)
        p.truncate(width)

    p.arithmetic_right_shift()


def booth_multiply(multiplicand: "BitInt", multiplier: "BitInt") -> list:
    """
    Multiply two unsigned values with Booth's algorithm.

    Args:
        multiplicand: First factor (not modified)
        multiplier: Second factor (not modified)

    Returns:
        Product bits, MSB first, exactly len(multiplicand) + len(multiplier)
        bits wide
    """
    product_width = multiplicand.length + multiplier.length
    a, s, p = build_registers(multiplicand, multiplier)

    for _ in range(product_width):
        booth_step(p, a, s)

    # Drop the guard bit; the product fits in the low field bits
    return p.bits[p.length - product_width - 1 : p.length - 1]
