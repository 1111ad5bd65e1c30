"""
Arbitrary-width unsigned integer backed by an explicit bit list.

This module provides the BitInt type: construction from a positive integer,
conversion back to an integer, bitwise logic and ripple-carry arithmetic.
Multiplication is delegated to bitint.booth.

Bit Numbering Convention:
- Bit 0 = MSB (Most Significant Bit)
- Bit N-1 = LSB (Least Significant Bit)

Operands of different widths are always aligned at their LSBs. Widths are
never normalized: leading zero bits are kept, and add/negate/sub/mul widen
the receiver instead of overflowing.
"""


class BitInt:
    """Unsigned integer stored as a list of booleans, MSB first."""

    def __init__(self, value: "int | BitInt") -> None:
        """
        Initialize from a positive integer or by cloning another BitInt.

        The width of an integer-built value is ceil(log2(value)) + 1 bits.

        Args:
            value: Positive integer magnitude, or a BitInt to copy

        Raises:
            TypeError: If value is neither an int nor a BitInt
            ValueError: If value is an int <= 0
        """
        if isinstance(value, BitInt):
            self.length = value.length
            self.bits = list(value.bits)
            return

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot build BitInt from {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"BitInt magnitude must be positive, got {value}")

        # ceil(log2(value)) computed exactly
        self.length = (value - 1).bit_length() + 1
        self.bits = [False] * self.length

        # Fill from the LSB backward
        for pos in range(self.length - 1, -1, -1):
            self.bits[pos] = value % 2 == 1
            value >>= 1

    @classmethod
    def from_bits(cls, bits) -> "BitInt":
        """
        Build a BitInt from an explicit bit sequence.

        Args:
            bits: Iterable of truthy/falsy values, MSB first

        Returns:
            New BitInt holding exactly those bits

        Raises:
            ValueError: If bits is empty
        """
        values = [bool(b) for b in bits]
        if not values:
            raise ValueError("BitInt needs at least one bit")

        result = cls.__new__(cls)
        result.bits = values
        result.length = len(values)
        return result

    def copy(self) -> "BitInt":
        """Return an independent copy of this value."""
        return BitInt(self)

    def _assign(self, bits: list) -> None:
        """Replace storage with a freshly built bit list."""
        self.bits = bits
        self.length = len(bits)

    def _bit_from_lsb(self, offset: int) -> bool:
        """Bit at offset counted from the LSB; False beyond the stored width."""
        if offset < self.length:
            return self.bits[self.length - offset - 1]
        return False

    # -- Representation & conversion ---------------------------------------

    def get_bit(self, pos: int) -> int:
        """
        Get bit value at position.

        Args:
            pos: Bit position (0 = MSB, length-1 = LSB)

        Returns:
            Bit value (0 or 1)

        Raises:
            IndexError: If pos is out of range
        """
        if pos < 0 or pos >= self.length:
            raise IndexError(f"Bit position {pos} out of range [0, {self.length})")
        return 1 if self.bits[pos] else 0

    def set_bit(self, pos: int, value: int) -> None:
        """
        Set bit value at position.

        Args:
            pos: Bit position (0 = MSB, length-1 = LSB)
            value: Bit value (0 or non-zero for 1)

        Raises:
            IndexError: If pos is out of range
        """
        if pos < 0 or pos >= self.length:
            raise IndexError(f"Bit position {pos} out of range [0, {self.length})")
        self.bits[pos] = bool(value)

    def zero(self) -> None:
        """Set all bits to zero, keeping the width."""
        for i in range(self.length):
            self.bits[i] = False

    def to_int(self, max_bits: "int | None" = None) -> int:
        """
        Convert to a Python integer.

        Python integers do not wrap, so the plain conversion is always exact.
        Pass max_bits to emulate a fixed-width host integer that refuses to
        silently drop high bits.

        Args:
            max_bits: Optional width limit for the result

        Returns:
            Unsigned value of the stored bits

        Raises:
            OverflowError: If a set bit lies at or above max_bits (from LSB)
            ValueError: If max_bits is negative
        """
        if max_bits is not None:
            if max_bits < 0:
                raise ValueError(f"max_bits must be non-negative, got {max_bits}")
            for offset in range(max_bits, self.length):
                if self._bit_from_lsb(offset):
                    raise OverflowError(
                        f"{self.to_string()} does not fit in {max_bits} bits"
                    )

        total = 0
        for bit in self.bits:
            total += 1 if bit else 0
            total <<= 1
        # Undo the final shift
        return total >> 1

    def to_string(self) -> str:
        """Render as '0b' followed by every stored bit, MSB first."""
        return "0b" + "".join("1" if bit else "0" for bit in self.bits)

    def equals(self, other: "BitInt") -> bool:
        """
        Check for an identical bit pattern, width included.

        Args:
            other: Other BitInt

        Returns:
            True if equal, False otherwise
        """
        return self.length == other.length and self.bits == other.bits

    def __int__(self) -> int:
        return self.to_int()

    __index__ = __int__

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BitInt('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitInt):
            return NotImplemented
        return self.equals(other)

    # Mutable, so not hashable
    __hash__ = None

    # -- Register helpers ----------------------------------------------------

    def pad_front(self, count: int = 1) -> "BitInt":
        """
        Zero-extend at the MSB end.

        Args:
            count: Number of leading zero bits to add

        Returns:
            self
        """
        if count > 0:
            self._assign([False] * count + self.bits)
        return self

    def pad_back(self, count: int = 1) -> "BitInt":
        """
        Append zero bits at the LSB end (a left shift that widens).

        Args:
            count: Number of trailing zero bits to add

        Returns:
            self
        """
        if count > 0:
            self._assign(self.bits + [False] * count)
        return self

    def truncate(self, width: int) -> "BitInt":
        """
        Keep only the low width bits, dropping high bits.

        Has no effect when the value is already width bits or narrower.

        Args:
            width: Number of least significant bits to keep

        Returns:
            self

        Raises:
            ValueError: If width is not positive
        """
        if width <= 0:
            raise ValueError(f"Truncation width must be positive, got {width}")
        if width < self.length:
            self._assign(self.bits[self.length - width :])
        return self

    def arithmetic_right_shift(self) -> "BitInt":
        """
        Shift right by one, replicating the sign bit.

        The LSB is dropped and a copy of the current MSB is prepended, so the
        width is unchanged.

        Returns:
            self
        """
        self._assign([self.bits[0]] + self.bits[:-1])
        return self

    # -- Bitwise logic -------------------------------------------------------

    def and_(self, other: "BitInt") -> "BitInt":
        """
        AND with another value in place, aligned at the LSB.

        Receiver bits beyond the other operand's width are cleared, as if the
        shorter operand had been zero-extended.

        Args:
            other: Operand

        Returns:
            self
        """
        overlap = min(self.length, other.length)
        for i in range(overlap):
            pos = self.length - i - 1
            self.bits[pos] = self.bits[pos] and other.bits[other.length - i - 1]

        if self.length > other.length:
            for i in range(other.length, self.length):
                self.bits[self.length - i - 1] = False
        return self

    def or_(self, other: "BitInt") -> "BitInt":
        """
        OR with another value in place, aligned at the LSB.

        Receiver bits beyond the other operand's width are left unchanged.

        Args:
            other: Operand

        Returns:
            self
        """
        overlap = min(self.length, other.length)
        for i in range(overlap):
            pos = self.length - i - 1
            self.bits[pos] = self.bits[pos] or other.bits[other.length - i - 1]
        return self

    def xor(self, other: "BitInt") -> "BitInt":
        """
        XOR with another value in place, aligned at the LSB.

        Receiver bits beyond the other operand's width are left unchanged.

        Args:
            other: Operand

        Returns:
            self
        """
        overlap = min(self.length, other.length)
        for i in range(overlap):
            pos = self.length - i - 1
            self.bits[pos] = self.bits[pos] != other.bits[other.length - i - 1]
        return self

    def invert(self) -> "BitInt":
        """Flip every stored bit in place."""
        for i in range(self.length):
            self.bits[i] = not self.bits[i]
        return self

    # -- Arithmetic ------------------------------------------------------------

    def add(self, other: "BitInt") -> "BitInt":
        """
        Ripple-carry addition in place.

        The result is max(len(self), len(other)) + 2 bits wide: the sum
        positions, the final carry-out and a leading guard bit. Addition
        always widens and never overflows.

        Args:
            other: Addend

        Returns:
            self
        """
        positions = max(self.length, other.length) + 1
        result = [False] * (positions + 1)
        carry = False

        for i in range(positions):
            a = self._bit_from_lsb(i)
            b = other._bit_from_lsb(i)
            result[positions - i] = a ^ b ^ carry
            carry = (a and b) or (carry and (a or b))

        result[0] = carry
        self._assign(result)
        return self

    def negate(self) -> "BitInt":
        """
        Two's-complement negation in place: invert, then add one.

        The result is congruent to -value modulo 2**old_length and is two
        bits wider than before. Only meaningful as an intermediate for
        subtraction and multiplication.

        Returns:
            self
        """
        self.invert()
        return self.add(BitInt(1))

    def sub(self, other: "BitInt") -> "BitInt":
        """
        Saturating subtraction in place.

        Adds the two's complement of other over a window one bit wider than
        both operands. A negative difference clamps every bit to zero while
        keeping the widened length.

        Args:
            other: Subtrahend

        Returns:
            self
        """
        window = max(self.length, other.length) + 1

        subtrahend = other.copy().pad_front(window - other.length)
        subtrahend.negate()
        self.add(subtrahend)

        if self._bit_from_lsb(window - 1):
            self.zero()
        else:
            # Drop the carry out of the window
            for pos in range(self.length - window):
                self.bits[pos] = False
        return self

    def mul(self, other: "BitInt") -> "BitInt":
        """
        Multiply in place using Booth's algorithm.

        The result is len(self) + len(other) bits wide.

        Args:
            other: Multiplier

        Returns:
            self
        """
        from bitint.booth import booth_multiply

        self._assign(booth_multiply(self, other))
        return self

    # -- Pure operators --------------------------------------------------------

    def __and__(self, other: "BitInt") -> "BitInt":
        return self.copy().and_(other)

    def __or__(self, other: "BitInt") -> "BitInt":
        return self.copy().or_(other)

    def __xor__(self, other: "BitInt") -> "BitInt":
        return self.copy().xor(other)

    def __add__(self, other: "BitInt") -> "BitInt":
        return self.copy().add(other)

    def __sub__(self, other: "BitInt") -> "BitInt":
        return self.copy().sub(other)

    def __mul__(self, other: "BitInt") -> "BitInt":
        return self.copy().mul(other)
