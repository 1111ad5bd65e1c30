"""Tests for Booth's multiplication registers and recurrence."""

from bitint.bitint import BitInt
from bitint.booth import booth_multiply, booth_step, build_registers


class TestBuildRegisters:
    """Test register setup."""

    def test_registers_share_width(self) -> None:
        """Test A, S and P are padded to one width before the loop."""
        a, s, p = build_registers(BitInt(5), BitInt(3))
        # (4 + 1) + 7 + 1
        assert a.length == 13
        assert s.length == 13
        assert p.length == 13

    def test_registers_single_bit(self) -> None:
        """Test register contents for 1 * 1."""
        a, s, p = build_registers(BitInt(1), BitInt(1))
        assert a.to_string() == "0b01000"
        assert s.to_string() == "0b11000"
        assert p.to_string() == "0b00010"

    def test_s_is_negated_a(self) -> None:
        """Test A + S wraps to zero at register width."""
        a, s, _ = build_registers(BitInt(13), BitInt(6))
        assert (a.to_int() + s.to_int()) % (2**a.length) == 0

    def test_multiplicand_guard_bit(self) -> None:
        """Test a multiplicand with its MSB set gets a leading zero."""
        a, _, _ = build_registers(BitInt.from_bits([1, 1]), BitInt(1))
        assert a.get_bit(0) == 0
        assert a.get_bit(1) == 1

    def test_inputs_unchanged(self) -> None:
        """Test building registers does not modify the operands."""
        x = BitInt(5)
        y = BitInt(3)
        build_registers(x, y)
        assert x.to_string() == "0b0101"
        assert y.to_string() == "0b011"


class TestBoothStep:
    """Test a single Booth iteration."""

    def test_step_subtract(self) -> None:
        """Test '10' adds S then shifts in the sign bit."""
        a, s, p = build_registers(BitInt(1), BitInt(1))
        booth_step(p, a, s)
        assert p.to_string() == "0b11101"

    def test_step_add(self) -> None:
        """Test '01' adds A then shifts."""
        a, s, p = build_registers(BitInt(1), BitInt(1))
        booth_step(p, a, s)
        booth_step(p, a, s)
        assert p.to_string() == "0b00010"

    def test_step_shift_only(self) -> None:
        """Test '00' only shifts."""
        a, s, _ = build_registers(BitInt(1), BitInt(1))
        p = BitInt.from_bits([1, 0, 1, 0, 0])
        booth_step(p, a, s)
        assert p.to_string() == "0b11010"

    def test_step_keeps_register_width(self) -> None:
        """Test additions are folded back to the register width."""
        a, s, p = build_registers(BitInt(7), BitInt(5))
        width = p.length
        for _ in range(5):
            booth_step(p, a, s)
            assert p.length == width


class TestBoothMultiply:
    """Test the full product."""

    def test_single_bits(self) -> None:
        """Test 1 * 1."""
        assert booth_multiply(BitInt(1), BitInt(1)) == [False, True]

    def test_product(self) -> None:
        """Test 2 * 3 == 6 at width 5."""
        assert booth_multiply(BitInt(2), BitInt(3)) == [False, False, True, True, False]

    def test_alternating_multiplier(self) -> None:
        """Test a multiplier with many 01/10 transitions."""
        multiplier = BitInt.from_bits([1, 0, 1, 0, 1, 0, 1])
        product = BitInt.from_bits(booth_multiply(BitInt(27), multiplier))
        assert product.to_int() == 27 * 0b1010101
        assert product.length == 6 + 7

    def test_all_ones_operands(self) -> None:
        """Test operands that are all ones, the worst case for sign misreads."""
        a = BitInt.from_bits([1] * 8)
        b = BitInt.from_bits([1] * 8)
        product = BitInt.from_bits(booth_multiply(a, b))
        assert product.to_int() == 255 * 255
        assert product.length == 16
