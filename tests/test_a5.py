import pytest

from cryptolab.a5 import A5, default_generator


def test_default_first_bit():
    assert default_generator().step() == 0


def test_default_registers():
    generator = default_generator()
    assert generator.registers == (
        "1000101100010001001",
        "0101100100011110011010",
        "11110000111101100111101",
    )


def test_register_lengths_preserved():
    generator = default_generator()
    generator.generate(20)
    assert [len(r) for r in generator.registers] == [19, 22, 23]


def test_generate_length_and_output():
    generator = default_generator()
    bits = generator.generate(6)
    assert len(bits) == 6
    assert set(bits) <= {"0", "1"}
    assert generator.output == bits


def test_default_first_three_bits():
    assert default_generator().generate(3) == "001"


def test_default_registers_after_two_steps():
    generator = default_generator()
    generator.generate(2)
    assert generator.registers == (
        "1110001011000100010",
        "1010110010001111001101",
        "01111000011110110011110",
    )


def test_minority_register_stalls():
    generator = A5(["10", "00", "00"], [0, 0, 0], [[0], [0], [0]])
    generator.step()
    assert generator.registers[0] == "10"


def test_all_equal_shifts_every_register():
    generator = A5(["01", "01", "01"], [0, 0, 0], [[1], [1], [1]])
    generator.step()
    assert generator.registers == ("10", "10", "10")


def test_output_is_xor_of_last_bits():
    generator = A5(["01", "00", "00"], [0, 0, 0], [[0], [0], [0]])
    assert generator.step() == 1


def test_wrong_seed_count_raises():
    with pytest.raises(ValueError):
        A5(["01", "01"], [0, 0], [[0], [0]])


def test_position_out_of_range_raises():
    with pytest.raises(ValueError):
        A5(["01", "01", "01"], [5, 0, 0], [[0], [0], [0]])


def test_invalid_seed_raises():
    with pytest.raises(ValueError):
        A5(["012", "01", "01"], [0, 0, 0], [[0], [0], [0]])