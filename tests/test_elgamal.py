import pytest

from cryptolab.elgamal import EllipticCurve, elgamal_encrypt


@pytest.fixture
def curve():
    return EllipticCurve(1, 6, 11)


def _on_curve(curve, point):
    x, y = point
    return (y * y - (x ** 3 + curve.a * x + curve.b)) % curve.prime == 0


def test_points_lie_on_curve(curve):
    assert len(curve.points) == 12
    assert all(_on_curve(curve, p) for p in curve.points)


def test_points_sorted(curve):
    assert curve.points == sorted(curve.points)


def test_inverse_zero(curve):
    with pytest.raises(ValueError):
        curve.inverse(0)


def test_doubling_textbook(curve):
    assert curve.add((2, 7), (2, 7)) == (5, 2)


def test_addition_stays_on_curve(curve):
    assert _on_curve(curve, curve.add((2, 7), (3, 5)))


def test_encode_gives_curve_point(curve):
    point = curve.encode(1)
    assert point in curve.points
    assert point[0] >= 5


def test_encrypt_components(curve):
    base = (2, 7)
    result = elgamal_encrypt(curve, 1, base, 2, 2)
    assert result.second == curve.add(base, base)
    assert result.first == curve.add(result.encoded, result.shared)
    assert _on_curve(curve, result.first)