import pytest

from cryptolab.protocols import diffie_hellman, fiat_shamir, mod_pow

SOURCE_EXCHANGES = [(13, 4, 5, 2), (43, 23, 25, 33), (113, 43, 54, 71)]


@pytest.mark.parametrize(
    "base,exponent,modulus",
    [(4, 5, 13), (23, 25, 43), (43, 71, 113), (2, 29, 53), (7, 0, 11), (3, 100, 101)],
)
def test_mod_pow_matches_builtin_for_nonzero_residues(base, exponent, modulus):
    assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_pow_multiple_of_modulus_gives_one():
    assert mod_pow(26, 3, 13) == 1


def test_mod_pow_rejects_zero_modulus():
    with pytest.raises(ValueError):
        mod_pow(3, 2, 0)


@pytest.mark.parametrize("p,alpha,x_a,x_b", SOURCE_EXCHANGES)
def test_diffie_hellman_parties_agree(p, alpha, x_a, x_b):
    exchange = diffie_hellman(p, alpha, x_a, x_b)
    assert exchange.key_a == exchange.key_b


@pytest.mark.parametrize("p,alpha,x_a,x_b", SOURCE_EXCHANGES)
def test_diffie_hellman_public_values(p, alpha, x_a, x_b):
    exchange = diffie_hellman(p, alpha, x_a, x_b)
    assert exchange.y_a == pow(alpha, x_a, p)
    assert exchange.y_b == pow(alpha, x_b, p)
    assert exchange.key_a == pow(alpha, x_a * x_b, p)


def test_diffie_hellman_first_source_example():
    exchange = diffie_hellman(13, 4, 5, 2)
    assert exchange.key_a == 9


def test_fiat_shamir_small_example_accepted():
    run = fiat_shamir(7, 5, 3, 16, 2, 0, 2)
    assert run.n == 7 * 5
    assert run.v == 9
    assert run.accepted
    assert [r.e for r in run.rounds] == [0, 1]
    assert [r.x for r in run.rounds] == [16, 2]


def test_fiat_shamir_large_example_accepted():
    run = fiat_shamir(683, 811, 43215, 16785, 2, 1, 1)
    assert run.n == 683 * 811
    assert len(run.rounds) == 1
    (only,) = run.rounds
    assert only.e == 1
    assert only.y == (16785 * 43215) % run.n
    assert only.lhs == only.rhs


def test_fiat_shamir_zero_challenge_reveals_witness():
    run = fiat_shamir(7, 5, 3, 16, 2, 0, 1)
    (first,) = run.rounds
    assert first.y == 16
    assert first.rhs == first.a


def test_fiat_shamir_nonzero_challenges_use_secret():
    run = fiat_shamir(11, 13, 5, 7, 9, 2, 3)
    for r in run.rounds:
        assert r.y == (r.x * 5) % run.n
        assert r.rhs == (r.a * run.v) % run.n
    assert run.accepted


def test_fiat_shamir_zero_iterations():
    run = fiat_shamir(7, 5, 3, 16, 2, 0, 0)
    assert run.rounds == []


@pytest.mark.parametrize("p,q,iterations", [(0, 5, 1), (7, -1, 1), (7, 5, -1)])
def test_fiat_shamir_rejects_bad_arguments(p, q, iterations):
    with pytest.raises(ValueError):
        fiat_shamir(p, q, 3, 16, 2, 0, iterations)