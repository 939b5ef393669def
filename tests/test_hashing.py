import pytest

from algokit.hashing import (
    MOD,
    BasePower,
    HashNum,
    PairNum,
    PrefixHash,
    compare,
    find_lcp,
    hash_string,
    merge_hash,
)


@pytest.fixture
def powers():
    return BasePower(HashNum(131))


def test_modulus_is_fixed_prime():
    assert MOD == 18446744069414584321
    assert HashNum(MOD) == 0
    assert HashNum(MOD + 5) == HashNum(5)


def test_negative_values_wrap():
    assert HashNum(-1).value == MOD - 1
    assert HashNum(-1) + 1 == 0
    assert -HashNum(7) + HashNum(7) == 0


def test_division_round_trip():
    a, b = HashNum(123456789), HashNum(987654321)
    assert (a / b) * b == a
    assert 1 / b * b == 1


def test_fermat():
    assert HashNum(12345).pow(MOD - 1) == 1


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        HashNum(3) / HashNum(0)


def test_negative_exponent_raises():
    with pytest.raises(ValueError):
        HashNum(3).pow(-1)


def test_pairnum_componentwise():
    p = PairNum(HashNum(2), HashNum(3)) * PairNum(HashNum(5), HashNum(7))
    assert p == PairNum(HashNum(10), HashNum(21))
    q = PairNum(HashNum(4), HashNum(9)) + 1
    assert q == PairNum(HashNum(5), HashNum(10))


def test_pairnum_lexicographic_order():
    assert PairNum(1, 5) < PairNum(2, 0)
    assert PairNum(1, 5) > PairNum(1, 4)
    assert PairNum(3) == PairNum(3, 3)


def test_base_power_matches_pow(powers):
    for k in (0, 1, 5, 40):
        assert powers.power(k) == HashNum(131).pow(k)
    powers.clear()
    assert len(powers) == 1
    assert powers[3] == HashNum(131).pow(3)


def test_base_power_negative_raises(powers):
    with pytest.raises(ValueError):
        powers.power(-1)


def test_hash_string_matches_prefix_hash(powers):
    s = "abracadabra"
    ph = PrefixHash(s, powers)
    assert hash_string(s, powers) == ph[len(s)]
    assert len(ph) == len(s)


def test_append_matches_build(powers):
    built = PrefixHash("hello", powers)
    grown = PrefixHash("", powers)
    for c in "hello":
        grown.append(c)
    assert grown.data == built.data


def test_equal_slices_have_equal_hashes(powers):
    ph = PrefixHash("abcabcab", powers)
    assert ph.range_hash(0, 3) == ph.range_hash(3, 6)
    assert ph[(2, 5)] == ph(2, 5)
    assert ph.range_hash(0, 3) != ph.range_hash(1, 4)


def test_single_item_hash_is_its_code(powers):
    ph = PrefixHash("xyz", powers)
    assert ph.range_hash(1, 2) == HashNum(ord("y"))


def test_range_out_of_bounds(powers):
    ph = PrefixHash("abc", powers)
    with pytest.raises(IndexError):
        ph.range_hash(2, 5)


def test_find_lcp(powers):
    a = PrefixHash("abcab", powers)
    assert find_lcp(a, 0, a, 3) == 2
    assert find_lcp(a, 0, a, 0) == len("abcab")
    b = PrefixHash("zzz", powers)
    assert find_lcp(a, 0, b, 0) == 0


def test_compare(powers):
    a = PrefixHash("abd", powers)
    b = PrefixHash("abc", powers)
    assert compare(a, 0, 3, a, 0, 3) == 0
    assert compare(a, 0, 3, b, 0, 3) == 1
    assert compare(b, 0, 3, a, 0, 3) == -1


def test_compare_prefix_counts_greater(powers):
    a = PrefixHash("ab", powers)
    b = PrefixHash("abc", powers)
    assert compare(a, 0, 2, b, 0, 3) == 1
    assert compare(b, 0, 3, a, 0, 2) == -1


def test_merge_hash(powers):
    x, y = "hash", "table"
    whole = PrefixHash(x + y, powers)
    hx = PrefixHash(x, powers).range_hash(0, len(x))
    hy = PrefixHash(y, powers).range_hash(0, len(y))
    assert merge_hash(hx, hy, powers.power(len(y))) == whole.range_hash(0, len(x + y))


def test_pair_hashing():
    powers = BasePower(PairNum(HashNum(131), HashNum(1_000_003)))
    ph = PrefixHash(b"abab", powers)
    assert ph.range_hash(0, 2) == ph.range_hash(2, 4)
    assert ph.range_hash(0, 2) != ph.range_hash(1, 3)
    assert hash_string(b"abab", powers) == ph[4]