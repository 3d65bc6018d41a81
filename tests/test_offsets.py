from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from filekit import ExplicitZero, MalformedOffset, Signed, parse_offset, resolve
from filekit.offsets import INT64_MAX, INT64_MIN, saturating_neg


@pytest.mark.parametrize(
    "token, expected",
    [
        ("+0", ExplicitZero()),
        ("0", Signed(0)),
        ("-0", Signed(0)),
        ("5", Signed(-5)),
        ("+5", Signed(5)),
        ("-5", Signed(-5)),
        ("007", Signed(-7)),
    ],
)
def test_parse_offset(token: str, expected: object) -> None:
    assert parse_offset(token) == expected


@pytest.mark.parametrize("token", ["abc", "3.14", "", "+", "-", " 5", "1_000", "5a", "--5", "+-5"])
def test_parse_offset_rejects_non_integers(token: str) -> None:
    with pytest.raises(MalformedOffset) as e:
        parse_offset(token)
    assert e.value.token == token
    assert str(e.value) == f"illegal line count -- {token}"


def test_malformed_offset_names_the_unit() -> None:
    with pytest.raises(MalformedOffset) as e:
        parse_offset("foo", unit="byte")
    assert str(e.value) == "illegal byte count -- foo"


def test_parse_offset_64bit_boundaries() -> None:
    # A bare maximum negates exactly; only the minimum has no positive twin.
    assert parse_offset(str(INT64_MAX)) == Signed(INT64_MIN + 1)
    assert parse_offset(f"+{INT64_MAX}") == Signed(INT64_MAX)
    assert parse_offset(str(INT64_MIN + 1)) == Signed(INT64_MIN + 1)
    assert parse_offset(str(INT64_MIN)) == Signed(INT64_MIN)


@pytest.mark.parametrize("token", [str(INT64_MAX + 1), f"+{INT64_MAX + 1}", str(INT64_MIN - 1)])
def test_parse_offset_out_of_range(token: str) -> None:
    with pytest.raises(MalformedOffset):
        parse_offset(token)


def test_saturating_neg() -> None:
    assert saturating_neg(5) == -5
    assert saturating_neg(INT64_MAX) == INT64_MIN + 1
    assert saturating_neg(INT64_MAX + 1) == INT64_MIN
    assert saturating_neg(INT64_MIN) == INT64_MAX


def test_resolve_explicit_zero() -> None:
    assert resolve(ExplicitZero(), 0) is None
    assert resolve(ExplicitZero(), 1) == 0


def test_resolve_positive() -> None:
    assert resolve(Signed(0), 1) is None
    assert resolve(Signed(1), 0) is None
    assert resolve(Signed(2), 1) is None
    assert resolve(Signed(1), 10) == 0
    assert resolve(Signed(2), 10) == 1
    assert resolve(Signed(3), 10) == 2
    assert resolve(Signed(10), 10) == 9


def test_resolve_negative() -> None:
    assert resolve(Signed(-1), 10) == 9
    assert resolve(Signed(-2), 10) == 8
    assert resolve(Signed(-3), 10) == 7
    assert resolve(Signed(-10), 10) == 0
    assert resolve(Signed(-20), 10) == 0
    assert resolve(Signed(-1), 0) == 0
    assert resolve(Signed(INT64_MIN), 10) == 0


_totals = st.integers(min_value=0, max_value=10**6)


@given(total=_totals)
def test_resolve_zero_count_is_always_empty(total: int) -> None:
    assert resolve(Signed(0), total) is None


@given(k=st.integers(min_value=1, max_value=10**6), total=st.integers(min_value=1, max_value=10**6))
def test_resolve_from_start(k: int, total: int) -> None:
    if k > total:
        assert resolve(Signed(k), total) is None
    else:
        assert resolve(Signed(k), total) == k - 1


@given(n=st.integers(min_value=INT64_MIN, max_value=-1), total=_totals)
def test_resolve_from_end(n: int, total: int) -> None:
    expected = 0 if total + n < 0 else total + n
    assert resolve(Signed(n), total) == expected


@given(n=st.integers(min_value=0, max_value=INT64_MAX))
def test_bare_and_minus_tokens_agree(n: int) -> None:
    assert parse_offset(str(n)) == parse_offset(f"-{n}")
