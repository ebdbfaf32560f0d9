import logging

import pytest

from gosper import (
    AXIOM,
    PRODUCTIONS,
    Curve,
    InvalidGenerationError,
    Symbol,
    generate,
    rewrite,
    segment_count,
)
from gosper.symbols import RULE_A, RULE_B, parse, render


def test_productions_have_seven_draws_and_eight_turns():
    for production in PRODUCTIONS.values():
        assert len(production) == 15
        assert sum(s.is_draw for s in production) == 7


def test_rules_round_trip_through_notation():
    assert render(PRODUCTIONS[Symbol.DRAW_A]) == RULE_A
    assert render(PRODUCTIONS[Symbol.DRAW_B]) == RULE_B


def test_generation_zero_is_axiom():
    assert generate(0).symbols == (Symbol.DRAW_A,)
    assert generate(0) == Curve()


def test_generation_one_is_a_production():
    assert generate(1).symbols == parse("ALBLLBRARRAARBL")


def test_turns_pass_through_unchanged():
    symbols = parse("LBR")
    assert rewrite(symbols) == (
        (Symbol.TURN_LEFT,) + PRODUCTIONS[Symbol.DRAW_B] + (Symbol.TURN_RIGHT,)
    )


@pytest.mark.parametrize("n", range(5))
def test_growth_per_generation(n):
    curve = generate(n)
    following = curve.next()
    assert following.segment_count() == 7 * curve.segment_count()
    assert following.turn_count() == curve.turn_count() + 8 * curve.segment_count()
    assert following.generation == n + 1


@pytest.mark.parametrize("n", range(6))
def test_segment_count_is_power_of_seven(n):
    assert segment_count(generate(n)) == 7**n


def test_segment_count_accepts_plain_sequences():
    assert segment_count(parse("ALBR")) == 2


def test_generation_two_length():
    assert len(generate(2)) == 49 + 64


def test_curves_are_immutable_values():
    curve = generate(2)
    assert curve == generate(2)
    assert hash(curve) == hash(generate(2))
    assert curve.next() != curve
    assert curve[0] is Symbol.DRAW_A
    assert list(curve)[: len(AXIOM)] == list(AXIOM)


@pytest.mark.parametrize("n", [-1, -7])
def test_negative_generation_is_rejected(n):
    with pytest.raises(InvalidGenerationError):
        generate(n)


@pytest.mark.parametrize("n", [1.0, "2", True, None])
def test_non_integer_generation_is_rejected(n):
    with pytest.raises(InvalidGenerationError):
        generate(n)


def test_invalid_generation_is_a_value_error():
    with pytest.raises(ValueError, match=">= 0"):
        Curve.generate(-1)


def test_curve_rejects_non_symbols():
    with pytest.raises(TypeError):
        Curve("A")
    with pytest.raises(TypeError):
        Curve([Symbol.DRAW_A, "L"])


def test_rewrite_rejects_non_symbols():
    with pytest.raises(TypeError):
        rewrite(["A"])


def test_generation_is_not_caller_supplied():
    with pytest.raises(TypeError):
        Curve(generation=3)


def test_only_grown_curves_know_their_generation():
    assert Curve().generation == 0
    assert generate(3).generation == 3
    other = Curve(parse("BLA"))
    assert other.generation is None
    assert other.next().generation is None
    assert other.next().segment_count() == 14


def test_rewriting_logs_each_generation(caplog):
    caplog.set_level(logging.DEBUG, logger="gosper.curve")
    generate(2)
    assert "Generation 1: 15 symbols" in caplog.text
    assert "Generation 2: 113 symbols" in caplog.text
