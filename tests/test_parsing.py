import pytest
from packages.engine import Absent, ExactAt, PresentNotAt, ConstraintError
from packages.engine.parsing import (parse_letters_at_position, parse_letters_not_at_position,
                                     parse_user_constraints, parse_without_letters)


def test_parse_without_letters():
    assert parse_without_letters("ab, c") == [Absent("a"), Absent("b"), Absent("c")]
    assert parse_without_letters("") == []
    assert parse_without_letters(None) == []


def test_parse_position_pairs():
    assert parse_letters_at_position("a=0,b=4") == [ExactAt("a", 0), ExactAt("b", 4)]
    assert parse_letters_not_at_position(" e = 2 ,") == [PresentNotAt("e", 2)]


def test_parse_user_constraints_concatenates():
    cs = parse_user_constraints("x", "a=1", "e=4")
    assert cs == [Absent("x"), ExactAt("a", 1), PresentNotAt("e", 4)]


@pytest.mark.parametrize("fn,text,token", [
    (parse_letters_at_position, "a=7", "a=7"),
    (parse_letters_at_position, "a=x", "a=x"),
    (parse_letters_at_position, "a1", "a1"),
    (parse_letters_not_at_position, "ab=1", "ab=1"),
    (parse_letters_not_at_position, "A=1", "A=1"),
    (parse_without_letters, "a1", "1"),
])
def test_malformed_tokens_are_reported(fn, text, token):
    with pytest.raises(ConstraintError) as exc:
        fn(text)
    assert token in str(exc.value)
