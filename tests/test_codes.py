import random as rnd

import pytest

from mastermind_solver.codes import Code
from mastermind_solver.colors import ALPHABET, Color
from mastermind_solver.errors import DuplicateColorError, InvalidLengthError, UnrecognizedColorError, ValidationError
from mastermind_solver.simulate import all_secrets

RBYG = Code([Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN])


@pytest.mark.parametrize("text", [
    "RBYG",
    "R B Y G",
    "R, B, Y, G",
    "r,b,y,g",
    "  rb yg ",
    "R-B-Y-G",
    "red blue yellow green",
    "Red, Blue, Yellow, Green",
])
def test_parse_accepted_forms(text):
    assert Code.parse(text) == RBYG


@pytest.mark.parametrize("text", ["R R B Y", "RRBY", "red red blue yellow", "G B G C"])
def test_parse_rejects_duplicates(text):
    with pytest.raises(DuplicateColorError) as excinfo:
        Code.parse(text)
    assert excinfo.value.input == text
    assert text in str(excinfo.value)


@pytest.mark.parametrize("text", ["R B Y X", "RBYZ", "1234", "R B ? G"])
def test_parse_rejects_unrecognized(text):
    with pytest.raises(UnrecognizedColorError) as excinfo:
        Code.parse(text)
    assert excinfo.value.input == text
    assert "G, B, R, Y, P, C" in str(excinfo.value)


@pytest.mark.parametrize("text", ["", "RBY", "RBYGP", "red blue yellow"])
def test_parse_rejects_wrong_length(text):
    with pytest.raises(InvalidLengthError):
        Code.parse(text)


def test_error_kinds_are_distinguishable():
    assert not issubclass(DuplicateColorError, UnrecognizedColorError)
    assert not issubclass(UnrecognizedColorError, DuplicateColorError)
    for error in (DuplicateColorError, UnrecognizedColorError, InvalidLengthError):
        assert issubclass(error, ValidationError)
        assert issubclass(error, ValueError)


def test_parse_round_trips_every_code():
    for code in all_secrets():
        assert Code.parse(str(code)) == code


def test_constructor_validates():
    with pytest.raises(DuplicateColorError):
        Code([Color.RED, Color.RED, Color.BLUE, Color.GREEN])
    with pytest.raises(InvalidLengthError):
        Code([Color.RED, Color.BLUE])
    with pytest.raises(UnrecognizedColorError):
        Code([Color.RED, Color.BLUE, Color.GREEN, "X"])


def test_code_is_immutable_and_hashable():
    with pytest.raises(AttributeError):
        RBYG.colors = ()  # type: ignore[misc]
    assert len({RBYG, Code.parse("RBYG")}) == 1


def test_generate_random_unique_is_valid_and_seedable():
    first = [Code.generate_random_unique(rnd.Random(7)) for _ in range(3)]
    assert first[0] == first[1] == first[2]

    rng = rnd.Random(1)
    for _ in range(200):
        code = Code.generate_random_unique(rng)
        assert len(code) == 4
        assert len(set(code)) == 4
        assert all(color in ALPHABET for color in code)


def test_generate_random_unique_covers_alphabet():
    rng = rnd.Random(3)
    seen = set()
    for _ in range(100):
        seen.update(Code.generate_random_unique(rng))
    assert seen == set(ALPHABET)


def test_string_forms():
    assert str(RBYG) == "R B Y G"
    assert repr(RBYG) == "Code('R B Y G')"
    assert RBYG.names() == ["RED", "BLUE", "YELLOW", "GREEN"]
    assert RBYG[2] is Color.YELLOW
