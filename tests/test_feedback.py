import pytest

from mastermind_solver.codes import Code
from mastermind_solver.feedback import Mark, count, format_feedback, is_win, score
from mastermind_solver.simulate import all_secrets

E, P, A = Mark.EXACT, Mark.PRESENT, Mark.ABSENT


# --- golden tests ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("RGBP", "RBYG", (E, P, P, A)),
    ("PCRB", "RBYG", (A, A, P, P)),
    ("RBYG", "RBYG", (E, E, E, E)),
    ("GRBY", "RBYG", (P, P, P, P)),
    ("PCGR", "RBYG", (A, A, P, P)),
    ("RBPC", "RBYG", (E, E, A, A)),
    ("CPYB", "GBYR", (A, A, E, P)),
    ("YGCP", "RBYG", (P, P, A, A)),
])
def test_score_golden(guess, secret, expected):
    assert score(Code.parse(guess), Code.parse(secret)) == expected


def test_score_self_is_all_exact():
    for secret in all_secrets():
        assert is_win(score(secret, secret))


def test_score_counts_against_sample():
    secrets = all_secrets()
    guesses = secrets[::7]
    for guess in guesses:
        for secret in secrets[::5]:
            feedback = score(guess, secret)
            assert len(feedback) == 4

            aligned = sum(1 for g, s in zip(guess, secret) if g == s)
            shared = len(set(guess) & set(secret))
            assert count(feedback, Mark.EXACT) == aligned
            assert [i for i, m in enumerate(feedback) if m == Mark.EXACT] == [i for i in range(4) if guess[i] == secret[i]]
            assert count(feedback, Mark.EXACT) + count(feedback, Mark.PRESENT) <= min(4, shared)


def test_score_is_pure():
    guess, secret = Code.parse("RGBP"), Code.parse("RBYG")
    assert score(guess, secret) == score(guess, secret)
    assert str(guess) == "R G B P"
    assert str(secret) == "R B Y G"


def test_format_feedback():
    assert format_feedback((E, P, P, A)) == "✓ - ? - ? - 𐄂"


def test_is_win():
    assert is_win((E, E, E, E))
    assert not is_win((E, E, E, P))
