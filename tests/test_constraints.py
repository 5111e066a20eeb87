import pytest
from autowordle.datasets import load_word_list
from autowordle.engine import (
    ConstraintState, apply_feedback, evaluate, filter_candidates, is_solved, matches,
    matches_greens_and_yellows, parse_pattern,
)
from autowordle.harness import Session
from autowordle.solvers import create_solver


def _state(*pairs):
    st = ConstraintState()
    for guess, patt in pairs:
        st.apply_feedback(guess, parse_pattern(patt))
    return st


def test_apply_feedback_double_letter_is_positional_only():
    # "sleep" vs "spelt": second 'e' is ABSENT but the first is CORRECT
    st = _state(("sleep", "GYG-Y"))
    assert st.fixed == {0: "s", 2: "e"}
    assert st.present == {"l", "p"}
    assert st.absent == set()
    assert st.exclusions == {1: {"l"}, 3: {"e"}, 4: {"p"}}
    assert matches("spelt", st)


def test_absent_without_other_copy_is_global():
    st = _state(("slate", "--G-G"))
    assert st.absent == {"s", "l", "t"}
    assert st.fixed == {2: "a", 4: "e"}
    assert st.exclusions == {}


def test_correct_removes_letter_from_present():
    st = _state(("raise", "YY--G"))
    assert st.present == {"r", "a"}
    st.apply_feedback("crane", parse_pattern("GGGGG"))
    assert st.present == set()
    assert st.fixed == {0: "c", 1: "r", 2: "a", 3: "n", 4: "e"}


def test_apply_feedback_function_returns_same_state():
    st = ConstraintState()
    out = apply_feedback("slate", evaluate("slate", "crane"), st)
    assert out is st and st.fixed[2] == "a"


def test_known_letters_and_last_hits():
    st = _state(("raise", "YY--G"))
    assert st.known_letters() == {"r", "a", "e"}
    assert st.last_hits == 3
    # counts verdicts, not distinct letters: two green e's and a yellow one
    st = _state(("geese", "-GY-G"))
    assert st.known_letters() == {"e"}
    assert st.last_hits == 3
    st.apply_feedback("pudgy", parse_pattern("-----"))
    assert st.last_hits == 0


@pytest.mark.parametrize("guess,secret", [
    ("sleep", "spelt"), ("epees", "sleep"), ("belle", "level"), ("level", "belle"),
    ("llama", "hello"), ("geese", "eerie"), ("apple", "paper"), ("robot", "motor"),
    ("sissy", "essay"), ("slate", "crane"),
])
def test_secret_always_survives_its_own_feedback(guess, secret):
    st = ConstraintState().apply_feedback(guess, evaluate(guess, secret))
    assert matches(secret, st)


def test_matches_each_rule():
    st = _state(("raise", "YY--G"))
    assert matches("crane", st)
    assert not matches("crone", st)   # missing present 'a'
    assert not matches("arose", st)   # 's' is absent
    assert not matches("rance", st)   # 'r' excluded at position 0
    assert not matches("cared", st)   # 'e' fixed at position 4


def test_matches_greens_and_yellows_ignores_greys_and_exclusions():
    st = _state(("raise", "YY--G"))
    assert matches_greens_and_yellows("arose", st)   # 's' absent, ignored here
    assert matches_greens_and_yellows("rance", st)   # exclusion ignored here
    assert not matches_greens_and_yellows("cared", st)


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    st = _state(("raise", "YY--G"))
    assert filter_candidates(words, st) == ["crane", "trace"]
    assert filter_candidates(words, st, used={"crane"}) == ["trace"]
    assert filter_candidates(words + ["cranes"], st, used=["trace"]) == ["crane"]


def test_describe_mentions_every_part():
    st = _state(("sleep", "GYG-Y"))
    text = st.describe()
    assert "greens=s_e__" in text
    assert "yellows=lp" in text
    assert "3:e" in text


@pytest.mark.parametrize("secret", ["tiger", "crane", "sugar", "vodka", "knoll"])
def test_candidates_shrink_monotonically(secret):
    words = load_word_list()
    session = Session(secret, words, create_solver("heuristic_fixed"))
    previous = set(filter_candidates(words, session.constraints))
    for _ in range(30):
        _, fb = session.step()
        current = set(filter_candidates(words, session.constraints))
        assert current <= previous
        assert secret in current
        previous = current
        if is_solved(fb):
            break
    else:
        pytest.fail("session did not finish")
