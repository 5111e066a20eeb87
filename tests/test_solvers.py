import random

import pytest
from autowordle.engine import (
    ConstraintState, StuckError, evaluate, matches, matches_greens_and_yellows, parse_pattern,
)
from autowordle.solvers import CandidateSelector, StrategyConfig, create_solver, get_solver_ids
from autowordle.solvers.base import DEFAULT_OPENERS
from autowordle.solvers.scorers import flat_score, heuristic_score


def _impossible_state():
    # 'c' fixed first, 'r' somewhere, but 'a' banned everywhere
    return ConstraintState(fixed={0: "c"}, present={"r"}, absent={"a"})


def test_registry_ids():
    assert get_solver_ids() == ["heuristic", "heuristic_fixed", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("entropy")


def test_strategy_config_rejects_bad_values():
    with pytest.raises(ValueError):
        StrategyConfig(id="x", name="x", scorer=flat_score, tie_break="best")
    with pytest.raises(ValueError):
        StrategyConfig(id="x", name="x", scorer=flat_score, relax_after=10, unconstrained_after=8)


def test_fixed_opener_is_deterministic_and_recorded():
    words = ["crane", "slate", "brace"]
    used = set()
    guess = create_solver("heuristic_fixed").choose_next_guess(words, ConstraintState(), used, 1)
    assert guess == "slate"
    assert used == {"slate"}


def test_random_opener_comes_from_available_openers():
    words = ["brace", "audio", "react", "crane"]
    for seed in range(10):
        guess = create_solver("heuristic", seed=seed).choose_next_guess(
            words, ConstraintState(), set(), 1)
        assert guess in {"audio", "react", "crane"}
        assert guess in DEFAULT_OPENERS


def test_injected_rng_controls_opener():
    words = list(DEFAULT_OPENERS)
    a = create_solver("heuristic", rng=random.Random(5)).choose_next_guess(
        words, ConstraintState(), set(), 1)
    b = create_solver("heuristic", rng=random.Random(5)).choose_next_guess(
        words, ConstraintState(), set(), 1)
    assert a == b


def test_missing_opener_falls_through_to_scoring():
    words = ["brace", "crane"]
    guess = create_solver("heuristic_fixed").choose_next_guess(words, ConstraintState(), set(), 1)
    # no constraints known: common-letter bias prefers crane (4) over brace (3)
    assert guess == "crane"


def test_second_guess_probe_when_little_is_known():
    words = ["slate", "crane", "pudgy", "mound", "bulky"]
    st = ConstraintState().apply_feedback("slate", evaluate("slate", "crane"))
    used = {"slate"}
    guess = create_solver("heuristic_fixed").choose_next_guess(words, st, used, 2)
    assert guess == "pudgy"   # first probe sharing no letter with "slate"


def test_probe_prefers_fewest_shared_letters():
    words = ["bulky", "mound", "stomp"]
    used = {"stomp"}
    guess = create_solver("heuristic_fixed").choose_next_guess(words, ConstraintState(), used, 2)
    assert guess == "bulky"   # mound shares 'o' and 'm' with stomp


def test_probe_skipped_once_three_letters_known():
    words = ["raise", "pudgy", "crane", "trace"]
    st = ConstraintState().apply_feedback("raise", evaluate("raise", "crane"))
    assert st.last_hits == 3
    guess = create_solver("heuristic_fixed").choose_next_guess(words, st, {"raise"}, 2)
    assert guess in {"crane", "trace"}
    assert matches(guess, st)


def test_probe_skip_counts_repeated_letter_hits():
    # geese vs eerie is -GY-G: three hits from the single letter e
    words = ["geese", "pudgy", "mound", "eerie"]
    st = ConstraintState().apply_feedback("geese", evaluate("geese", "eerie"))
    assert st.last_hits == 3
    guess = create_solver("heuristic_fixed").choose_next_guess(words, st, {"geese"}, 2)
    assert guess == "eerie"


def test_probe_used_below_hit_threshold():
    words = ["geese", "pudgy", "eerie"]
    st = ConstraintState().apply_feedback("geese", parse_pattern("-G--G"))
    guess = create_solver("heuristic_fixed").choose_next_guess(words, st, {"geese"}, 2)
    assert guess == "pudgy"


def test_random_consistent_has_no_probe():
    words = ["slate", "crane", "pudgy"]
    st = ConstraintState().apply_feedback("slate", evaluate("slate", "crane"))
    guess = create_solver("random_consistent", seed=1).choose_next_guess(words, st, {"slate"}, 2)
    assert guess == "crane"


def test_heuristic_score():
    st = ConstraintState(fixed={0: "c"}, present={"r"})
    # r at an unfixed slot: +50; common letters r, a, n, e: +4
    assert heuristic_score("crane", st) == 54
    st.present.update({"a", "n"})
    # three letters known now, so the common-letter bias is gone
    assert heuristic_score("crane", st) == 150
    assert flat_score("crane", st) == 0


def test_ties_broken_by_list_order():
    words = ["crate", "crane"]
    st = ConstraintState(fixed={0: "c"}, present={"r"})
    guess = create_solver("heuristic_fixed").choose_next_guess(words, st, set(), 3)
    assert guess == "crate"


def test_no_relaxation_before_threshold():
    words = ["crane", "crate", "brace"]
    with pytest.raises(StuckError) as exc:
        create_solver("heuristic").choose_next_guess(words, _impossible_state(), set(), 7)
    assert exc.value.attempt == 7
    assert "greens=c____" in exc.value.constraints


def test_relaxes_to_greens_and_yellows():
    words = ["crane", "crate", "brace"]
    st = _impossible_state()
    assert not any(matches(w, st) for w in words)

    used = set()
    guess = create_solver("heuristic").choose_next_guess(words, st, used, 8)
    assert guess == "crane"
    assert matches_greens_and_yellows(guess, st)
    assert not matches(guess, st)
    assert used == {"crane"}


def test_drops_all_constraints_late():
    words = ["crane", "crate", "brace"]
    st = ConstraintState(fixed={0: "z"})
    solver = create_solver("heuristic")
    with pytest.raises(StuckError):
        solver.choose_next_guess(words, st, set(), 9)
    assert solver.choose_next_guess(words, st, set(), 10) == "crane"


def test_thresholds_are_configurable():
    config = StrategyConfig(id="eager", name="eager", scorer=heuristic_score,
                            relax_after=2, unconstrained_after=3)
    solver = CandidateSelector(config)
    words = ["crane", "crate", "brace"]
    assert solver.choose_next_guess(words, _impossible_state(), set(), 3) == "crane"


def test_exhausted_list_raises_stuck():
    words = ["crane"]
    for attempt in (1, 2, 5, 12):
        with pytest.raises(StuckError):
            create_solver("heuristic").choose_next_guess(
                words, ConstraintState(), {"crane"}, attempt)


def test_never_returns_a_used_word():
    words = ["crane", "crate", "brace", "trace", "grace"]
    solver = create_solver("random_consistent", seed=3)
    used = set()
    picks = [solver.choose_next_guess(words, ConstraintState(), used, a) for a in range(2, 7)]
    assert sorted(picks) == sorted(words)
    with pytest.raises(StuckError):
        solver.choose_next_guess(words, ConstraintState(), used, 7)
