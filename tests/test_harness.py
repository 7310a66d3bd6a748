import csv
import json

import pytest

from apps.cli.solve import play_interactive
from wordle_solve.engine import Word, check, format_mask
from wordle_solve.harness import (GameSession, InvalidGuessError, play, run_batch, run_case,
                                  summarize, write_csv, write_manifest)
from wordle_solve.solvers import BaseSolver, create_solver

from conftest import WORDS


class FixedSolver(BaseSolver):
    """Always guesses the same word."""
    id = "fixed"

    def __init__(self, word):
        self.word = Word(word)
        self.resets = 0

    def guess(self, history):
        return self.word

    def reset(self):
        self.resets += 1


def test_play_first_guess():
    assert play(FixedSolver("right"), "right") == 1


def test_play_out_of_turns():
    assert play(FixedSolver("wrong"), "right") is None


def test_run_case_result(dictionary):
    solver = create_solver("naive", dictionary)
    r = run_case(solver, "hoard", allowed=dictionary)
    assert r["success"] is True
    assert r["answer"] == "hoard"
    assert r["history"][0] == ("sugar", "WWWMM")
    assert r["history"][-1] == ("hoard", "CCCCC")
    assert r["guesses"] == len(r["history"]) == 3
    assert r["time_ms"] >= 0


def test_run_case_failure_uses_whole_budget():
    solver = FixedSolver("wrong")
    r = run_case(solver, "right", max_turns=4)
    assert r["success"] is False
    assert r["guesses"] == 4
    assert solver.resets == 1


@pytest.mark.parametrize("turns", [0, -1, 2.5])
def test_run_case_rejects_bad_budget(turns):
    with pytest.raises(ValueError):
        run_case(FixedSolver("right"), "right", max_turns=turns)


def test_run_case_checks_dictionary(dictionary):
    with pytest.raises(InvalidGuessError):
        run_case(FixedSolver("zzzzz"), "crane", allowed=dictionary)


def test_run_batch_and_summary(dictionary):
    solver = create_solver("minimax", dictionary)
    results = run_batch(solver, sorted(WORDS), allowed=dictionary, limit=5)
    assert [r["answer"] for r in results] == sorted(WORDS)[:5]
    assert all(r["solver_id"] == "minimax" for r in results)

    s = summarize(results)
    assert s["games"] == s["solved"] == 5
    assert s["failed"] == []
    assert sum(s["distribution"].values()) == 5


def test_summary_counts_failures():
    results = run_batch(FixedSolver("wrong"), ["right", "wrong"], max_turns=2)
    s = summarize(results)
    assert s["failed"] == ["right"]
    assert s["distribution"] == {"1": 1}
    assert s["mean_guesses"] == 1.0


def test_write_csv_and_manifest(tmp_path, dictionary):
    solver = create_solver("naive", dictionary)
    results = run_batch(solver, ["crane", "which"])
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["crane", "which"]
    assert rows[0]["solver"] == "naive"
    assert rows[0]["guess_1"] == "sugar"
    assert rows[0]["mask_1"] == format_mask(check("crane", "sugar"))
    assert rows[0]["guess_6"] == ""

    mpath = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    with open(mpath, encoding="utf-8") as f:
        assert json.load(f)["summary"]["solved"] == 2


# --- externally judged play ---
def test_session_record(dictionary):
    session = GameSession(dictionary)
    assert session.record("sugar", "not feedback") is None
    assert session.turns == 0

    with pytest.raises(InvalidGuessError):
        session.record("zzzzz", "wwwww")

    g = session.record("sugar", "w w w m m")
    assert str(g) == "sugar [W W W M M]"
    assert not session.solved

    session.record("hoard", "ccccc")
    assert session.solved and session.turns == 2

    session.reset()
    assert session.turns == 0 and not session.solved


def test_session_recommend(dictionary):
    solver = create_solver("naive", dictionary)
    session = GameSession(dictionary)
    assert session.recommend(solver) == "sugar"
    session.record("sugar", "wwwmm")
    assert session.recommend(solver) == "crane"


def _judge(answer):
    """Scripted user who plays every suggestion and reports true feedback."""
    state, said = {}, []

    def say(msg):
        said.append(msg)
        if msg.startswith("Guess: "):
            state["word"] = msg.split()[-1]

    def ask(prompt):
        if prompt.startswith("Played"):
            return ""
        return format_mask(check(answer, state["word"])).lower()

    return ask, say, said


@pytest.mark.parametrize("sid", ["naive", "minimax"])
@pytest.mark.parametrize("answer", sorted(WORDS))
def test_play_interactive_solves(dictionary, sid, answer):
    ask, say, said = _judge(answer)
    solver = create_solver(sid, dictionary)
    assert play_interactive(solver, GameSession(dictionary), ask=ask, say=say) is True
    assert said[-1] == "You win!!"


def test_play_interactive_reprompts(dictionary):
    replies = iter(["zzzzz", "", "bogus", "wwwmm", "hoard", "ccccc"])
    said = []
    solver = create_solver("naive", dictionary)

    ok = play_interactive(solver, GameSession(dictionary),
                          ask=lambda prompt: next(replies), say=said.append)
    assert ok is True
    assert "'zzzzz' is not in the dictionary" in said
    assert any(msg.startswith("Enter five of c/m/w") for msg in said)
    assert said[-1] == "You win!!"


def test_play_interactive_runs_out(dictionary):
    said = []
    solver = create_solver("naive", dictionary)
    replies = iter(["", "wwwmm"])
    ok = play_interactive(solver, GameSession(dictionary), max_turns=1,
                          ask=lambda prompt: next(replies), say=said.append)
    assert ok is False
    assert said[-1] == "Out of guesses!"


def test_batch_cli_writes_reports(tmp_path, capsys):
    from apps.cli.run import main

    main(["--solver", "minimax", "--outdir", str(tmp_path), "--progress", "off", "--strict"])
    out = capsys.readouterr().out
    assert "answers⊆dictionary=True" in out
    assert "Solved 12/12" in out
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    manifest = json.loads(next(tmp_path.glob("run_*_manifest.json")).read_text(encoding="utf-8"))
    assert manifest["solver_id"] == "minimax"
    assert manifest["solver_version"] == "1.0.0"
    assert manifest["summary"]["failed"] == []
