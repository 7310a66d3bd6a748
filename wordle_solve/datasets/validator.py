"""
Dataset validator for wordle-solve.

What this module does:
- Validate a pair of resources: dictionary.txt ("word frequency" per line,
  the guess universe and candidate pool) and answers.txt (one word per line,
  the batch-evaluation targets).
- Count invalid and duplicate lines; compute SHA-256 of the raw files.
- Check that answers ⊆ dictionary (otherwise a solver can never find them).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Unlike `load_dictionary` / `load_answers`, this never raises on bad content:
it reports. Loading remains strict.

Typical use:
    from wordle_solve.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordle_solve/datasets/data/dictionary.txt",
                             "wordle_solve/datasets/data/answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Dict, List, Tuple
import hashlib

from wordle_solve.engine import Word

from .io import parse_answer_line, parse_dictionary_line


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, answers) pair."""
    dictionary: FileReport
    answers: FileReport
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, parse: Callable[[str], Word]) -> Tuple[List[Word], int]:
    """
    Parse every line of `path` with `parse`, counting the ones it rejects.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[Word] = []
    invalid = 0

    with path.open("rb") as f:
        for raw in f:
            # UnicodeDecodeError is a ValueError: undecodable lines count as invalid
            try:
                valid.append(parse(raw.decode("utf-8").rstrip("\r\n")))
            except ValueError:
                invalid += 1

    return valid, invalid


def _dictionary_word(line: str) -> Word:
    return parse_dictionary_line(line)[0]


def _file_report(path: Path, words: List[Word], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(dictionary_path: str, answers_path: str) -> Dict:
    """
    Validate the dictionary/answers resources.

    Parameters
    ----------
    dictionary_path : str
        Path to the dictionary ("word frequency" per line).
    answers_path : str
        Path to the answers list (one word per line).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - answers ⊆ dictionary check
          - `passed` boolean (strict: requires non-empty, no invalids,
            no duplicates, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    ans_p = Path(answers_path)

    # Early return if either file is missing
    if not dict_p.exists() or not ans_p.exists():
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        rep = ValidationReport(
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            answers=FileReport(answers_path, ans_p.exists(), 0, "", 0, 0),
            answers_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, dict_invalid = _scan(dict_p, _dictionary_word)
    answers, ans_invalid = _scan(ans_p, parse_answer_line)

    dict_report = _file_report(dict_p, words, dict_invalid)
    ans_report = _file_report(ans_p, answers, ans_invalid)

    subset_ok = set(answers).issubset(words)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = [str(w) for w in sorted(set(answers) - set(words))[:5]]
        issues.append(f"answers not subset of dictionary (e.g., {missing})")

    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid entries")
    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")

    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid line(s)")

    # Duplicate answers are harmless for a batch run; duplicate dictionary
    # words make the file unloadable.
    dict_dupes = dict_report.count != dict_report.unique_count
    if dict_dupes:
        issues.append("dictionary contains duplicate words")
    if ans_report.count != ans_report.unique_count:
        issues.append("answers contains duplicate lines")

    passed = (
            subset_ok
            and dict_invalid == 0
            and ans_invalid == 0
            and not dict_dupes
            and dict_report.count > 0
            and ans_report.count > 0
    )

    rep = ValidationReport(
        dictionary=dict_report,
        answers=ans_report,
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=12972 (uniq=12972, sha=abc123...) | answers=2315 (uniq=2315, sha=def456...) | answers⊆dictionary=True | OK
    """
    d = report["dictionary"]
    a = report["answers"]
    subset = report["answers_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    d_sha = (d.get("sha256") or "")[:12]
    a_sha = (a.get("sha256") or "")[:12]
    return (
        f"dictionary={d['count']} (uniq={d['unique_count']}, sha={d_sha}) "
        f"| answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| answers⊆dictionary={subset} | {status}"
    )
