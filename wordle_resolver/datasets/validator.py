"""
Word-list validator.

Checks the pair of lists a session is built from:
  - allow-list : plausible answers (what the solver narrows)
  - dictionary : every legal guess (what the solver scores)

Per file: one lowercase a–z word of length N per line, duplicates, SHA-256 of
the raw bytes. Across files: allow-list ⊆ dictionary. The solver still runs
when the subset check fails (it only scores dictionary words), but a guess
that could be the answer would then never be proposed until the endgame.

Typical use:
    from wordle_resolver.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/allow_word.txt", "data/all_word.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_resolver.engine.letters import is_word


@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int           # valid words
    sha256: str          # empty when the file is missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    N: int
    allow_list: FileReport
    dictionary: FileReport
    allow_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). A line is valid only if it is
    already lowercase a–z of length N; blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if len(w) == N and is_word(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(N: int, allow_path: str, dictionary_path: str) -> Dict:
    """
    Validate the allow-list/dictionary pair for word length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both files non-empty, no invalid lines, allow-list ⊆ dictionary.
    Duplicates are reported in `issues` but don't fail the check.
    """
    issues: List[str] = []
    allow_p = Path(allow_path)
    dict_p = Path(dictionary_path)

    if not allow_p.exists() or not dict_p.exists():
        if not allow_p.exists():
            issues.append(f"allow-list file not found: {allow_path}")
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            N=N,
            allow_list=FileReport(allow_path, allow_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            allow_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    allow, allow_invalid = _load_and_check(allow_p, N)
    dictionary, dict_invalid = _load_and_check(dict_p, N)
    allow_rep = _file_report(allow_p, allow, allow_invalid)
    dict_rep = _file_report(dict_p, dictionary, dict_invalid)

    subset_ok = set(allow).issubset(dictionary)
    if not subset_ok:
        missing = sorted(set(allow) - set(dictionary))[:5]
        issues.append(f"allow-list not subset of dictionary (e.g., {missing})")

    for name, rep in (("allow-list", allow_rep), ("dictionary", dict_rep)):
        if rep.count == 0:
            issues.append(f"{name} contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")

    passed = (
            subset_ok
            and allow_invalid == 0
            and dict_invalid == 0
            and allow_rep.count > 0
            and dict_rep.count > 0
    )

    rep = ValidationReport(
        N=N,
        allow_list=allow_rep,
        dictionary=dict_rep,
        allow_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | allow=2315 (uniq=2315, sha=abc123...) | dictionary=12972 (...) | allow⊆dictionary=True | OK
    """
    a = report["allow_list"]
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | allow={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]}) "
        f"| dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]}) "
        f"| allow⊆dictionary={report['allow_subset_dictionary']} | {status}"
    )
