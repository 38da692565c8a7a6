"""Persistent list of player names and survival times."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SCORES_PATH = "scores.txt"


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game: who played and how long they lasted."""

    name: str
    time: float


def _format_time(value: float) -> str:
    return f"{value:g}"


def save_score(name: str, time_survived: float, path: PathLike = DEFAULT_SCORES_PATH) -> None:
    """Append one score line to the file, creating it when missing."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name} {_format_time(time_survived)}\n")


def load_scores(path: PathLike = DEFAULT_SCORES_PATH) -> list[ScoreEntry]:
    """Read every well-formed score from the file, in file order.

    Reading stops at the first name that is not followed by a number.
    A missing file yields an empty list.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []

    tokens = iter(text.split())
    scores: list[ScoreEntry] = []
    for name in tokens:
        raw_time = next(tokens, None)
        if raw_time is None:
            break
        try:
            time = float(raw_time)
        except ValueError:
            break
        scores.append(ScoreEntry(name, time))
    return scores


def format_score_list(scores: Iterable[ScoreEntry]) -> str:
    """Render scores as the printed score list."""
    lines = ["Score list:"]
    lines.extend(f"{entry.name} - {_format_time(entry.time)} s" for entry in scores)
    return "\n".join(lines) + "\n"