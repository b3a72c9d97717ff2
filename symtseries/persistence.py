"""
Plain-data snapshots of windows and words.

A window snapshot holds its dimensions and the samples it currently holds,
oldest first; restoring replays those samples into a fresh window, which
re-creates the same cached word. A word snapshot is its canonical string
plus the cardinality needed to decode it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .codec import decode, encode
from .core.window import Window
from .core.word import Word
from .exceptions import InvalidParameter


def window_to_dict(window: Window) -> Dict[str, Any]:
    """Snapshot of ``window`` as a dict of builtins."""
    return {
        "type": "window",
        "n": window.n,
        "w": window.w,
        "c": window.c,
        "values": window.values.tolist(),
    }


def window_from_dict(data: Dict[str, Any]) -> Window:
    """Rebuild a window from :func:`window_to_dict` output."""
    try:
        window = Window(data["n"], data["w"], data["c"])
    except KeyError as e:
        raise InvalidParameter(f"window snapshot is missing {e.args[0]!r}") from e
    values = data.get("values") or []
    if len(values) > window.n:
        raise InvalidParameter(
            f"window snapshot holds {len(values)} values, capacity is {window.n}"
        )
    window.append_sequence(values)
    return window


def word_to_dict(word: Word) -> Dict[str, Any]:
    """Snapshot of ``word``; ``source_length`` is kept so MinDist scales the same."""
    return {
        "type": "word",
        "word": encode(word),
        "cardinality": word.cardinality,
        "source_length": word.source_length,
    }


def word_from_dict(data: Dict[str, Any]) -> Word:
    """Rebuild a word from :func:`word_to_dict` output."""
    try:
        word = decode(data["word"], data["cardinality"])
    except KeyError as e:
        raise InvalidParameter(f"word snapshot is missing {e.args[0]!r}") from e
    source_length = data.get("source_length")
    if source_length is None:
        return word
    return Word(word.symbols, word.cardinality, source_length)


def to_dict(obj: Union[Window, Word]) -> Dict[str, Any]:
    if isinstance(obj, Window):
        return window_to_dict(obj)
    if isinstance(obj, Word):
        return word_to_dict(obj)
    raise TypeError(f"Word or Window expected, got {type(obj).__name__}")


def from_dict(data: Dict[str, Any]) -> Union[Window, Word]:
    kind = data.get("type")
    if kind == "window":
        return window_from_dict(data)
    if kind == "word":
        return word_from_dict(data)
    raise InvalidParameter(f"unknown snapshot type: {kind!r}")


def dump_yaml(snapshots: Dict[str, Union[Window, Word]], path: Union[str, Path]) -> None:
    """Write named windows and words to a YAML file."""
    data = {key: to_dict(obj) for key, obj in snapshots.items()}
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=True)


def load_yaml(path: Union[str, Path]) -> Dict[str, Union[Window, Word]]:
    """Load named windows and words written by :func:`dump_yaml`."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return {key: from_dict(value) for key, value in data.items()}
