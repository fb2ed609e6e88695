"""Morphology interfaces, their errors and loading of lexicon files."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, "PathLike[str]"]


class Morphology(ABC):
    """A read-only store of morphological analyses keyed by word form."""

    @abstractmethod
    def lookup(self, fragment: str) -> bytes | None:
        """Return the JSON array of analyses for ``fragment``, or None."""

    @abstractmethod
    def lookup_with_cont(self, fragment: str) -> bytes:
        """Return a JSON object with analyses ("a") and continuations ("c")."""


class MorphologyBuilder(ABC):
    """Something a morphology can be built into, one word at a time."""

    @abstractmethod
    def insert(self, word: str, value: str) -> None:
        """Add the serialized analysis ``value`` for ``word``."""

    @abstractmethod
    def finish(self) -> None:
        """Complete the build."""


class MorphologyBuilderError(Exception):
    """Raised when a morphology cannot be built."""


class DuplicateWordError(MorphologyBuilderError):
    """Raised when a word is inserted that may only occur once."""

    def __init__(self, word: str) -> None:
        super().__init__(f"word '{word}' already exists")
        self.word = word


class CouldNotOpenFileError(MorphologyBuilderError):
    """Raised when a lexicon file cannot be opened."""

    def __init__(self, path: StrPath, error: OSError) -> None:
        super().__init__(f"Failed to open file '{path}'")
        self.path = Path(path)
        self.error = error


class CouldNotReadLineError(MorphologyBuilderError):
    """Raised when a line of a lexicon file cannot be read."""

    def __init__(self, line_number: int, path: StrPath, error: Exception) -> None:
        super().__init__(f"Failed to read line {line_number} from '{path}'")
        self.line_number = line_number
        self.path = Path(path)
        self.error = error


class DeserializeError(MorphologyBuilderError):
    """Raised when a lexicon entry is not valid."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Failed to deserialize data")
        self.detail = detail


class MorphologyLookupError(Exception):
    """Raised when a lookup in a morphology fails."""

    def __init__(self, message: str = "unknown error") -> None:
        super().__init__(message)


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


def _decode_line(raw: bytes, line_number: int, path: Path) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as error:
        raise CouldNotReadLineError(line_number, path, error) from error


def build_from_path(builder: MorphologyBuilder, path: StrPath) -> None:
    """Insert every entry of the JSON-lines lexicon at ``path`` into ``builder``."""
    path = Path(path)
    try:
        file = path.open("rb")
    except OSError as error:
        raise CouldNotOpenFileError(path, error) from error
    with file:
        for line_number, raw in enumerate(file):
            line = _decode_line(raw, line_number, path)
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as error:
                raise DeserializeError(str(error)) from error
            fields = entry if isinstance(entry, dict) else {}
            word = fields.get("word")
            if not isinstance(word, str):
                raise DeserializeError(f"line {line_number} has no string 'word'")
            analysis = {
                "gf": fields.get("head"),
                "id": fields.get("id"),
                "pos": fields.get("pos"),
                "is": fields.get("inhs"),
                "msd": fields.get("param"),
                "p": fields.get("p"),
            }
            builder.insert(word, _to_json(analysis))