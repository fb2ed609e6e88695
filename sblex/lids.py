"""Lexical identifiers: lexemes ("word..1") and lemmas ("word.1")."""

from __future__ import annotations

from dataclasses import dataclass


def _char_before_last_dot(text: str) -> str | None:
    index = text.rfind(".")
    if index <= 0:
        return None
    return text[index - 1]


def is_lexeme(text: str) -> bool:
    """Return whether the last '.' in ``text`` is preceded by another '.'."""
    before = _char_before_last_dot(text)
    return before is not None and before == "."


def is_lemma(text: str) -> bool:
    """Return whether the last '.' in ``text`` is preceded by something else than '.'."""
    before = _char_before_last_dot(text)
    return before is not None and before != "."


@dataclass(frozen=True)
class Lexeme:
    """A lexeme identifier."""

    value: str

    def __post_init__(self) -> None:
        if not is_lexeme(self.value):
            raise ValueError(f"'{self.value}' is not a lexeme")

    @classmethod
    def parse(cls, text: str) -> Lexeme:
        """Return ``text`` as a lexeme; raise ValueError if it is not one."""
        return cls(text)


@dataclass(frozen=True)
class Lemma:
    """A lemma identifier."""

    value: str

    def __post_init__(self) -> None:
        if not is_lemma(self.value):
            raise ValueError(f"'{self.value}' is not a lemma")

    @classmethod
    def parse(cls, text: str) -> Lemma:
        """Return ``text`` as a lemma; raise ValueError if it is not one."""
        return cls(text)


def parse_lid(text: str) -> Lexeme | Lemma:
    """Return ``text`` as a lemma or a lexeme; raise ValueError if it is neither."""
    if is_lemma(text):
        return Lemma(text)
    if is_lexeme(text):
        return Lexeme(text)
    raise ValueError(f"'{text}' is not a lexeme nor a lemma")