"""A morphology persisted in an on-disk key-value table."""

from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from types import TracebackType

from sblex.morphology import (
    Morphology,
    MorphologyBuilder,
    MorphologyBuilderError,
    MorphologyLookupError,
    StrPath,
)

_DATABASE_FILE = "saldo_morph.sqlite3"


class KvMorphology(Morphology, MorphologyBuilder):
    """Stores a JSON array of analyses per word form in a database folder.

    Keys are the UTF-8 bytes of the word, so prefix scans follow byte order.
    """

    def __init__(self, folder: StrPath) -> None:
        self.path = Path(folder)
        self.path.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._db = sqlite3.connect(self.path / _DATABASE_FILE, check_same_thread=False)
        self._db.execute("PRAGMA synchronous=FULL")
        self._db.execute(
            "CREATE TABLE IF NOT EXISTS saldo_morph "
            "(key BLOB PRIMARY KEY, value BLOB NOT NULL) WITHOUT ROWID"
        )
        self._db.commit()

    def __enter__(self) -> KvMorphology:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying database."""
        with self._lock:
            self._db.close()

    def _get(self, key: bytes) -> bytes | None:
        row = self._db.execute("SELECT value FROM saldo_morph WHERE key = ?", (key,)).fetchone()
        return None if row is None else bytes(row[0])

    def insert(self, word: str, value: str) -> None:
        """Append ``value`` to the array stored for ``word`` and persist it."""
        key = word.encode("utf-8")
        encoded = value.encode("utf-8")
        try:
            with self._lock:
                existing = self._get(key)
                if existing is None:
                    new_value = b"[" + encoded + b"]"
                else:
                    new_value = existing[:-1] + b"," + encoded + b"]"
                self._db.execute(
                    "INSERT OR REPLACE INTO saldo_morph (key, value) VALUES (?, ?)",
                    (key, new_value),
                )
                self._db.commit()
        except sqlite3.Error as error:
            raise MorphologyBuilderError("unknown error") from error

    def finish(self) -> None:
        """Make sure everything written is persisted."""
        try:
            with self._lock:
                self._db.commit()
        except sqlite3.Error as error:
            raise MorphologyBuilderError("unknown error") from error

    def lookup(self, fragment: str) -> bytes | None:
        try:
            with self._lock:
                return self._get(fragment.encode("utf-8"))
        except sqlite3.Error as error:
            raise MorphologyLookupError() from error

    def lookup_with_cont(self, fragment: str) -> bytes:
        prefix = fragment.encode("utf-8")
        try:
            with self._lock:
                keys = [
                    bytes(row[0])
                    for row in self._db.execute(
                        "SELECT key FROM saldo_morph WHERE substr(key, 1, ?) = ? ORDER BY key",
                        (len(prefix), prefix),
                    )
                ]
                analyses = self._get(prefix)
        except sqlite3.Error as error:
            raise MorphologyLookupError() from error

        conts: list[str] = []
        for key in keys:
            rest = key.decode("utf-8")[len(fragment):]
            if rest and rest[0] not in conts:
                conts.append(rest[0])
        return (
            b'{"a":'
            + (analyses if analyses is not None else b"[]")
            + b',"c":"'
            + "".join(conts).encode("utf-8")
            + b'"}'
        )