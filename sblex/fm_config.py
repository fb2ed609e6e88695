"""Settings for the morphology server, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_PREFIX = "fm_server__"


@dataclass(frozen=True)
class Settings:
    """Where the morphology database lives."""

    morphology_path: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from ``environ`` (default: the process environment).

        Names are matched case-insensitively; values prefixed with
        ``FM_SERVER__`` take precedence over unprefixed ones.
        """
        env = os.environ if environ is None else environ
        values = {key.lower(): value for key, value in env.items()}
        for key, value in env.items():
            lowered = key.lower()
            if lowered.startswith(_PREFIX) and len(lowered) > len(_PREFIX):
                values[lowered[len(_PREFIX):]] = value
        path = values.get("morphology_path")
        if path is None:
            raise ValueError("missing field `morphology_path`")
        return cls(morphology_path=path)