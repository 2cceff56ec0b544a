"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Neon"
    show_legal_moves: bool = True

    # Bot
    bot_enabled: bool = False
    bot_delay_ms: int = 300  # pacing only, the bot itself answers instantly
    bot_seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHESSNEON_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if "CHESSNEON_LANGUAGE" in env:
            settings.language = env["CHESSNEON_LANGUAGE"]
        if "CHESSNEON_THEME" in env:
            settings.board_theme = env["CHESSNEON_THEME"]
        if "CHESSNEON_BOT" in env:
            settings.bot_enabled = env["CHESSNEON_BOT"].strip().lower() in _TRUE_WORDS
        if "CHESSNEON_BOT_DELAY_MS" in env:
            settings.bot_delay_ms = _parse_int("CHESSNEON_BOT_DELAY_MS", env)
            if settings.bot_delay_ms < 0:
                raise ValueError("CHESSNEON_BOT_DELAY_MS must not be negative")
        if "CHESSNEON_SEED" in env:
            settings.bot_seed = _parse_int("CHESSNEON_SEED", env)
        return settings


def _parse_int(key: str, env: Mapping[str, str]) -> int:
    try:
        return int(env[key])
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {env[key]!r}") from None
