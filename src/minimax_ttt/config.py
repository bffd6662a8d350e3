"""Engine settings resolved from the environment, with explicit overrides.

Environment-first: TTT_AI_MARK picks the engine's mark (X moves first, so an
X engine opens the game) and TTT_THINK_DELAY sets the pause in seconds before
the engine's reply is shown by interactive front ends.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from .game_basics import O, X, other, parse_mark

DEFAULT_THINK_DELAY = 0.5


@dataclass(frozen=True)
class EngineConfig:
    ai_mark: int = O
    think_delay: float = DEFAULT_THINK_DELAY

    def __post_init__(self) -> None:
        if self.ai_mark not in (X, O):
            raise ValueError(f"ai_mark must be {X} or {O}, got {self.ai_mark!r}")
        if self.think_delay < 0:
            raise ValueError(f"think_delay must be >= 0, got {self.think_delay!r}")

    @property
    def human_mark(self) -> int:
        return other(self.ai_mark)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        mark = os.getenv("TTT_AI_MARK")
        delay = os.getenv("TTT_THINK_DELAY")
        return cls(
            ai_mark=parse_mark(mark) if mark else O,
            think_delay=float(delay) if delay else DEFAULT_THINK_DELAY,
        )

    def with_overrides(self, ai_mark: Optional[int] = None, think_delay: Optional[float] = None) -> "EngineConfig":
        changes = {}
        if ai_mark is not None:
            changes["ai_mark"] = ai_mark
        if think_delay is not None:
            changes["think_delay"] = think_delay
        return replace(self, **changes)
