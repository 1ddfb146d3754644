"""Game configuration."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MIN_TICK_RATE_MS = 10
MAX_TICK_RATE_MS = 5000
MAX_INITIAL_GROWTH = 10_000


@dataclass(frozen=True)
class GameConfig:
    """Board size, start-up growth and tick cadence for one game.

    Supports JSON serialization so a setup can be replayed with the same
    seed.
    """

    board_width: int = 20
    board_height: int = 20
    # Segments added to the single-cell snake before the first tick.
    initial_growth: int = 3
    tick_rate_ms: int = 300
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_width < 1 or self.board_height < 1:
            raise ValueError("Board dimensions must be at least 1×1.")
        if not 0 <= self.initial_growth <= MAX_INITIAL_GROWTH:
            raise ValueError(
                f"initial_growth must be between 0 and {MAX_INITIAL_GROWTH}."
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0.")
        if not MIN_TICK_RATE_MS <= self.tick_rate_ms <= MAX_TICK_RATE_MS:
            raise ValueError(
                f"tick_rate_ms must be between {MIN_TICK_RATE_MS} "
                f"and {MAX_TICK_RATE_MS}."
            )

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
