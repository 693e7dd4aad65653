"""Game configuration (single source of truth).

Every tunable game parameter lives here and can be overridden from the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_int(key: str, default: int) -> int:
    """Read an integer setting from the environment."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Read a boolean setting from the environment."""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GameConfig:
    """Immutable game configuration.

    Environment overrides:
    - CARD_SIM_STARTING_HP: player hit points for catalog-built games
    - CARD_SIM_POWER_PER_TURN: power granted at the start of each player turn
    - CARD_SIM_LOG_LEVEL: file log level
    - CARD_SIM_LOG_FILE: log file path
    - CARD_SIM_DEBUG: debug mode
    """
    # ==================== Rules ====================
    starting_hit_points: int = field(
        default_factory=lambda: _get_env_int("CARD_SIM_STARTING_HP", 20)
    )
    power_per_turn: int = field(
        default_factory=lambda: _get_env_int("CARD_SIM_POWER_PER_TURN", 3)
    )

    # ==================== Logging and debugging ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("CARD_SIM_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: os.environ.get("CARD_SIM_LOG_FILE", "logs/card_sim.log")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("CARD_SIM_DEBUG", False)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from the environment."""
        return cls()

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the config is usable."""
        errors: list[str] = []
        if self.starting_hit_points <= 0:
            errors.append(
                f"starting_hit_points must be positive, got {self.starting_hit_points}"
            )
        if self.power_per_turn < 0:
            errors.append(f"power_per_turn must be >= 0, got {self.power_per_turn}")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}")
        if not self.log_file.strip():
            errors.append("log_file must not be empty")
        return errors


# lazily created singleton
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """Return the global config, creating it on first use."""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config (used by tests)."""
    global _config
    _config = None
