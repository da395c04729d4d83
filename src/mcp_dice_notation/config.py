from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

CONFIG_KEYS: tuple[str, ...] = ("max_dice", "show_individual")

# Scope used for direct messages, where there is no guild.
DM_SCOPE = "dm"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Fallbacks for scopes that have not configured their own values.
    default_max_dice: int = 100
    default_show_individual: int = 10

    log_level: str = "INFO"


settings = Settings()


class ScopeConfigStore:
    """Per-scope integer dice settings, keyed ``dice_<key>_<scope>``."""

    def __init__(self, base: Settings | None = None) -> None:
        self._base = base or settings
        self._values: dict[str, int] = {}

    @staticmethod
    def _storage_key(scope: str, key: str) -> str:
        if key not in CONFIG_KEYS:
            raise ValueError(f"Unknown dice setting {key!r}. Expected one of: {', '.join(CONFIG_KEYS)}.")
        return f"dice_{key}_{scope or DM_SCOPE}"

    def _default(self, key: str) -> int:
        if key == "max_dice":
            return self._base.default_max_dice
        return self._base.default_show_individual

    def get(self, scope: str, key: str) -> int:
        return self._values.get(self._storage_key(scope, key), self._default(key))

    def set(self, scope: str, key: str, value: int) -> None:
        storage_key = self._storage_key(scope, key)
        if value < 1:
            raise ValueError(f"Dice setting {key!r} must be a positive integer, got {value}.")
        self._values[storage_key] = value
        logger.info("Set %s = %d", storage_key, value)

    def reset(self, scope: str, key: str) -> None:
        storage_key = self._storage_key(scope, key)
        if self._values.pop(storage_key, None) is not None:
            logger.info("Reset %s to default", storage_key)

    def snapshot(self, scope: str) -> dict[str, int]:
        return {key: self.get(scope, key) for key in CONFIG_KEYS}
