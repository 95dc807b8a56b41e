"""
Application Config (Singleton, redesigned)
==========================================

Process-wide settings shared by several consumers.

Instead of a hidden static instance with lazy init, AppConfig is an
ordinary object. It is created once at startup (optionally seeded from
Settings.app_config) and passed to every consumer that needs it. Code
under test builds its own instance, so tests never leak state into
each other.

Example:
    config = AppConfig({"mode": "production"})
    orders = OrderService(config)
    alerts = NotificationService(config)
    config.set("mode", "maintenance")   # both consumers see the change
"""

import logging
from typing import Dict, List, Mapping, Optional

from patternbook.config import Settings


logger = logging.getLogger(__name__)


class AppConfig:
    """
    String key/value configuration store.

    Attributes:
        keys: Names of all settings currently stored
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._settings: Dict[str, str] = dict(initial or {})

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppConfig":
        """Seed an AppConfig from the app_config section of Settings."""
        return cls(settings.app_config)

    def set(self, key: str, value: str) -> None:
        previous = self._settings.get(key)
        self._settings[key] = value
        if previous is not None and previous != value:
            logger.info(f"AppConfig {key}: {previous} -> {value}")

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._settings.get(key, default)

    @property
    def keys(self) -> List[str]:
        return list(self._settings)

    def __contains__(self, key: object) -> bool:
        return key in self._settings


class OrderService:
    """Consumer that reads the run mode from the injected config."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def describe(self) -> str:
        return f"Orders running in {self.config.get('mode', 'development')} mode"


class NotificationService:
    """Second consumer sharing the same config instance."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def describe(self) -> str:
        return f"Notifications running in {self.config.get('mode', 'development')} mode"


def main(settings: Optional[Settings] = None) -> None:
    config = AppConfig.from_settings(settings) if settings else AppConfig()
    orders = OrderService(config)
    alerts = NotificationService(config)

    config.set("mode", "production")

    print(f"orders: {orders.describe()}")
    print(f"notifications: {alerts.describe()}")
    print(f"Same Instance? {orders.config is alerts.config}")


if __name__ == "__main__":
    main()
