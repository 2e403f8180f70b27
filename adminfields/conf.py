# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the field layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping

from .core.types import LoadingStrategy

_TEXT_ALIGNMENTS = ("left", "center", "right")
DIALOG_SIZES = ("sm", "md", "lg", "xl", "full")


@dataclass
class AdminFieldsSettings:
    """Container for field defaults derived from environment variables."""

    default_text_align: str = "left"
    default_loading_strategy: LoadingStrategy = LoadingStrategy.EAGER
    default_dialog_size: str = "md"
    max_panel_columns: int = 4
    api_prefix: str = "/api"

    def __post_init__(self) -> None:
        """Normalize values that arrive as raw strings."""
        if self.default_text_align not in _TEXT_ALIGNMENTS:
            self.default_text_align = "left"
        self.default_loading_strategy = LoadingStrategy(self.default_loading_strategy)
        if self.default_dialog_size not in DIALOG_SIZES:
            self.default_dialog_size = "md"
        if self.max_panel_columns < 1:
            self.max_panel_columns = 1
        self.api_prefix = self._normalize_prefix(self.api_prefix)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "ADMINFIELDS_",
    ) -> "AdminFieldsSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        text_align = (data.get("TEXT_ALIGN") or "left").strip().lower()
        strategy_raw = (data.get("LOADING_STRATEGY") or "eager").strip().lower()
        try:
            strategy = LoadingStrategy(strategy_raw)
        except ValueError:
            strategy = LoadingStrategy.EAGER
        dialog_size = (data.get("DIALOG_SIZE") or "md").strip().lower()
        max_columns = cls._to_int(data.get("MAX_PANEL_COLUMNS"), default=4)
        api_prefix = data.get("API_PREFIX") or "/api"
        return cls(
            default_text_align=text_align,
            default_loading_strategy=strategy,
            default_dialog_size=dialog_size,
            max_panel_columns=max_columns,
            api_prefix=api_prefix,
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``AdminFieldsSettings`` instance."""

    def __init__(self, initial: AdminFieldsSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[AdminFieldsSettings], None]] = []

    def configure(self, settings: AdminFieldsSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> AdminFieldsSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = AdminFieldsSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Drop the active settings so the next access reloads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[AdminFieldsSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[AdminFieldsSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: AdminFieldsSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> AdminFieldsSettings:
    """Return the active settings instance used by field descriptors."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Forget configured settings; mainly useful for tests."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[AdminFieldsSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[AdminFieldsSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "AdminFieldsSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
