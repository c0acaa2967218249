# mansi_translator/config/settings.py
"""
Application settings management for the Mansi Translator.

Settings are split in two files:
- settings.template.json: developer defaults (overwritten on update)
- user_settings.json: optional per-install overrides (USER_SETTINGS_KEYS only)
On load the template is read first and user settings override it.

Caching:
- _settings_cache keeps one AppSettings instance per path
- load() returns the cached instance while file mtimes are unchanged
- invalidate_settings_cache() clears it explicitly
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json

from mansi_translator.models.types import (
    MANSI_LANGUAGE_ID,
    RUSSIAN_LANGUAGE_ID,
    StaleResponsePolicy,
)

# Module logger
logger = logging.getLogger(__name__)

# Settings cache: path -> (mtime_template, mtime_user, AppSettings)
_settings_cache: dict[str, tuple[float, float, "AppSettings"]] = {}
_settings_cache_lock = threading.Lock()

# Settings that user_settings.json may override
USER_SETTINGS_KEYS = {
    "stale_response_policy",
    "show_mansi_keyboard",
    "copy_on_output_tap",
}

DEFAULT_API_URL = "http://91.198.71.199:7012/translator"


def _coerce_float(name: str, value: object, default: float) -> float:
    """Convert a JSON value to float, falling back to the default."""
    if isinstance(value, bool):
        logger.warning("%s must be a number (got %r), resetting to %s", name, value, default)
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("%s must be a number (got %r), resetting to %s", name, value, default)
        return default


@dataclass
class AppSettings:
    """Application settings"""

    # Remote translator
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 30.0       # Seconds (connect + read)
    russian_language_id: str = RUSSIAN_LANGUAGE_ID
    mansi_language_id: str = MANSI_LANGUAGE_ID

    # Input coordination
    debounce_seconds: float = 0.5       # Quiet period before a request is issued
    stale_response_policy: str = StaleResponsePolicy.LATEST.value

    # UI
    show_mansi_keyboard: bool = True    # On-screen picker while Mansi is the source
    copy_on_output_tap: bool = False    # Copy when the output area is clicked

    @classmethod
    def load(cls, path: Path, use_cache: bool = True) -> "AppSettings":
        """Load settings from template and user settings files.

        Args:
            path: Settings path (config/settings.json). Used as the base
                  to locate settings.template.json and user_settings.json.
            use_cache: Return the cached instance when files are unchanged
        """
        config_dir = path.parent
        template_path = config_dir / "settings.template.json"
        user_settings_path = config_dir / "user_settings.json"

        cache_key = str(path.resolve())

        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0

        if use_cache:
            with _settings_cache_lock:
                if cache_key in _settings_cache:
                    cached_template_mtime, cached_user_mtime, cached_settings = _settings_cache[cache_key]
                    if cached_template_mtime == template_mtime and cached_user_mtime == user_mtime:
                        logger.debug("Using cached settings for: %s", path)
                        return cached_settings

        data = {}

        # 1. Developer defaults
        if template_path.exists():
            try:
                with open(template_path, 'r', encoding='utf-8-sig') as f:
                    data = json.load(f)
                    logger.debug("Loaded template settings from: %s", template_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load template settings: %s", e)

        # 2. User overrides
        if user_settings_path.exists():
            try:
                with open(user_settings_path, 'r', encoding='utf-8-sig') as f:
                    user_data = json.load(f)
                    for key in USER_SETTINGS_KEYS:
                        if key in user_data:
                            data[key] = user_data[key]
                    logger.debug("Loaded user settings from: %s", user_settings_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load user settings: %s", e)

        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        settings = cls(**filtered_data)
        settings._validate()

        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, settings)

        return settings

    def _validate(self) -> None:
        """Reset out-of-range or non-numeric values to defaults with a warning."""
        self.debounce_seconds = _coerce_float("debounce_seconds", self.debounce_seconds, 0.5)
        self.request_timeout = _coerce_float("request_timeout", self.request_timeout, 30.0)

        if self.debounce_seconds < 0.05 or self.debounce_seconds > 5.0:
            logger.warning("debounce_seconds out of range (%.2f), resetting to 0.5", self.debounce_seconds)
            self.debounce_seconds = 0.5

        if self.request_timeout < 1:
            logger.warning("request_timeout too small (%.1f), resetting to 30", self.request_timeout)
            self.request_timeout = 30.0
        elif self.request_timeout > 300:
            logger.warning("request_timeout too large (%.1f), resetting to 30", self.request_timeout)
            self.request_timeout = 30.0

        valid_policies = {p.value for p in StaleResponsePolicy}
        if self.stale_response_policy not in valid_policies:
            logger.warning(
                "Unknown stale_response_policy %r, resetting to %r",
                self.stale_response_policy, StaleResponsePolicy.LATEST.value,
            )
            self.stale_response_policy = StaleResponsePolicy.LATEST.value

        if not self.api_url:
            logger.warning("api_url is empty, resetting to default")
            self.api_url = DEFAULT_API_URL

    @property
    def response_policy(self) -> StaleResponsePolicy:
        return StaleResponsePolicy(self.stale_response_policy)


def get_default_settings_path() -> Path:
    """Get default settings file path"""
    return Path(__file__).parent.parent.parent / "config" / "settings.json"


def invalidate_settings_cache(path: Optional[Path] = None) -> None:
    """Invalidate settings cache.

    Args:
        path: Only clear the entry for this path. Clears everything when None.
    """
    with _settings_cache_lock:
        if path is None:
            _settings_cache.clear()
            logger.debug("Cleared all settings cache")
        else:
            cache_key = str(path.resolve())
            if cache_key in _settings_cache:
                del _settings_cache[cache_key]
                logger.debug("Cleared settings cache for: %s", path)
