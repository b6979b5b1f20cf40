"""Settings helpers to centralize configuration access."""
from __future__ import annotations

from typing import Optional

from config import Config


def load_settings(
    debug_override: Optional[bool] = None,
    *,
    language: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> Config:
    """Return a Config instance, applying optional runtime overrides."""
    config = Config.from_env()
    if debug_override is not None:
        config.debug = debug_override
    if language:
        config.language = language.strip().lower()
    if max_workers is not None:
        config.max_workers = max(int(max_workers), 1)
    return config
