"""Process-wide runtime settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GlobalSettings:
    """Settings that may change while the program runs.

    ``encoder_sensitivity``: 1.0 is normal, above is more sensitive,
    below is less sensitive.
    """

    encoder_sensitivity: float = 1.0


_GLOBAL_SETTINGS = GlobalSettings()


def get_global_settings() -> GlobalSettings:
    """Return the shared settings instance."""
    return _GLOBAL_SETTINGS