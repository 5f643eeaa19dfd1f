"""
Where: `raytracer.common.settings`
What: typed, central view of the project configuration, loaded at import.
Why: one place for defaults, the YAML config file and environment overrides.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .env import env_int, env_str

logger = logging.getLogger(__name__)

DEFAULT_PPM_OUTPUT_DIR = "ppm"
DEFAULT_PPM_NAME_LENGTH = 10


@dataclass
class _Settings:
    # Export
    PPM_OUTPUT_DIR: str = DEFAULT_PPM_OUTPUT_DIR
    PPM_NAME_LENGTH: int = DEFAULT_PPM_NAME_LENGTH


_settings = _Settings()


def _export_section(cfg: Mapping[str, Any]) -> Mapping[str, Any]:
    section = cfg.get("export")
    return section if isinstance(section, Mapping) else {}


def reload_from_env() -> None:
    """Re-read settings: defaults < YAML config < environment.

    - `RT_PPM_DIR` overrides `export.ppm_dir`.
    - `RT_PPM_NAME_LENGTH` overrides `export.ppm_name_length`; values below 1 become 1.
    """
    from raytracer.util.utils import load_config

    export_cfg = _export_section(load_config() or {})

    ppm_dir = export_cfg.get("ppm_dir", DEFAULT_PPM_OUTPUT_DIR)
    if not isinstance(ppm_dir, str) or not ppm_dir.strip():
        ppm_dir = DEFAULT_PPM_OUTPUT_DIR
    name_length = export_cfg.get("ppm_name_length", DEFAULT_PPM_NAME_LENGTH)
    if not isinstance(name_length, int) or isinstance(name_length, bool):
        name_length = DEFAULT_PPM_NAME_LENGTH

    _settings.PPM_OUTPUT_DIR = env_str("RT_PPM_DIR", ppm_dir) or DEFAULT_PPM_OUTPUT_DIR
    _settings.PPM_NAME_LENGTH = env_int("RT_PPM_NAME_LENGTH", name_length, min_value=1) or 1
    if _settings.PPM_NAME_LENGTH < 1:
        _settings.PPM_NAME_LENGTH = 1

    logger.debug(
        "settings loaded: ppm_dir=%s ppm_name_length=%d",
        _settings.PPM_OUTPUT_DIR,
        _settings.PPM_NAME_LENGTH,
    )


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# Initial load
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
