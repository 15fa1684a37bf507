"""
BuoyView runtime configuration.

There is no config file.  Defaults reproduce the fixed NDBC endpoints; the
environment can override them, and CLI flags override the environment.

Environment overrides::

    BUOYVIEW_STATIONS_URL
    BUOYVIEW_OBSERVATIONS_URL
    BUOYVIEW_TIMEOUT        seconds, float > 0
    BUOYVIEW_LOG_LEVEL      DEBUG | INFO | WARNING | ERROR | CRITICAL
    BUOYVIEW_LOG_FILE       append JSON log lines here instead of stderr
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from buoyview.core.exceptions import ConfigError

ENV_PREFIX = "BUOYVIEW_"

ACTIVE_STATIONS_URL = "https://www.ndbc.noaa.gov/activestations.xml"
LATEST_OBS_URL = "https://www.ndbc.noaa.gov/data/latest_obs/latest_obs.txt"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BuoyViewConfig:
    stations_url: str = ACTIVE_STATIONS_URL
    observations_url: str = LATEST_OBS_URL
    timeout_seconds: float = 30.0
    log_level: str = "WARNING"
    log_file: str = ""

    def with_overrides(self, **overrides: object) -> BuoyViewConfig:
        """Return a validated copy; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "log_level" in changes:
            changes["log_level"] = str(changes["log_level"]).upper()
        return validate(replace(self, **changes))


def validate(cfg: BuoyViewConfig) -> BuoyViewConfig:
    if cfg.timeout_seconds <= 0:
        raise ConfigError(f"timeout must be positive, got {cfg.timeout_seconds}")
    if cfg.log_level not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level {cfg.log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
        )
    for name in ("stations_url", "observations_url"):
        url = getattr(cfg, name)
        if not url.startswith(("http://", "https://")):
            raise ConfigError(f"{name} must be an http(s) URL, got {url!r}")
    return cfg


def load_config(environ: Mapping[str, str] | None = None) -> BuoyViewConfig:
    """Build the config from defaults plus ``BUOYVIEW_*`` environment overrides."""
    env = os.environ if environ is None else environ

    timeout: float | None = None
    raw_timeout = env.get(f"{ENV_PREFIX}TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(f"Invalid {ENV_PREFIX}TIMEOUT: {raw_timeout!r}") from exc

    return BuoyViewConfig().with_overrides(
        stations_url=env.get(f"{ENV_PREFIX}STATIONS_URL") or None,
        observations_url=env.get(f"{ENV_PREFIX}OBSERVATIONS_URL") or None,
        timeout_seconds=timeout,
        log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL") or None,
        log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
    )


__all__ = [
    "ACTIVE_STATIONS_URL",
    "BuoyViewConfig",
    "ENV_PREFIX",
    "LATEST_OBS_URL",
    "LOG_LEVELS",
    "load_config",
    "validate",
]
