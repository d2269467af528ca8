"""
Environment-backed configuration.

All settings come from GIFT_PLANNER_* variables. A .env file in the working
directory is loaded first so local overrides don't need to be exported.
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "GIFT_PLANNER_"


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing or invalid."""


def _read(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = _read(env, name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _read_float(env: Mapping[str, str], name: str, default: Optional[float]) -> Optional[float]:
    raw = _read(env, name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


@dataclass(slots=True)
class PlannerConfiguration:
    """Settings shared by the planner services."""
    api_base_url: str = "https://api.changes.tg"
    user_agent: str = "NFT-Gift-Planner/1.0"
    max_attempts: int = 3
    backoff_seconds: float = 0.8
    request_timeout: Optional[float] = None
    prewarm_count: int = 5
    session_dir: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> "PlannerConfiguration":
        """
        Build configuration from environment variables.

        Args:
            env: Mapping to read from, defaults to os.environ
            use_dotenv: If True, load a .env file into os.environ first

        Returns:
            Validated PlannerConfiguration

        Raises:
            ConfigurationError: If any value cannot be parsed or is out of range
        """
        if env is None:
            if use_dotenv:
                load_dotenv()
            env = os.environ

        defaults = cls()
        session_dir = _read(env, "SESSION_DIR")

        config = cls(
            api_base_url=(_read(env, "API_BASE_URL") or defaults.api_base_url).rstrip("/"),
            user_agent=_read(env, "USER_AGENT") or defaults.user_agent,
            max_attempts=_read_int(env, "MAX_ATTEMPTS", defaults.max_attempts),
            backoff_seconds=_read_float(env, "BACKOFF_SECONDS", defaults.backoff_seconds),
            request_timeout=_read_float(env, "REQUEST_TIMEOUT", None),
            prewarm_count=_read_int(env, "PREWARM_COUNT", defaults.prewarm_count),
            session_dir=Path(session_dir) if session_dir else None,
            log_level=(_read(env, "LOG_LEVEL") or defaults.log_level).upper(),
        )
        config.validate()
        logger.debug("Configuration loaded: base_url=%s session_dir=%s", config.api_base_url, config.session_dir)
        return config

    def validate(self) -> None:
        """Check value ranges, raising ConfigurationError on the first problem."""
        if not self.api_base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"{ENV_PREFIX}API_BASE_URL must be an http(s) URL, got {self.api_base_url!r}")
        if self.max_attempts < 1:
            raise ConfigurationError(f"{ENV_PREFIX}MAX_ATTEMPTS must be at least 1, got {self.max_attempts}")
        if self.backoff_seconds is None or self.backoff_seconds < 0:
            raise ConfigurationError(f"{ENV_PREFIX}BACKOFF_SECONDS must be >= 0, got {self.backoff_seconds}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(f"{ENV_PREFIX}REQUEST_TIMEOUT must be positive, got {self.request_timeout}")
        if self.prewarm_count < 0:
            raise ConfigurationError(f"{ENV_PREFIX}PREWARM_COUNT must be >= 0, got {self.prewarm_count}")
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {self.log_level!r}")
