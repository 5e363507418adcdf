"""Configuration helpers for accname."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_DEFAULT_HTML_PARSER = "html.parser"
_DEFAULT_LOG_LEVEL = "WARNING"
_ENV_LOADED = False


@dataclass(frozen=True)
class AccNameConfig:
    """Holds runtime settings for name computation.

    ``registry_dir`` of None means the role tables shipped with the package.
    """

    registry_dir: Optional[str] = None
    html_parser: str = _DEFAULT_HTML_PARSER
    log_level: str = _DEFAULT_LOG_LEVEL

    def with_overrides(
        self,
        *,
        registry_dir: Optional[str] = None,
        html_parser: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "AccNameConfig":
        """Return a copy with the provided overrides applied."""

        cfg = self
        if registry_dir is not None:
            cfg = replace(cfg, registry_dir=registry_dir or None)
        if html_parser:
            cfg = replace(cfg, html_parser=html_parser)
        if log_level:
            cfg = replace(cfg, log_level=log_level.upper())
        return cfg


def load_config(
    *,
    registry_dir: Optional[str] = None,
    html_parser: Optional[str] = None,
    log_level: Optional[str] = None,
) -> AccNameConfig:
    """Load configuration from environment variables and overrides."""

    _ensure_env_loaded()
    resolved_registry = registry_dir
    if resolved_registry is None:
        resolved_registry = (os.getenv("ACCNAME_REGISTRY_DIR") or "").strip() or None

    resolved_parser = (
        html_parser
        or (os.getenv("ACCNAME_HTML_PARSER") or "").strip()
        or _DEFAULT_HTML_PARSER
    )
    resolved_level = (
        log_level
        or (os.getenv("ACCNAME_LOG_LEVEL") or "").strip()
        or _DEFAULT_LOG_LEVEL
    )

    return AccNameConfig(
        registry_dir=resolved_registry,
        html_parser=resolved_parser,
        log_level=resolved_level.upper(),
    )


def configure_logging(config: Optional[AccNameConfig] = None) -> logging.Logger:
    """Apply the configured level to the ``accname`` logger.

    Handlers are left to the application; the library never calls
    ``logging.basicConfig``.
    """

    cfg = config or load_config()
    logger = logging.getLogger("accname")
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        logger.warning("Unknown ACCNAME_LOG_LEVEL %r, using WARNING", cfg.log_level)
        level = logging.WARNING
    logger.setLevel(level)
    return logger


def _ensure_env_loaded() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    dotenv_path = Path.cwd() / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path)
    else:
        load_dotenv()  # Fallback to default search
