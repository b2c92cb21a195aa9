"""Configuration for the query compiler and the dispatch executor.

Both configurations are immutable; use :func:`dataclasses.replace` to derive
a variant. :func:`load_config_from_env` builds them from ``SQLTAGS_*``
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Literal

from sqltags.exceptions import ImproperConfigurationError
from sqltags.utils.logging import get_logger

__all__ = ("CompilerConfig", "DuplicatePolicy", "ExecutorConfig", "load_config_from_env")

logger = get_logger("config")

DuplicatePolicy = Literal["overwrite", "error"]
DUPLICATE_POLICIES = ("overwrite", "error")


@dataclass(frozen=True)
class CompilerConfig:
    """Options for :func:`sqltags.compiler.compile_queries`."""

    on_duplicate: DuplicatePolicy = "overwrite"
    """What to do when a query name is defined twice: keep the later definition or raise."""

    warn_non_ascii: bool = True
    """Log a warning for query names containing non ASCII characters."""

    def __post_init__(self) -> None:
        if self.on_duplicate not in DUPLICATE_POLICIES:
            msg = f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {self.on_duplicate!r}"
            raise ImproperConfigurationError(msg)


@dataclass(frozen=True)
class ExecutorConfig:
    """Options for :class:`sqltags.executor.Executor`."""

    strict_parameters: bool = True
    """Raise when a placeholder has no matching argument instead of binding ``None``."""


def load_config_from_env() -> "tuple[CompilerConfig, ExecutorConfig]":
    """Load configuration from environment variables.

    Environment Variables Supported:
    - SQLTAGS_ON_DUPLICATE: ``overwrite`` or ``error``
    - SQLTAGS_WARN_NON_ASCII: Warn about non ASCII query names (true/false)
    - SQLTAGS_STRICT_PARAMETERS: Raise on missing arguments (true/false)

    Returns:
        The compiler and executor configurations.
    """
    compiler_config = CompilerConfig(
        on_duplicate=os.getenv("SQLTAGS_ON_DUPLICATE", "overwrite").lower().strip(),  # type: ignore[arg-type]
        warn_non_ascii=_env_bool("SQLTAGS_WARN_NON_ASCII", True),
    )
    executor_config = ExecutorConfig(strict_parameters=_env_bool("SQLTAGS_STRICT_PARAMETERS", True))
    logger.debug("Loaded configuration from environment: %s, %s", compiler_config, executor_config)
    return compiler_config, executor_config


def _env_bool(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on", "enabled")
