"""Logging initialisation shared by every entry point.

Maps the ``[lib_log_rich]`` configuration section onto a lib_log_rich
``RuntimeConfig`` and starts the runtime at most once per process.

Contents:
    * :class:`LoggingConfigModel` - boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime start with std-logging bridge.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are typed here; every other key is
    passed straight through to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a RuntimeConfig.

    ``service`` falls back to the distribution name when not configured.
    """
    raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    On the first call this enables ``.env`` loading for ``LOG_*`` variables,
    initialises the runtime from *config*, and attaches the standard
    :mod:`logging` bridge so ``logging.getLogger(__name__)`` records flow into
    lib_log_rich. Later calls return immediately.

    Example:
        >>> config = Config({"lib_log_rich": {"environment": "test"}}, {})
        >>> init_logging(config)  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
