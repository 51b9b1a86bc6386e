"""lib_log_rich runtime initialization shared by every entry point.

The console script, ``python -m greeter`` and the tests all call
:func:`init_logging` through the composition root; only the first call
configures the runtime.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated view of the ``[lib_log_rich]`` configuration section.

    Keys other than ``service`` and ``environment`` are kept and forwarded
    to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a ``RuntimeConfig``.

    ``service`` falls back to the package name when not configured.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime once and bridge stdlib logging into it.

    ``.env`` files are loaded before reading the configuration so ``LOG_*``
    variables defined there take effect. Later calls are no-ops.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.
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
