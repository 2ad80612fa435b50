from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .models import GlobalConfig, PartialGlobalConfig, TestSuiteConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the suite configuration cannot be loaded."""


def load_suite_config(path: Union[str, Path]) -> TestSuiteConfig:
    """Read and validate a suite file (``servers`` + optional ``config``)."""

    config_path = Path(path).expanduser().resolve()
    logger.debug("Loading suite configuration from %s", config_path)

    try:
        content = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Configuration file not found at {config_path}. "
            "Please create a servers.json file with your MCP server configurations."
        ) from None
    except OSError as exc:
        raise ConfigError(f"Failed reading {config_path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration (expected object): {config_path}")

    try:
        return TestSuiteConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc


def build_global_config(
    file: Optional[PartialGlobalConfig] = None,
    cli: Optional[PartialGlobalConfig] = None,
    defaults: Optional[GlobalConfig] = None,
) -> GlobalConfig:
    """Merge defaults <- file layer <- CLI layer into one GlobalConfig.

    Unset fields in a layer never override a lower layer. ``verbose`` is
    OR-ed so the CLI flag can switch it on but never off.
    """

    merged = (defaults or GlobalConfig()).model_dump()
    for layer in (file, cli):
        if layer is None:
            continue
        merged.update(layer.model_dump(exclude_none=True))

    merged["verbose"] = bool(
        (cli is not None and cli.verbose)
        or (file is not None and file.verbose)
        or (defaults is not None and defaults.verbose)
    )
    return GlobalConfig.model_validate(merged)
