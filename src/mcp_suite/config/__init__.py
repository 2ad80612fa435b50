"""Suite configuration: environment settings, file models and loading."""

from .loader import ConfigError, build_global_config, load_suite_config  # noqa: F401
from .models import (  # noqa: F401
    GlobalConfig,
    PartialGlobalConfig,
    ServerConfig,
    TestCase,
    TestSuiteConfig,
)
from .settings import Settings, get_settings  # noqa: F401

__all__ = [
    "ConfigError",
    "GlobalConfig",
    "PartialGlobalConfig",
    "ServerConfig",
    "Settings",
    "TestCase",
    "TestSuiteConfig",
    "build_global_config",
    "get_settings",
    "load_suite_config",
]
