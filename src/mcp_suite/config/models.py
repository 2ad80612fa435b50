"""Declarative suite configuration.

Field names are snake_case in Python; the JSON file uses the camelCase
aliases (``mcpServer``, ``expectedToolPattern`` ...). Both spellings are
accepted on input.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_MAX_STEPS = 5
DEFAULT_TIMEOUT_MS = 60000


class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TestCase(_ConfigModel):
    __test__ = False  # not a pytest class

    name: str
    description: Optional[str] = None
    input: str
    expected_tool_pattern: Optional[str] = Field(None, alias="expectedToolPattern")
    expected_output_pattern: Optional[str] = Field(None, alias="expectedOutputPattern")
    timeout: Optional[int] = Field(None, gt=0)


class ServerConfig(_ConfigModel):
    id: str
    name: str
    mcp_server: str = Field(..., alias="mcpServer")
    enabled: bool = True
    tests: List[TestCase] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_test_names(self) -> "ServerConfig":
        seen = set()
        for test in self.tests:
            if test.name in seen:
                raise ValueError(f"duplicate test name {test.name!r} in server {self.id!r}")
            seen.add(test.name)
        return self


class GlobalConfig(_ConfigModel):
    model: str = DEFAULT_MODEL
    max_steps: int = Field(DEFAULT_MAX_STEPS, alias="maxSteps", gt=0)
    default_timeout: int = Field(DEFAULT_TIMEOUT_MS, alias="defaultTimeout", gt=0)
    verbose: bool = False


class PartialGlobalConfig(_ConfigModel):
    """One layer of GlobalConfig overrides; unset fields stay ``None``."""

    model: Optional[str] = None
    max_steps: Optional[int] = Field(None, alias="maxSteps", gt=0)
    default_timeout: Optional[int] = Field(None, alias="defaultTimeout", gt=0)
    verbose: Optional[bool] = None


class TestSuiteConfig(_ConfigModel):
    __test__ = False

    servers: List[ServerConfig] = Field(default_factory=list)
    config: Optional[PartialGlobalConfig] = None

    @model_validator(mode="after")
    def _unique_server_ids(self) -> "TestSuiteConfig":
        seen = set()
        for server in self.servers:
            if server.id in seen:
                raise ValueError(f"duplicate server id {server.id!r}")
            seen.add(server.id)
        return self


__all__ = [
    "DEFAULT_MAX_STEPS",
    "DEFAULT_MODEL",
    "DEFAULT_TIMEOUT_MS",
    "GlobalConfig",
    "PartialGlobalConfig",
    "ServerConfig",
    "TestCase",
    "TestSuiteConfig",
]
