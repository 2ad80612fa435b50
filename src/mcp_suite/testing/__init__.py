"""Test execution, evaluation and reporting."""

from .checks import DEFAULT_CHECKS, NO_OUTPUT_ERROR, CheckOutcome, evaluate  # noqa: F401
from .models import ServerTestResults, SuiteResults, TestResult  # noqa: F401
from .reporter import Reporter  # noqa: F401
from .runner import MAX_RETRIES, RETRY_BASE_DELAY_MS, MCPTestRunner  # noqa: F401

__all__ = [
    "CheckOutcome",
    "DEFAULT_CHECKS",
    "MAX_RETRIES",
    "MCPTestRunner",
    "NO_OUTPUT_ERROR",
    "RETRY_BASE_DELAY_MS",
    "Reporter",
    "ServerTestResults",
    "SuiteResults",
    "TestResult",
    "evaluate",
]
