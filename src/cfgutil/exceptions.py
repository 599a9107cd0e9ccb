"""Exception hierarchy for cfgutil.

Library code raises these; the CLI turns them into an error message and
exit status 1.
"""

from typing import Any


class CfgUtilError(Exception):
    """Base exception for all cfgutil errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail})"
        return self.message


class UsageError(CfgUtilError):
    """Raised when the input sources given on the command line are ambiguous or missing."""


class InputError(CfgUtilError):
    """Raised when an input file cannot be read or an output file cannot be created."""


class SpecParseError(CfgUtilError):
    """Raised when an OpenAPI document cannot be read into an ApiSpec."""


class PolicyParseError(CfgUtilError):
    """Raised when a cfg document does not follow the cfg grammar.

    Attributes:
        line: 1-indexed line number of the offending line, 0 if unknown.
    """

    def __init__(self, message: str, line: int = 0) -> None:
        super().__init__(message, {"line": line} if line else None)
        self.line = line


class PolicyEmitError(CfgUtilError):
    """Raised when a Cfg holds a key or value that cfg text cannot represent."""
