"""
Core Exceptions - Unified error hierarchy for hostfacts.

Each exception type covers one category of errors.
"""


class HostFactsError(Exception):
    """Base exception for all hostfacts errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Read Errors
# =============================================================================

class FactReadError(HostFactsError):
    """A required fact file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not read '{path}': {reason}",
            {"path": path, "reason": reason}
        )
        self.path = path
        self.reason = reason


# =============================================================================
# Format Errors
# =============================================================================

class OSReleaseFormatError(HostFactsError):
    """An os-release line is not a KEY=VALUE assignment."""

    def __init__(self, line_number: int, line: str):
        super().__init__(
            f"Malformed os-release line {line_number}: missing '='",
            {"line_number": line_number, "line": line}
        )
        self.line_number = line_number
        self.line = line


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(HostFactsError):
    """Configuration file unreadable or invalid."""
    pass
