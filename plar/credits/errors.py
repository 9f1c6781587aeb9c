"""Canonical credit engine error types.

Standard error codes:
- UNKNOWN_PHASE / UNKNOWN_EVENT / UNKNOWN_CATEGORY: id not in the loaded catalog
- INVALID_OVERRIDE: override minutes are not a non-negative integer
- INVALID_CATALOG: catalog data failed validation
- RESET_NOT_REQUESTED: reset confirmed without a pending request
- INVALID_TOGGLE: credited flag passed as something other than a bool

Malformed H:MM override text is not an error; it is rejected as a no-op.
Over-credit (credited time above the requirement) is not an error either.
"""


class CreditEngineError(Exception):
    """Base class for credit engine errors.

    Attributes:
        code: Error code (e.g., "UNKNOWN_EVENT", "INVALID_CATALOG")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")

    def __str__(self) -> str:
        return f"{self.code}: {'; '.join(self.details)}"


class UnknownIdentifierError(CreditEngineError, KeyError):
    """Raised when a phase, event or category id is not in the catalog.

    This is an integration error, never a user-recoverable condition.
    """


class InvalidOverrideError(CreditEngineError, ValueError):
    """Raised when an override value is negative or not an integer."""


class CatalogError(CreditEngineError, ValueError):
    """Raised when catalog data cannot be loaded into a session."""


class ResetNotRequestedError(CreditEngineError, RuntimeError):
    """Raised when a reset is confirmed without a prior request."""


class InvalidToggleError(CreditEngineError, TypeError):
    """Raised when a credited flag is not a bool."""
