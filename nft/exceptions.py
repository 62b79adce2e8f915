"""
NFT Collection Wizard - Exceptions

This module defines the error taxonomy for the configuration schema builder.
"""


class WizardError(Exception):
    """Base exception for all wizard errors."""
    pass


class InputFormatError(WizardError):
    """Raised when raw answer text fails an input validator."""
    pass


class ConstraintViolation(WizardError):
    """Raised when a constructor rejects a business-rule-invalid combination."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.reason = message
        super().__init__(f"Invalid {field}: {message}")


class InternalInconsistencyError(WizardError):
    """Raised when previously validated data fails a later check."""
    pass
