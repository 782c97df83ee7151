"""
Input validation error classifications.

Raised at the boundary where caller-supplied amounts, unit quantities and
client fields enter the engine.
"""

from typing import Any, Dict, Optional


class InputValidationError(Exception):
    """Base class for rejected caller input that can be corrected and resubmitted."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidAmountError(InputValidationError):
    """Contract amount is non-numeric, non-finite or out of range for its type."""

    def __init__(self, message: str, amount: Any = None,
                 contract_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount
        self.contract_type = contract_type


class NegativeUnitsError(InputValidationError):
    """Unit quantity passed to the tier engine is below zero."""

    def __init__(self, message: str, units: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.units = units


class MissingFieldError(InputValidationError):
    """A required field is empty or absent."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class InvalidContractTypeError(InputValidationError):
    """Contract type is not one of PS, LS, DELA or BL."""

    def __init__(self, message: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value


class InvalidDateError(InputValidationError):
    """A date or timestamp field is present but cannot be parsed."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.value = value


class DuplicateClientError(InputValidationError):
    """More than one seeded client carries the same id."""

    def __init__(self, message: str, client_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.client_id = client_id
