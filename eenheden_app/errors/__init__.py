"""
Error classification for the accrual engine and client registry.

Input validation errors are recoverable: the caller can correct the input
and retry. Registry errors signal lookups or configuration that cannot be
satisfied as given.
"""

from .input_validation import (
    InputValidationError,
    InvalidAmountError,
    NegativeUnitsError,
    MissingFieldError,
    InvalidContractTypeError,
    InvalidDateError,
    DuplicateClientError,
)
from .registry import (
    RegistryError,
    ClientNotFoundError,
    ContractNotFoundError,
    ConfigurationError,
    CalculationError,
)

__all__ = [
    # Input Validation Errors
    "InputValidationError",
    "InvalidAmountError",
    "NegativeUnitsError",
    "MissingFieldError",
    "InvalidContractTypeError",
    "InvalidDateError",
    "DuplicateClientError",
    # Registry Errors
    "RegistryError",
    "ClientNotFoundError",
    "ContractNotFoundError",
    "ConfigurationError",
    "CalculationError",
]
