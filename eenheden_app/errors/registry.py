"""
Registry and system error classifications.

These errors are not fixed by resubmitting the same call: the referenced
record does not exist, the configuration is invalid, or a calculation
failed unexpectedly.
"""

from typing import Any, Dict, List, Optional


class RegistryError(Exception):
    """Base class for lookup, configuration and calculation failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ClientNotFoundError(RegistryError):
    """No client is registered under the given id."""

    def __init__(self, message: str, client_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.client_id = client_id


class ContractNotFoundError(RegistryError):
    """The client exists but holds no contract with the given id."""

    def __init__(self, message: str, client_id: Optional[str] = None,
                 contract_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.client_id = client_id
        self.contract_id = contract_id


class ConfigurationError(RegistryError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class CalculationError(RegistryError):
    """Unexpected failure while deriving portfolio statistics."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.calculation_input = calculation_input
