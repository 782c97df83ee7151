"""Contract unit (Eenheden) conversion"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from ..errors import InvalidAmountError, InvalidContractTypeError
from ..logging.config import get_accrual_logger
from ..models.finance import ContractType
from ..utils.numbers import ZERO, to_decimal

logger = get_accrual_logger(__name__)


@dataclass(frozen=True)
class ConversionRule:
    """Per-type conversion: amount × rate, optionally capped, or a fixed value."""
    rate: Decimal = ZERO
    cap: Optional[Decimal] = None
    fixed_units: Optional[Decimal] = None


CONVERSION_RULES: dict[ContractType, ConversionRule] = {
    ContractType.PS: ConversionRule(rate=Decimal("0.96"), cap=Decimal("87.50")),
    ContractType.LS: ConversionRule(rate=Decimal("0.96"), cap=Decimal("210.83")),
    ContractType.DELA: ConversionRule(fixed_units=Decimal("60")),
    ContractType.BL: ConversionRule(rate=Decimal("0.73")),
}


def resolve_contract_type(value: Union[ContractType, str], strict: bool = False) -> Optional[ContractType]:
    """
    Resolve a contract type given as enum member or string.

    Args:
        value: ContractType or its string value ("PS", "LS", "DELA", "BL")
        strict: Raise instead of returning None for unknown values

    Returns:
        The ContractType, or None when unknown and not strict

    Raises:
        InvalidContractTypeError: If strict and the value is unknown
    """
    if isinstance(value, ContractType):
        return value

    try:
        return ContractType(value)
    except ValueError:
        if strict:
            raise InvalidContractTypeError(
                f"Unknown contract type: {value!r}",
                value=value,
                context={"allowed": [t.value for t in ContractType]}
            )
        return None


def convert_to_units(contract_type: Union[ContractType, str], amount: Any) -> Decimal:
    """
    Convert a contract amount into Eenheden.

    PS and LS earn amount × 0.96, capped at 87.50 and 210.83 respectively.
    BL earns amount × 0.73 uncapped. DELA is always 60 regardless of amount.
    An unrecognized type yields 0 units.

    Args:
        contract_type: ContractType or its string value
        amount: Contract amount (ignored for DELA)

    Returns:
        Non-negative unit quantity

    Raises:
        InvalidAmountError: If the amount is non-numeric or negative
    """
    resolved = resolve_contract_type(contract_type)
    if resolved is None:
        logger.warning(
            "Unknown contract type, converting to zero units",
            contract_type=str(contract_type)
        )
        return ZERO

    rule = CONVERSION_RULES[resolved]
    if rule.fixed_units is not None:
        return rule.fixed_units

    value = _coerce_amount(amount, resolved)
    if value < 0:
        raise InvalidAmountError(
            f"Amount cannot be negative, got: {value}",
            amount=amount,
            contract_type=resolved.value
        )

    units = value * rule.rate
    if rule.cap is not None:
        units = min(units, rule.cap)

    return units


def normalize_contract_amount(contract_type: Union[ContractType, str], amount: Any) -> Decimal:
    """
    Apply the creation-time amount rule for a new contract.

    DELA contracts carry no amount and are forced to 0. Every other type
    requires a positive amount.

    Raises:
        InvalidContractTypeError: If the type is unknown
        InvalidAmountError: If a non-DELA amount is missing or not positive
    """
    resolved = resolve_contract_type(contract_type, strict=True)

    if resolved is ContractType.DELA:
        return ZERO

    if amount is None:
        raise InvalidAmountError(
            f"Amount is required for {resolved.value} contracts",
            amount=amount,
            contract_type=resolved.value
        )

    value = _coerce_amount(amount, resolved)
    if value <= 0:
        raise InvalidAmountError(
            f"Amount must be positive for {resolved.value} contracts, got: {value}",
            amount=amount,
            contract_type=resolved.value
        )

    return value


def _coerce_amount(amount: Any, contract_type: ContractType) -> Decimal:
    try:
        return to_decimal(amount)
    except ValueError as e:
        raise InvalidAmountError(
            str(e),
            amount=amount,
            contract_type=contract_type.value
        ) from e
