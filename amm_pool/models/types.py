"""Field types shared by the request and response models."""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from amm_pool.constants import UINT256_MAX

_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")


def validate_uint256(value: Any) -> str:
    """Coerce an int or decimal string into a canonical uint256 string.

    Raises:
        ValueError: For bools, floats, non-decimal strings and out-of-range values
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"amount must be an integer or decimal string, got {type(value).__name__}")
    try:
        amount = int(value)
    except ValueError as err:
        raise ValueError(f"amount is not a decimal integer: {value!r}") from err

    if not 0 <= amount <= UINT256_MAX:
        raise ValueError(f"amount {value} is outside the uint256 range")
    return str(amount)


# Amounts travel as decimal strings so JSON clients never lose precision
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="Unsigned 256-bit amount as a decimal string"),
]


def normalize_address(address: str) -> str:
    """Lowercase an address so ledger keys compare equal regardless of checksum case."""
    lowered = address.lower()
    return lowered if lowered.startswith("0x") else f"0x{lowered}"


def _lowercase(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


Address = Annotated[
    str,
    Field(pattern=r"^0x[a-fA-F0-9]{40}$", description="20-byte hex account"),
    BeforeValidator(_lowercase),
]


def is_valid_address(address: str) -> bool:
    return isinstance(address, str) and _ADDRESS_RE.match(address.lower()) is not None
