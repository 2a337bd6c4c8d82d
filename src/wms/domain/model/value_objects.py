"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from wms.domain.exceptions import InvalidAmountError, ValidationError

SKU_SEQUENCE_WIDTH = 4
FALLBACK_SKU_PREFIX = "W"


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity of stock units.

    Zero is allowed: an item may be recorded before any stock arrives.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidAmountError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidAmountError(f"Quantity cannot be negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Sku:
    """Stock Keeping Unit, unique within one warehouse's item set."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("SKU cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def prefix_for(warehouse_name: str) -> str:
        """Upper-cased first character of the warehouse name.

        Falls back to ``W`` when the name is blank or starts with a
        character that cannot head a SKU.
        """
        stripped = (warehouse_name or "").strip()
        if not stripped or not stripped[0].isalnum():
            return FALLBACK_SKU_PREFIX
        return stripped[0].upper()

    @staticmethod
    def generate(warehouse_name: str, sequence: int) -> Sku:
        """Build ``<PREFIX>-<NNNN>``, e.g. ``T-0005``."""
        if sequence <= 0:
            raise InvalidAmountError("SKU sequence must be positive")
        prefix = Sku.prefix_for(warehouse_name)
        return Sku(f"{prefix}-{sequence:0{SKU_SEQUENCE_WIDTH}d}")
