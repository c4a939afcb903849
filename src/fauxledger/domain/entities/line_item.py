"""Line item entity."""

from dataclasses import dataclass

from fauxledger.domain.value_objects import Money


@dataclass(frozen=True)
class LineItem:
    """Line item owned by a document; total is quantity times unit price."""

    id: str
    description: str
    quantity: int
    unit_price: Money
    total_amount: Money
    account_code: str

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Line item quantity must be a positive integer")

    @classmethod
    def build(
        cls,
        id: str,
        description: str,
        quantity: int,
        unit_price: Money,
        account_code: str,
    ) -> "LineItem":
        """Create line item with its total computed from quantity and unit price."""
        return cls(
            id=id,
            description=description,
            quantity=quantity,
            unit_price=unit_price,
            total_amount=unit_price.times(quantity),
            account_code=account_code,
        )
