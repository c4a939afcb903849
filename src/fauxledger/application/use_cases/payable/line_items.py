"""Line item construction shared by create and edit."""

import logging
from decimal import Decimal

from fauxledger.application.dto.document_dto import LineItemInput
from fauxledger.domain.entities import LineItem
from fauxledger.domain.exceptions import ValidationError
from fauxledger.domain.value_objects import Money

logger = logging.getLogger(__name__)


def build_line_items(
    document_id: str, inputs: list[LineItemInput], currency: str
) -> tuple[list[LineItem], Money]:
    """Build line items with ids ``{document_id}-li-{n}`` and their summed total."""
    items: list[LineItem] = []
    total = Decimal(0)
    for i, item in enumerate(inputs):
        quantity = item.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(
                f"Line item {i}: quantity must be a positive integer",
                field="lineItems.quantity",
                value=str(item.quantity),
            )
        item_currency = item.currency or currency
        if item_currency != currency:
            raise ValidationError(
                f"Line item {i}: currency {item_currency} does not match "
                f"document currency {currency}",
                field="lineItems.currency",
                value=item_currency,
            )
        try:
            unit_price = Money(item.unit_price, item_currency)
        except (ValueError, ArithmeticError) as e:
            raise ValidationError(
                f"Line item {i}: {e}", field="lineItems.unitPrice", value=str(item.unit_price)
            ) from e
        if unit_price.amount < 0:
            raise ValidationError(
                f"Line item {i}: unit price must not be negative",
                field="lineItems.unitPrice",
                value=str(item.unit_price),
            )
        try:
            line = LineItem.build(
                id=f"{document_id}-li-{i}",
                description=item.description,
                quantity=item.quantity,
                unit_price=unit_price,
                account_code=item.account_code,
            )
        except ValueError as e:
            raise ValidationError(
                f"Line item {i}: {e}", field="lineItems.quantity", value=str(item.quantity)
            ) from e
        total += line.total_amount.amount
        items.append(line)
    try:
        return items, Money(total, currency)
    except ValueError as e:
        raise ValidationError(str(e), field="lineItems", value=str(total)) from e


def resolve_total(
    document_id: str,
    line_items: list[LineItem],
    derived_total: Money,
    supplied: Decimal | None,
    currency: str,
) -> Money:
    """Line items win over a supplied total; without line items the supplied total is used."""
    try:
        supplied_total = Money(Decimal(0) if supplied is None else supplied, currency)
    except (ValueError, ArithmeticError) as e:
        raise ValidationError(str(e), field="totalTransactionAmount", value=str(supplied)) from e

    if not line_items:
        return supplied_total
    if supplied is not None and supplied_total.amount != derived_total.amount:
        logger.warning(
            "Ignoring supplied total %s for %s; line items sum to %s",
            supplied_total.amount,
            document_id,
            derived_total.amount,
        )
    return derived_total
