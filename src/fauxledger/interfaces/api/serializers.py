"""JSON shapes for documents and list input parsing."""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from fauxledger.application.dto.document_dto import LineItemInput, PayableCreateInput
from fauxledger.application.pagination import Page
from fauxledger.domain.entities import Approver, Document, LineItem
from fauxledger.domain.exceptions import ValidationError
from fauxledger.domain.value_objects import DocumentType, Money, format_timestamp


def _amount(value: Decimal) -> int | float:
    """Integral amounts render as int, others as float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def money_to_dict(money: Money) -> dict[str, Any]:
    return {"amountInMajors": _amount(money.amount), "currency": money.currency}


def approver_to_dict(approver: Approver) -> dict[str, Any]:
    return {
        "userId": approver.user_id,
        "fullName": approver.full_name,
        "approvalSentAt": (
            format_timestamp(approver.approval_sent_at) if approver.approval_sent_at else None
        ),
    }


def line_item_to_dict(item: LineItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "description": item.description,
        "quantity": item.quantity,
        "unitPrice": money_to_dict(item.unit_price),
        "totalAmount": money_to_dict(item.total_amount),
        "accountCode": item.account_code,
    }


def document_to_dict(doc: Document) -> dict[str, Any]:
    """Render a document with camelCase keys; unset workflow metadata is omitted."""
    payload: dict[str, Any] = {
        "id": doc.id,
        "documentType": str(doc.document_type),
        "status": str(doc.status),
        "documentNumber": doc.document_number,
        "documentDate": doc.document_date.isoformat(),
        "createdAt": format_timestamp(doc.created_at),
        "updatedAt": format_timestamp(doc.updated_at),
        "businessPartnerId": doc.business_partner_id,
        "businessPartnerName": doc.business_partner_name,
        "description": doc.description,
        "totalTransactionAmount": money_to_dict(doc.total_amount),
        "lineItems": [line_item_to_dict(item) for item in doc.line_items],
        "version": doc.version,
    }
    if doc.next_approver is not None:
        payload["nextApprover"] = approver_to_dict(doc.next_approver)
    if doc.approval_note is not None:
        payload["approvalNote"] = doc.approval_note
    if doc.decline_reason is not None:
        payload["declineReason"] = doc.decline_reason
    if doc.cancellation_reason is not None:
        payload["cancellationReason"] = doc.cancellation_reason
    if doc.canceled_at is not None:
        payload["canceledAt"] = format_timestamp(doc.canceled_at)
    if doc.payment_at is not None:
        payload["paymentAt"] = format_timestamp(doc.payment_at)
    return payload


def page_to_dict(page: Page[Document]) -> dict[str, Any]:
    return {
        "data": [document_to_dict(doc) for doc in page.data],
        "hasMore": page.has_more,
        "nextCursor": page.next_cursor,
        "prevCursor": page.prev_cursor,
    }


def _decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{field} must be a number", field=field, value=str(value))
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number", field=field, value=str(value)) from None


def _money_input(value: Any, field: str) -> tuple[Decimal, str | None]:
    if not isinstance(value, dict) or "amountInMajors" not in value:
        raise ValidationError(
            f"{field} must be an object with amountInMajors", field=field, value=str(value)
        )
    return _decimal(value["amountInMajors"], field), _currency(
        value.get("currency"), f"{field}.currency"
    )


def _currency(value: Any, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field, value=str(value))
    return value


def parse_line_items(raw: Any) -> list[LineItemInput]:
    """Parse a ``lineItems`` array; totals and ids are ignored."""
    if not isinstance(raw, list):
        raise ValidationError("lineItems must be an array", field="lineItems")
    items = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValidationError("Each line item must be an object", field="lineItems")
        unit_price, currency = _money_input(entry.get("unitPrice"), "lineItems.unitPrice")
        items.append(
            LineItemInput(
                description=str(entry.get("description", "")),
                quantity=entry.get("quantity", 1),
                unit_price=unit_price,
                account_code=str(entry.get("accountCode", "")),
                currency=currency,
            )
        )
    return items


def parse_create_input(body: dict[str, Any]) -> PayableCreateInput:
    """Map a camelCase create body onto PayableCreateInput."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    input_data = PayableCreateInput()
    if "documentType" in body:
        try:
            input_data.document_type = DocumentType(body["documentType"])
        except ValueError:
            raise ValidationError(
                f"Invalid documentType: {body['documentType']}",
                field="documentType",
                value=str(body["documentType"]),
            ) from None
    if body.get("documentNumber"):
        input_data.document_number = str(body["documentNumber"])
    if body.get("documentDate"):
        try:
            input_data.document_date = date.fromisoformat(str(body["documentDate"]))
        except ValueError:
            raise ValidationError(
                "documentDate must be an ISO date",
                field="documentDate",
                value=str(body["documentDate"]),
            ) from None
    for key, attr in (
        ("businessPartnerId", "business_partner_id"),
        ("businessPartnerName", "business_partner_name"),
        ("description", "description"),
    ):
        if key in body and body[key] is not None:
            setattr(input_data, attr, str(body[key]))
    if body.get("totalTransactionAmount") is not None:
        amount, currency = _money_input(
            body["totalTransactionAmount"], "totalTransactionAmount"
        )
        input_data.total_amount = amount
        if currency:
            input_data.currency = currency
    currency = _currency(body.get("currency"), "currency")
    if currency:
        input_data.currency = currency
    if body.get("lineItems") is not None:
        input_data.line_items = parse_line_items(body["lineItems"])
    return input_data


def parse_limit(raw: str | None) -> int | None:
    """Parse the ``limit`` query parameter; range clamping happens downstream."""
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("limit must be an integer", field="limit", value=raw) from None
