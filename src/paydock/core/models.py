"""
Request and response records exchanged with the Paydock API.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

__all__ = [
    "Charge",
    "ChargeItemResponse",
    "ChargeItemsResponse",
    "ChargeRefundResponse",
    "ChargeRequest",
    "ChargeResponse",
    "ChargeSearchRequest",
    "Customer",
    "CustomerItemResponse",
    "CustomerItemsResponse",
    "CustomerRequest",
    "CustomerSearchRequest",
    "PaymentSource",
    "parse_json",
    "serialize",
]


def _encode_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Amount {value} is not a finite number")
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, dict):
            value = _compact(value)
        cleaned[key] = value
    return cleaned


def serialize(payload: Dict[str, Any]) -> str:
    """Render a request body; ``Decimal`` amounts become JSON numbers."""
    return json.dumps(payload, default=_encode_default)


def parse_json(text: str) -> Any:
    return json.loads(text, parse_float=Decimal)


def _decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return Decimal(str(value))


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}


def _resource(payload: Dict[str, Any]) -> Dict[str, Any]:
    resource = payload.get("resource")
    return resource if isinstance(resource, dict) else {}


# Requests


@dataclass
class PaymentSource:
    gateway_id: Optional[str] = None
    type: Optional[str] = None
    card_name: Optional[str] = None
    card_number: Optional[str] = None
    expire_month: Optional[str] = None
    expire_year: Optional[str] = None
    card_ccv: Optional[str] = None
    account_name: Optional[str] = None
    account_bsb: Optional[str] = None
    account_number: Optional[str] = None
    address_line1: Optional[str] = None
    address_city: Optional[str] = None
    address_postcode: Optional[str] = None
    address_country: Optional[str] = None


@dataclass
class CustomerRequest:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    reference: Optional[str] = None
    token: Optional[str] = None
    payment_source: Optional[PaymentSource] = None
    meta: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(asdict(self))


@dataclass
class ChargeRequest:
    amount: Decimal
    currency: str
    token: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    customer_id: Optional[str] = None
    payment_source_id: Optional[str] = None
    meta: Optional[Dict[str, str]] = None
    customer: Optional[CustomerRequest] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(asdict(self))


@dataclass
class ChargeSearchRequest:
    """
    Filters for ``GET charges``.

    ``transaction_external_id`` is deprecated; set ``reference`` instead.
    """

    skip: Optional[int] = None
    limit: Optional[int] = None
    subscription_id: Optional[str] = None
    gateway_id: Optional[str] = None
    company_id: Optional[str] = None
    created_at_from: Optional[str] = None
    created_at_to: Optional[str] = None
    search: Optional[str] = None
    status: Optional[str] = None
    archived: Optional[bool] = None
    reference: Optional[str] = None
    transaction_external_id: Optional[str] = None


@dataclass
class CustomerSearchRequest:
    id: Optional[str] = None
    skip: Optional[int] = None
    limit: Optional[int] = None
    search: Optional[str] = None
    sortkey: Optional[str] = None
    sortdirection: Optional[str] = None
    gateway_id: Optional[str] = None
    archived: Optional[bool] = None
    reference: Optional[str] = None
    payment_source_id: Optional[str] = None


# Responses


@dataclass
class Charge:
    id: Optional[str]
    amount: Optional[Decimal]
    currency: Optional[str]
    status: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    customer_id: Optional[str] = None
    company_id: Optional[str] = None
    archived: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    meta: Dict[str, str] = field(default_factory=dict)
    transactions: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Charge":
        transactions = data.get("transactions")
        return cls(
            id=data.get("_id"),
            amount=_decimal(data.get("amount")),
            currency=data.get("currency"),
            status=data.get("status"),
            reference=data.get("reference"),
            description=data.get("description"),
            customer_id=data.get("customer_id"),
            company_id=data.get("company_id"),
            archived=bool(data.get("archived", False)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            meta=_string_map(data.get("meta")),
            transactions=list(transactions) if isinstance(transactions, list) else [],
            raw=data,
        )


@dataclass
class Customer:
    id: Optional[str]
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    reference: Optional[str] = None
    status: Optional[str] = None
    default_source: Optional[str] = None
    archived: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    payment_sources: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        sources = data.get("payment_sources")
        return cls(
            id=data.get("_id"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            email=data.get("email"),
            phone=data.get("phone"),
            reference=data.get("reference"),
            status=data.get("status"),
            default_source=data.get("default_source"),
            archived=bool(data.get("archived", False)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            payment_sources=list(sources) if isinstance(sources, list) else [],
            raw=data,
        )


@dataclass
class ChargeResponse:
    status: Optional[int]
    charge: Optional[Charge]
    json_response: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], json_response: str = "") -> "ChargeResponse":
        data = _resource(payload).get("data")
        return cls(
            status=payload.get("status"),
            charge=Charge.from_dict(data) if isinstance(data, dict) else None,
            json_response=json_response,
        )


class ChargeItemResponse(ChargeResponse):
    """A single charge fetched by id."""


class ChargeRefundResponse(ChargeResponse):
    """The charge after a refund or archive."""


@dataclass
class ChargeItemsResponse:
    status: Optional[int]
    charges: List[Charge]
    count: Optional[int] = None
    skip: Optional[int] = None
    limit: Optional[int] = None
    json_response: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], json_response: str = "") -> "ChargeItemsResponse":
        resource = _resource(payload)
        items = resource.get("data")
        return cls(
            status=payload.get("status"),
            charges=[Charge.from_dict(item) for item in items or []],
            count=resource.get("count"),
            skip=resource.get("skip"),
            limit=resource.get("limit"),
            json_response=json_response,
        )


@dataclass
class CustomerItemResponse:
    status: Optional[int]
    customer: Optional[Customer]
    json_response: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], json_response: str = "") -> "CustomerItemResponse":
        data = _resource(payload).get("data")
        return cls(
            status=payload.get("status"),
            customer=Customer.from_dict(data) if isinstance(data, dict) else None,
            json_response=json_response,
        )


@dataclass
class CustomerItemsResponse:
    status: Optional[int]
    customers: List[Customer]
    count: Optional[int] = None
    skip: Optional[int] = None
    limit: Optional[int] = None
    json_response: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], json_response: str = "") -> "CustomerItemsResponse":
        resource = _resource(payload)
        items = resource.get("data")
        return cls(
            status=payload.get("status"),
            customers=[Customer.from_dict(item) for item in items or []],
            count=resource.get("count"),
            skip=resource.get("skip"),
            limit=resource.get("limit"),
            json_response=json_response,
        )
