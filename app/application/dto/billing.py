from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CreateCheckoutSessionInput:
    price_id: str
    customer_id: str
    user_id: str
    base_url: str


@dataclass(frozen=True)
class CreateCheckoutSessionOutput:
    session: dict[str, Any]


@dataclass(frozen=True)
class CreateBillingPortalSessionInput:
    customer_id: str
    return_url: str


@dataclass(frozen=True)
class CreateBillingPortalSessionOutput:
    session: dict[str, Any]


@dataclass(frozen=True)
class CreateCustomerInput:
    email: str
    name: str
    user_id: str


@dataclass(frozen=True)
class CreateCustomerOutput:
    customer_id: str
