from __future__ import annotations

from typing import Any, Protocol


class StripePort(Protocol):
    def create_customer(self, *, user_id: str, email: str, name: str) -> str:
        ...

    def create_checkout_session(
        self,
        *,
        customer_id: str,
        price_id: str,
        user_id: str,
        success_url: str,
        cancel_url: str,
    ) -> dict[str, Any]:
        ...

    def create_billing_portal_session(self, *, customer_id: str, return_url: str) -> dict[str, Any]:
        ...
