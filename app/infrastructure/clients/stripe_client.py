from __future__ import annotations

import logging
from typing import Any

import stripe

from app.application.ports.stripe_port import StripePort
from app.domain.exceptions import BillingError


logger = logging.getLogger(__name__)


class StripeClient(StripePort):
    def __init__(self, *, secret_key: str, api_version: str | None = None):
        self._secret_key = secret_key
        self._api_version = api_version or None

    def _request_options(self) -> dict[str, Any]:
        if not self._secret_key:
            raise BillingError("STRIPE_SECRET_KEY is required.", code="missing_secret_key")
        options: dict[str, Any] = {"api_key": self._secret_key}
        if self._api_version:
            options["stripe_version"] = self._api_version
        return options

    def create_customer(self, *, user_id: str, email: str, name: str) -> str:
        options = self._request_options()
        logger.info("Creating Stripe customer for user_id=%s", user_id)
        try:
            customer = stripe.Customer.create(
                email=email,
                name=name,
                metadata={"userId": user_id},
                **options,
            )
        except Exception as exc:  # noqa: BLE001 - any SDK failure is upstream
            raise BillingError("Failed to create Stripe customer.", code=_error_code(exc)) from exc

        customer_id = _get(customer, "id")
        if not customer_id:
            raise BillingError("Stripe customer id is missing.")
        return str(customer_id)

    def create_checkout_session(
        self,
        *,
        customer_id: str,
        price_id: str,
        user_id: str,
        success_url: str,
        cancel_url: str,
    ) -> dict[str, Any]:
        options = self._request_options()
        logger.info(
            "Creating Stripe checkout session customer_id=%s price_id=%s user_id=%s",
            customer_id,
            price_id,
            user_id,
        )
        try:
            session = stripe.checkout.Session.create(
                customer=customer_id,
                payment_method_types=["card"],
                line_items=[{"price": price_id, "quantity": 1}],
                mode="subscription",
                success_url=success_url,
                cancel_url=cancel_url,
                metadata={"priceId": price_id, "userId": user_id},
                **options,
            )
        except Exception as exc:  # noqa: BLE001 - any SDK failure is upstream
            raise BillingError(
                "Failed to create Stripe checkout session.", code=_error_code(exc)
            ) from exc
        return _to_plain(session)

    def create_billing_portal_session(self, *, customer_id: str, return_url: str) -> dict[str, Any]:
        options = self._request_options()
        logger.info("Creating Stripe billing portal session customer_id=%s", customer_id)
        try:
            session = stripe.billing_portal.Session.create(
                customer=customer_id,
                return_url=return_url,
                **options,
            )
        except Exception as exc:  # noqa: BLE001 - any SDK failure is upstream
            raise BillingError(
                "Failed to create Stripe billing portal session.", code=_error_code(exc)
            ) from exc
        return _to_plain(session)


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _error_code(exc: Exception) -> str | None:
    code = getattr(exc, "code", None)
    return str(code) if code else None


def _to_plain(value: Any) -> Any:
    # StripeObject is not a dict in current SDKs; older ones convert only one level.
    if isinstance(value, stripe.StripeObject):
        value = value.to_dict()
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value
