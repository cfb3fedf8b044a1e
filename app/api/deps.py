from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.create_billing_portal_session import (
    CreateBillingPortalSessionUseCase,
)
from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.application.use_cases.create_customer import CreateCustomerUseCase
from app.infrastructure.clients.stripe_client import StripeClient
from app.shared.config import get_settings


@lru_cache(maxsize=4)
def _build_stripe_client(secret_key: str, api_version: str) -> StripeClient:
    return StripeClient(secret_key=secret_key, api_version=api_version)


def _get_stripe_client() -> StripeClient:
    # A missing key surfaces as BillingError on the first call, after body validation.
    settings = get_settings()
    return _build_stripe_client(settings.stripe_secret_key, settings.stripe_api_version)


def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(stripe_port=_get_stripe_client())


def get_create_billing_portal_session_use_case() -> CreateBillingPortalSessionUseCase:
    return CreateBillingPortalSessionUseCase(stripe_port=_get_stripe_client())


def get_create_customer_use_case() -> CreateCustomerUseCase:
    return CreateCustomerUseCase(stripe_port=_get_stripe_client())
