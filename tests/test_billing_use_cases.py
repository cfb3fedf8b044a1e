from __future__ import annotations

import pytest

from app.application.dto.billing import (
    CreateBillingPortalSessionInput,
    CreateCheckoutSessionInput,
    CreateCustomerInput,
)
from app.application.use_cases.create_billing_portal_session import (
    CreateBillingPortalSessionUseCase,
)
from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.application.use_cases.create_customer import CreateCustomerUseCase
from app.domain.exceptions import BillingError


class FakeStripePort:
    def __init__(self, *, fail: bool = False):
        self._fail = fail
        self.checkout_calls: list[dict] = []
        self.portal_calls: list[dict] = []
        self.customer_calls: list[dict] = []

    def create_customer(self, *, user_id: str, email: str, name: str) -> str:
        if self._fail:
            raise BillingError("boom")
        self.customer_calls.append({"user_id": user_id, "email": email, "name": name})
        return "cus_123"

    def create_checkout_session(
        self,
        *,
        customer_id: str,
        price_id: str,
        user_id: str,
        success_url: str,
        cancel_url: str,
    ) -> dict:
        if self._fail:
            raise BillingError("boom")
        call = {
            "customer": customer_id,
            "price_id": price_id,
            "user_id": user_id,
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        self.checkout_calls.append(call)
        return {"id": "cs_1", **call}

    def create_billing_portal_session(self, *, customer_id: str, return_url: str) -> dict:
        if self._fail:
            raise BillingError("boom")
        self.portal_calls.append({"customer_id": customer_id, "return_url": return_url})
        return {"id": "bps_1", "customer": customer_id, "return_url": return_url}


@pytest.mark.parametrize(
    ("base_url", "success_url", "cancel_url"),
    [
        (
            "https://app.example.com",
            "https://app.example.com/subscription-success",
            "https://app.example.com/subscription-fail",
        ),
        (
            "https://app.example.com/",
            "https://app.example.com//subscription-success",
            "https://app.example.com//subscription-fail",
        ),
        (
            "http://localhost:3000/en",
            "http://localhost:3000/en/subscription-success",
            "http://localhost:3000/en/subscription-fail",
        ),
    ],
)
def test_checkout_session_appends_redirect_suffixes(base_url, success_url, cancel_url):
    port = FakeStripePort()
    use_case = CreateCheckoutSessionUseCase(stripe_port=port)

    output = use_case.execute(
        CreateCheckoutSessionInput(
            price_id="price_1",
            customer_id="cus_1",
            user_id="u1",
            base_url=base_url,
        )
    )

    assert output.session["success_url"] == success_url
    assert output.session["cancel_url"] == cancel_url
    assert port.checkout_calls[0]["customer"] == "cus_1"
    assert port.checkout_calls[0]["price_id"] == "price_1"
    assert port.checkout_calls[0]["user_id"] == "u1"


def test_billing_portal_session_passes_customer_and_return_url():
    port = FakeStripePort()
    use_case = CreateBillingPortalSessionUseCase(stripe_port=port)

    output = use_case.execute(
        CreateBillingPortalSessionInput(customer_id="cus_1", return_url="https://app.example.com/account")
    )

    assert output.session["id"] == "bps_1"
    assert port.portal_calls == [{"customer_id": "cus_1", "return_url": "https://app.example.com/account"}]


def test_create_customer_returns_customer_id():
    port = FakeStripePort()
    use_case = CreateCustomerUseCase(stripe_port=port)

    output = use_case.execute(CreateCustomerInput(email="alice@example.com", name="Alice", user_id="u1"))

    assert output.customer_id == "cus_123"
    assert port.customer_calls == [{"user_id": "u1", "email": "alice@example.com", "name": "Alice"}]


def test_use_cases_propagate_billing_errors():
    port = FakeStripePort(fail=True)

    with pytest.raises(BillingError):
        CreateCustomerUseCase(stripe_port=port).execute(
            CreateCustomerInput(email="alice@example.com", name="Alice", user_id="u1")
        )
    with pytest.raises(BillingError):
        CreateBillingPortalSessionUseCase(stripe_port=port).execute(
            CreateBillingPortalSessionInput(customer_id="cus_1", return_url="https://x")
        )
    with pytest.raises(BillingError):
        CreateCheckoutSessionUseCase(stripe_port=port).execute(
            CreateCheckoutSessionInput(price_id="p", customer_id="c", user_id="u", base_url="https://x")
        )
