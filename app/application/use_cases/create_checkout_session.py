from __future__ import annotations

from app.application.dto.billing import CreateCheckoutSessionInput, CreateCheckoutSessionOutput
from app.application.ports.stripe_port import StripePort


SUCCESS_PATH = "/subscription-success"
CANCEL_PATH = "/subscription-fail"


class CreateCheckoutSessionUseCase:
    def __init__(self, *, stripe_port: StripePort):
        self._stripe_port = stripe_port

    def execute(self, command: CreateCheckoutSessionInput) -> CreateCheckoutSessionOutput:
        # base_url is used as given; a trailing slash is not collapsed.
        session = self._stripe_port.create_checkout_session(
            customer_id=command.customer_id,
            price_id=command.price_id,
            user_id=command.user_id,
            success_url=f"{command.base_url}{SUCCESS_PATH}",
            cancel_url=f"{command.base_url}{CANCEL_PATH}",
        )
        return CreateCheckoutSessionOutput(session=session)
