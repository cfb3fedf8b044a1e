from __future__ import annotations

from app.application.dto.billing import (
    CreateBillingPortalSessionInput,
    CreateBillingPortalSessionOutput,
)
from app.application.ports.stripe_port import StripePort


class CreateBillingPortalSessionUseCase:
    def __init__(self, *, stripe_port: StripePort):
        self._stripe_port = stripe_port

    def execute(self, command: CreateBillingPortalSessionInput) -> CreateBillingPortalSessionOutput:
        session = self._stripe_port.create_billing_portal_session(
            customer_id=command.customer_id,
            return_url=command.return_url,
        )
        return CreateBillingPortalSessionOutput(session=session)
