from __future__ import annotations

from app.application.dto.billing import CreateCustomerInput, CreateCustomerOutput
from app.application.ports.stripe_port import StripePort


class CreateCustomerUseCase:
    def __init__(self, *, stripe_port: StripePort):
        self._stripe_port = stripe_port

    def execute(self, command: CreateCustomerInput) -> CreateCustomerOutput:
        customer_id = self._stripe_port.create_customer(
            user_id=command.user_id,
            email=command.email,
            name=command.name,
        )
        return CreateCustomerOutput(customer_id=customer_id)
