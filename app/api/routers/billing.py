from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_create_billing_portal_session_use_case,
    get_create_checkout_session_use_case,
    get_create_customer_use_case,
)
from app.api.schemas.billing import (
    CreateBillingPortalSessionRequest,
    CreateCheckoutSessionRequest,
    CreateCustomerRequest,
    CreateCustomerResponse,
)
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


logger = logging.getLogger(__name__)

router = APIRouter()


CHECKOUT_SESSION_FAILED = "Failed to create checkout session"
BILLING_PORTAL_SESSION_FAILED = "Failed to create billing portal session"
CUSTOMER_FAILED = "Failed to create Stripe user"


@router.post("/create-checkout-session")
def create_checkout_session(
    req: CreateCheckoutSessionRequest,
    use_case: CreateCheckoutSessionUseCase = Depends(get_create_checkout_session_use_case),
) -> dict[str, Any]:
    try:
        output = use_case.execute(
            CreateCheckoutSessionInput(
                price_id=req.price_id,
                customer_id=req.customer_external_id,
                user_id=req.user_id,
                base_url=req.base_url,
            )
        )
    except BillingError as exc:
        logger.exception("Checkout session failed user_id=%s code=%s", req.user_id, exc.code)
        raise HTTPException(status_code=500, detail=CHECKOUT_SESSION_FAILED) from exc

    return output.session


@router.post("/create-billing-portal-session")
def create_billing_portal_session(
    req: CreateBillingPortalSessionRequest,
    use_case: CreateBillingPortalSessionUseCase = Depends(get_create_billing_portal_session_use_case),
) -> dict[str, Any]:
    try:
        output = use_case.execute(
            CreateBillingPortalSessionInput(
                customer_id=req.customer_external_id,
                return_url=req.return_url,
            )
        )
    except BillingError as exc:
        logger.exception(
            "Billing portal session failed customer_id=%s code=%s",
            req.customer_external_id,
            exc.code,
        )
        raise HTTPException(status_code=500, detail=BILLING_PORTAL_SESSION_FAILED) from exc

    return output.session


@router.post("/create-stripe-user", response_model=CreateCustomerResponse)
def create_stripe_user(
    req: CreateCustomerRequest,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
):
    try:
        output = use_case.execute(
            CreateCustomerInput(
                email=req.email,
                name=req.name,
                user_id=req.user_id,
            )
        )
    except BillingError as exc:
        logger.exception("Stripe customer failed user_id=%s code=%s", req.user_id, exc.code)
        raise HTTPException(status_code=500, detail=CUSTOMER_FAILED) from exc

    return CreateCustomerResponse(customer_id=output.customer_id)
