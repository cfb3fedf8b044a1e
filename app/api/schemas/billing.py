from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CreateCheckoutSessionRequest(BaseModel):
    price_id: str = Field(..., min_length=1, alias="priceId")
    customer_external_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("customerExternalId", "CustomerStripeId"),
    )
    user_id: str = Field(..., min_length=1, alias="userId")
    base_url: str = Field(..., min_length=1, alias="baseUrl")


class CreateBillingPortalSessionRequest(BaseModel):
    customer_external_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("customerExternalId", "CustomerStripeId"),
    )
    return_url: str = Field(..., min_length=1, alias="returnUrl")


class CreateCustomerRequest(BaseModel):
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1, alias="userId")


class CreateCustomerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(..., alias="customerId")
