"""
Request/response models and entity-to-DTO mapping.

Field names are snake_case in Python and camelCase on the wire
(``serviceName``, ``userId``). Both spellings are accepted on input.
"""

import email_validator
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from subscriptions_api.models.subscription import Subscription
from subscriptions_api.models.user import User


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _require_text(value: str, field: str) -> str:
    # Stored as sent; only blank input is refused
    if not value or not value.strip():
        raise ValueError(f"{field} is required")
    return value


# ============================================================================
# Users
# ============================================================================


class UserCreate(ApiModel):
    name: str
    email: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        _require_text(v, "email")
        try:
            email_validator.validate_email(v.strip(), check_deliverability=False)
        except email_validator.EmailNotValidError as exc:
            raise ValueError(f"email must be a valid address: {exc}") from exc
        # Normalized form is discarded; the address is stored as sent
        return v


class UserUpdate(UserCreate):
    """Full replacement of name and email"""


class UserResponse(ApiModel):
    id: int
    name: str
    email: str


# ============================================================================
# Subscriptions
# ============================================================================


class SubscriptionCreate(ApiModel):
    service_name: str

    @field_validator("service_name")
    @classmethod
    def validate_service_name(cls, v):
        return _require_text(v, "serviceName")


class SubscriptionResponse(ApiModel):
    id: int
    service_name: str
    user_id: int


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


def to_subscription_response(subscription: Subscription) -> SubscriptionResponse:
    return SubscriptionResponse(
        id=subscription.id,
        service_name=subscription.service.service_name,
        user_id=subscription.user_id,
    )
