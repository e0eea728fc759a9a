"""Request-scoped service providers for FastAPI ``Depends``."""

from fastapi import Depends
from sqlmodel import Session

from subscriptions_api.database import get_session
from subscriptions_api.services.subscription_service import SubscriptionService
from subscriptions_api.services.user_service import UserService


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


def get_subscription_service(session: Session = Depends(get_session)) -> SubscriptionService:
    return SubscriptionService(session)
