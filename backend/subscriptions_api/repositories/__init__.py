from subscriptions_api.repositories.service_repository import ServiceRepository
from subscriptions_api.repositories.subscription_repository import SubscriptionRepository
from subscriptions_api.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "ServiceRepository",
    "SubscriptionRepository",
]
