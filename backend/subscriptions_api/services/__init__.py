from subscriptions_api.services.subscription_service import TOP_SUBSCRIPTIONS_LIMIT, SubscriptionService
from subscriptions_api.services.user_service import UserService

__all__ = [
    "UserService",
    "SubscriptionService",
    "TOP_SUBSCRIPTIONS_LIMIT",
]
