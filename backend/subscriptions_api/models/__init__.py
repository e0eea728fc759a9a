from subscriptions_api.models.service import Service
from subscriptions_api.models.subscription import Subscription
from subscriptions_api.models.user import User

__all__ = [
    "User",
    "Service",
    "Subscription",
]
