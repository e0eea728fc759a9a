"""
Domain and data-access errors.

Domain errors (not-found, ownership) propagate unchanged to the HTTP boundary,
where ``error_handlers`` maps each one to a status code. Store failures are
re-raised as ``DataAccessError`` so driver details never reach the client.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for errors the client caused by referencing data"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class SubscriptionNotFoundError(NotFoundError):
    """Raised for an unknown subscription id, or with no id when there are no subscriptions at all"""

    def __init__(self, subscription_id: Optional[int] = None):
        if subscription_id is not None:
            message = f"Subscription with id {subscription_id} not found"
        else:
            message = "No subscriptions found"
        super().__init__(message)
        self.subscription_id = subscription_id


class SubscriptionNotBelongToUserError(DomainError):
    status_code = 400

    def __init__(self, subscription_id: int, user_id: int):
        super().__init__(f"Subscription with id {subscription_id} does not belong to user with id {user_id}")
        self.subscription_id = subscription_id
        self.user_id = user_id


class DataAccessError(Exception):
    """The data store failed; the request cannot be completed"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
