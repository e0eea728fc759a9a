"""
Subscription management: adding, listing and deleting a user's subscriptions,
plus the most-popular-services ranking.

Every public method is one transaction (see ``unit_of_work``). In particular
``add_subscription`` commits the service get-or-create and the subscription
insert together, so a failure never leaves an orphan service row.
"""

import logging
from typing import List

from sqlmodel import Session

from subscriptions_api.exceptions import (
    SubscriptionNotBelongToUserError,
    SubscriptionNotFoundError,
    UserNotFoundError,
)
from subscriptions_api.models.subscription import Subscription
from subscriptions_api.repositories.service_repository import ServiceRepository
from subscriptions_api.repositories.subscription_repository import SubscriptionRepository
from subscriptions_api.repositories.user_repository import UserRepository
from subscriptions_api.schemas import SubscriptionResponse, to_subscription_response
from subscriptions_api.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

TOP_SUBSCRIPTIONS_LIMIT = 3


class SubscriptionService:
    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.services = ServiceRepository(session)
        self.subscriptions = SubscriptionRepository(session)

    def add_subscription(self, user_id: int, service_name: str) -> SubscriptionResponse:
        logger.info("Adding subscription to %r for user %s", service_name, user_id)
        with unit_of_work(self.session, "add subscription"):
            user = self.users.find_by_id(user_id)
            if user is None:
                logger.warning("User %s not found", user_id)
                raise UserNotFoundError(user_id)

            service = self.services.get_or_create(service_name)
            subscription = self.subscriptions.save(Subscription(user_id=user.id, service_id=service.id))
            subscription_id = subscription.id

        return SubscriptionResponse(id=subscription_id, service_name=service_name, user_id=user_id)

    def get_user_subscriptions(self, user_id: int) -> List[SubscriptionResponse]:
        logger.info("Fetching subscriptions for user %s", user_id)
        with unit_of_work(self.session, "get user subscriptions"):
            if self.users.find_by_id(user_id) is None:
                logger.warning("User %s not found", user_id)
                raise UserNotFoundError(user_id)
            return [to_subscription_response(s) for s in self.subscriptions.find_by_user(user_id)]

    def delete_subscription(self, user_id: int, subscription_id: int) -> None:
        """
        Delete a subscription on behalf of its owner.

        Raises:
            SubscriptionNotFoundError: no subscription with this id
            SubscriptionNotBelongToUserError: the subscription exists but is owned by another user
        """
        logger.info("Deleting subscription %s for user %s", subscription_id, user_id)
        with unit_of_work(self.session, "delete subscription"):
            subscription = self.subscriptions.find_by_id(subscription_id)
            if subscription is None:
                logger.warning("Subscription %s not found", subscription_id)
                raise SubscriptionNotFoundError(subscription_id)
            if subscription.user_id != user_id:
                logger.warning(
                    "Subscription %s belongs to user %s, not user %s",
                    subscription_id,
                    subscription.user_id,
                    user_id,
                )
                raise SubscriptionNotBelongToUserError(subscription_id, user_id)
            self.subscriptions.delete(subscription)

    def get_top_subscriptions(self) -> List[str]:
        """Names of the most subscribed services, most popular first"""
        logger.info("Fetching top %d subscriptions", TOP_SUBSCRIPTIONS_LIMIT)
        with unit_of_work(self.session, "get top subscriptions"):
            rows = self.subscriptions.find_top_service_names(TOP_SUBSCRIPTIONS_LIMIT)
        if not rows:
            logger.warning("No subscriptions found")
            raise SubscriptionNotFoundError()
        return [service_name for service_name, _count in rows]
