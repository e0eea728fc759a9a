from typing import List, Optional, Tuple

from sqlmodel import Session, col, func, select

from subscriptions_api.database import MAX_ROW_ID
from subscriptions_api.models.service import Service
from subscriptions_api.models.subscription import Subscription


class SubscriptionRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, subscription_id: int) -> Optional[Subscription]:
        if not -MAX_ROW_ID <= subscription_id <= MAX_ROW_ID:
            return None
        return self.session.get(Subscription, subscription_id)

    def find_by_user(self, user_id: int) -> List[Subscription]:
        return list(
            self.session.exec(
                select(Subscription).where(Subscription.user_id == user_id).order_by(Subscription.id)
            ).all()
        )

    def save(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        self.session.flush()
        return subscription

    def delete(self, subscription: Subscription) -> None:
        self.session.delete(subscription)
        self.session.flush()

    def find_top_service_names(self, limit: int) -> List[Tuple[str, int]]:
        """
        Group subscriptions by service name, most subscribed first.

        Ties on count are ordered by service name so the result is reproducible.

        Returns:
            List of (service_name, subscription_count), at most ``limit`` rows
        """
        subscription_count = func.count(col(Subscription.id)).label("subscription_count")
        rows = self.session.exec(
            select(Service.service_name, subscription_count)
            .join(Subscription, col(Subscription.service_id) == col(Service.id))
            .group_by(Service.service_name)
            .order_by(subscription_count.desc(), col(Service.service_name).asc())
            .limit(limit)
        ).all()
        return [(name, int(count)) for name, count in rows]
