import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from subscriptions_api.models.service import Service

logger = logging.getLogger(__name__)


class ServiceRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_name(self, service_name: str) -> Optional[Service]:
        return self.session.exec(select(Service).where(Service.service_name == service_name)).first()

    def get_or_create(self, service_name: str) -> Service:
        """
        Return the service with this exact name, inserting it if absent.

        The insert runs inside a SAVEPOINT. If a concurrent request inserted the
        same name first, the unique constraint fires, only the savepoint is rolled
        back, and the lookup is retried. If the retry still misses, the
        IntegrityError propagates.
        """
        service = self.find_by_name(service_name)
        if service is not None:
            return service

        try:
            with self.session.begin_nested():
                service = Service(service_name=service_name)
                self.session.add(service)
        except IntegrityError:
            logger.info("Service %r was created concurrently, retrying lookup", service_name)
            existing = self.find_by_name(service_name)
            if existing is None:
                raise
            return existing

        return service
