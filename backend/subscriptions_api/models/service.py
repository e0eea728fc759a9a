"""Named external service (e.g. "Netflix") shared by many subscriptions."""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import UniqueConstraint as SAUniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from subscriptions_api.models.subscription import Subscription


class Service(SQLModel, table=True):
    __tablename__ = "services"
    __table_args__ = (
        # Exact, case-sensitive match; get-or-create relies on this constraint
        SAUniqueConstraint("service_name", name="uq_services_service_name"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    service_name: str

    subscriptions: List["Subscription"] = Relationship(back_populates="service")
