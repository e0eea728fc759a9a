from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from subscriptions_api.models.service import Service
    from subscriptions_api.models.user import User


class Subscription(SQLModel, table=True):
    __tablename__ = "subscriptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    service_id: int = Field(foreign_key="services.id", index=True)

    # Relationships
    user: "User" = Relationship(back_populates="subscriptions")
    service: "Service" = Relationship(back_populates="subscriptions")
