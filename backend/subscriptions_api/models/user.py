from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from subscriptions_api.models.subscription import Subscription


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True)  # Not unique: duplicate emails are accepted

    # Deleting a user deletes its subscriptions
    subscriptions: List["Subscription"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Subscription.id"},
    )
