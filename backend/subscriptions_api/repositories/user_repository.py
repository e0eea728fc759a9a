"""User persistence. Repositories flush but never commit; the caller owns the transaction."""

from typing import List, Optional

from sqlmodel import Session, select

from subscriptions_api.database import MAX_ROW_ID
from subscriptions_api.models.user import User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: int) -> Optional[User]:
        if not -MAX_ROW_ID <= user_id <= MAX_ROW_ID:
            return None
        return self.session.get(User, user_id)

    def find_all(self) -> List[User]:
        return list(self.session.exec(select(User).order_by(User.id)).all())

    def save(self, user: User) -> User:
        """Insert or update; the id is assigned on flush"""
        self.session.add(user)
        self.session.flush()
        return user

    def delete(self, user: User) -> None:
        # ORM cascade removes the user's subscriptions in the same flush
        self.session.delete(user)
        self.session.flush()
