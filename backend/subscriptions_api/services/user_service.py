import logging
from typing import List

from sqlmodel import Session

from subscriptions_api.exceptions import UserNotFoundError
from subscriptions_api.models.user import User
from subscriptions_api.repositories.user_repository import UserRepository
from subscriptions_api.schemas import UserResponse, to_user_response
from subscriptions_api.services.transaction import unit_of_work

logger = logging.getLogger(__name__)


class UserService:
    """Create, read, update and delete users"""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)

    def _require_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, name: str, email: str) -> UserResponse:
        logger.info("Creating user name=%r email=%r", name, email)
        with unit_of_work(self.session, "create user"):
            user = self.users.save(User(name=name, email=email))
            return to_user_response(user)

    def get_user_by_id(self, user_id: int) -> UserResponse:
        logger.info("Fetching user %s", user_id)
        with unit_of_work(self.session, "get user"):
            user = self._require_user(user_id)
            return to_user_response(user)

    def update_user(self, user_id: int, name: str, email: str) -> UserResponse:
        logger.info("Updating user %s", user_id)
        with unit_of_work(self.session, "update user"):
            user = self._require_user(user_id)
            user.name = name
            user.email = email
            self.users.save(user)
            return to_user_response(user)

    def delete_user(self, user_id: int) -> None:
        """Delete a user together with all of its subscriptions"""
        logger.info("Deleting user %s", user_id)
        with unit_of_work(self.session, "delete user"):
            user = self._require_user(user_id)
            self.users.delete(user)

    def list_users(self) -> List[UserResponse]:
        logger.info("Listing all users")
        with unit_of_work(self.session, "list users"):
            return [to_user_response(user) for user in self.users.find_all()]
