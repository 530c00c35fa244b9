"""User repository with an in-memory implementation."""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from uuid import UUID

from users_common.exceptions import NotFoundError
from users_common.models.user import UserEntity

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Abstract interface for user storage."""

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        """Get a user by ID."""
        pass

    @abstractmethod
    def insert(self, user: UserEntity) -> UserEntity:
        """Store a new user under a freshly assigned ID.

        Args:
            user: User to store; any ID it carries is ignored

        Returns:
            The persisted copy, with its assigned ID
        """
        pass

    @abstractmethod
    def update(self, user: UserEntity) -> None:
        """Replace the stored user with the same ID.

        Raises:
            NotFoundError: If no user has that ID
        """
        pass

    @abstractmethod
    def delete(self, user_id: UUID) -> None:
        """Delete a user.

        Raises:
            NotFoundError: If no user has that ID
        """
        pass

    @abstractmethod
    def get_page(self, page_number: int, page_size: int) -> tuple[list[UserEntity], int]:
        """Get one page of users in a stable order.

        Args:
            page_number: 1-based page number
            page_size: Number of users per page

        Returns:
            Users on the page (empty past the last page) and the total user count
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Get the total number of users."""
        pass


class InMemoryUserRepository(UserRepository):
    """Process-memory implementation of UserRepository.

    Users are kept in insertion order. A single lock serializes mutations and
    gives page scans a consistent snapshot. Callers only ever see copies.
    """

    def __init__(self) -> None:
        self._users: dict[UUID, UserEntity] = {}
        self._lock = threading.Lock()

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def insert(self, user: UserEntity) -> UserEntity:
        with self._lock:
            user_id = uuid.uuid4()
            while user_id in self._users:
                user_id = uuid.uuid4()
            stored = user.model_copy(update={"id": user_id})
            self._users[user_id] = stored
        logger.debug("Inserted user %s (%s)", user_id, stored.login)
        return stored.model_copy()

    def update(self, user: UserEntity) -> None:
        with self._lock:
            if user.id is None or user.id not in self._users:
                raise NotFoundError(f"User {user.id} not found")
            self._users[user.id] = user.model_copy()
        logger.debug("Updated user %s", user.id)

    def delete(self, user_id: UUID) -> None:
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError(f"User {user_id} not found")
            del self._users[user_id]
        logger.debug("Deleted user %s", user_id)

    def get_page(self, page_number: int, page_size: int) -> tuple[list[UserEntity], int]:
        if page_number < 1 or page_size < 1:
            raise ValueError("page_number and page_size must be positive")

        with self._lock:
            snapshot = list(self._users.values())

        start = (page_number - 1) * page_size
        items = [user.model_copy() for user in snapshot[start : start + page_size]]
        return items, len(snapshot)

    def count(self) -> int:
        with self._lock:
            return len(self._users)
