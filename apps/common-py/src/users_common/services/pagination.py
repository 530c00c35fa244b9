"""Page-number/page-size pagination over the user repository."""

import math

from users_common.config import UserConfig
from users_common.models.pagination import PageDescriptor
from users_common.models.user import UserEntity
from users_common.services.user_repository import UserRepository


class PaginationEngine:
    """Clamp raw paging input and describe the resulting page.

    No input is ever rejected: a missing or non-positive page number becomes 1,
    and the page size is clamped into the configured bounds.
    """

    def __init__(self, config: UserConfig, collection_path: str = "/api/users") -> None:
        self.min_page_size = config.min_page_size
        self.max_page_size = config.max_page_size
        self.collection_path = collection_path

    def normalize(self, page_number: int | None, page_size: int | None) -> tuple[int, int]:
        """Clamp page number and page size.

        Args:
            page_number: Requested page number, may be absent or out of range
            page_size: Requested page size, may be absent or out of range

        Returns:
            Tuple of (page_number, page_size) safe to hand to the repository
        """
        if page_number is None or page_number <= 0:
            page_number = 1

        if page_size is None or page_size <= self.min_page_size:
            page_size = self.min_page_size
        elif page_size > self.max_page_size:
            page_size = self.max_page_size

        return page_number, page_size

    def describe(self, page_number: int, page_size: int, total_count: int) -> PageDescriptor:
        """Build the page descriptor for an already clamped page."""
        total_pages = math.ceil(total_count / page_size)
        previous_link = self._link(page_number - 1, page_size) if page_number > 1 else None
        next_link = self._link(page_number + 1, page_size) if page_number < total_pages else None

        return PageDescriptor(
            current_page=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            previous_page_link=previous_link,
            next_page_link=next_link,
        )

    def paginate(
        self,
        repository: UserRepository,
        page_number: int | None,
        page_size: int | None,
    ) -> tuple[list[UserEntity], PageDescriptor]:
        """Fetch one page of users and its descriptor."""
        page_number, page_size = self.normalize(page_number, page_size)
        items, total_count = repository.get_page(page_number, page_size)
        return items, self.describe(page_number, page_size, total_count)

    def _link(self, page_number: int, page_size: int) -> str:
        return f"{self.collection_path}?pageNumber={page_number}&pageSize={page_size}"
