from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from userauth.core.repositories import BaseRepository
from userauth.api.v1.models import User as UserModel
from userauth.api.v1.schemas import UserFilter, UserListResponse, UserRead


class UserRepository(BaseRepository[UserModel]):
    def __init__(self):
        super().__init__(UserModel)

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        """
        Check whether any stored user has exactly this email.

        The comparison is literal: no trimming or case folding.
        """
        result = await db.execute(select(self.model.id).where(self.model.email == email).limit(1))
        return result.first() is not None

    async def get_user_by_credentials(self, db: AsyncSession, email: str, password: str) -> Optional[UserModel]:
        """
        Retrieve the user whose email and password both match exactly.

        Args:
            db: Database session
            email: Email as submitted
            password: Password as submitted

        Returns:
            UserModel ORM instance or None if nothing matches
        """
        query = select(self.model).where(
            self.model.email == email,
            self.model.password == password,
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def list_users(self, db: AsyncSession, filters: UserFilter) -> UserListResponse:
        """
        Return one page of users matching the role filter and email search.

        Filtering happens before counting, ordering is by id, and the page
        window is applied last. `total_pages` is `ceil(total_count / page_size)`.
        """
        page = await self.get_filtered_items(db, filters)

        return UserListResponse(
            items=[UserRead.model_validate(u) for u in page["items"]],
            total_count=page["total"],
            total_pages=page["total_pages"],
        )

    def build_filters_from_params(self, filters: UserFilter):
        """
        Build filter dictionary and sort fields from a UserFilter.

        Returns a dict with keys: filter_dict, sort_fields
        """
        filter_dict = {}

        if filters.role_filter:
            filter_dict["role"] = filters.role_filter

        # Blank searches are ignored; a non-blank one is matched as given
        if filters.search and filters.search.strip():
            filter_dict["email__icontains"] = filters.search

        sort_fields = ["id-"] if (filters.sort or "").lower() == "desc" else ["id+"]

        return {"filter_dict": filter_dict, "sort_fields": sort_fields}


@lru_cache()
def get_user_repository() -> UserRepository:
    return UserRepository()
