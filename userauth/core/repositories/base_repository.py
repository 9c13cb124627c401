from typing import TypeVar, Generic, Type

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError

from userauth.core.helpers.filter_helper import apply_filters_and_sorting, paginate
from userauth.core.models import Base, RecordConflictError
from userauth.core.schemas import BaseFilter


T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    async def create(self, db: AsyncSession, item) -> T:
        item = self.model(**item.model_dump())
        db.add(item)
        try:
            await db.commit()
            await db.refresh(item)
        except IntegrityError as e:
            await db.rollback()
            raise RecordConflictError(f"Adding {self.model.__name__}: constraint violated.") from e

        return item

    async def get_filtered_items(self, db: AsyncSession, filters: BaseFilter):
        base_query = self.get_filter_query()

        filter_dict, sort_fields = self.build_filters_from_params(filters).values()

        query = apply_filters_and_sorting(base_query, self.model, filters=filter_dict, sort=sort_fields)

        return await paginate(db, query, page=filters.page, page_size=filters.page_size)

    def get_filter_query(self):
        return select(self.model)

    def build_filters_from_params(self, filters: BaseFilter):
        """
        Map a filter schema to column filters and sort keys.

        Returns a dict with keys: filter_dict, sort_fields
        """
        raise NotImplementedError
