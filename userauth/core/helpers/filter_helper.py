import math
from typing import Any, Callable

from sqlalchemy.sql import operators
from sqlalchemy import select, func, and_, asc, desc


OPERATOR_MAPPING: dict[str, Callable[[Any, Any], Any]] = {
    "eq": operators.eq,
    # autoescape keeps '%' and '_' in user input literal
    "icontains": lambda field, value: field.icontains(value, autoescape=True),
}


def apply_filters_and_sorting(query, model, filters: dict, sort: list[str] = None):
    """
    AND together `field__operator` filters and apply `field+` / `field-` sort keys to a select.

    Example:
        filters = {"role": "user", "email__icontains": "alice"}
        sort = ["id-"]
    """
    conditions = []

    # FILTERS
    for key, value in filters.items():
        field_name, _, operator_key = key.partition("__")
        operator_func = OPERATOR_MAPPING[operator_key or "eq"]

        column = getattr(model, field_name)
        conditions.append(operator_func(column, value))

    if conditions:
        query = query.where(and_(*conditions))

    # SORTING
    if sort:
        order_by = []
        for field in sort:
            direction = asc if field[-1] == "+" else desc
            column = getattr(model, field[:-1])
            order_by.append(direction(column))

        query = query.order_by(*order_by)

    return query


async def paginate(session, query, page: int = 1, page_size: int = 10):
    # Count matches before the page window is applied
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = await session.scalar(count_query) or 0

    offset = (page - 1) * page_size

    paginated_query = query.limit(page_size).offset(offset)
    result = await session.execute(paginated_query)
    items = result.scalars().all()

    return {
        "total": total,
        "total_pages": math.ceil(total / page_size),
        "items": items,
    }
