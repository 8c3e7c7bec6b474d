from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession


async def distinct_values(session: AsyncSession, column) -> List[str]:
    """
    Sorted distinct non-null values of column over the whole table.

    Deliberately ignores any filter in effect so the caller can offer values
    outside the current selection.
    """
    query = select(column).where(column.is_not(None)).distinct().order_by(column)
    result = await session.exec(query)
    return list(result.all())
