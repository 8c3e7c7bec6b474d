from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.queries import NODE_COLUMNS, PaginatedQuery, map_node, node_predicates
from src.app.queries import NodeFilter, Page, PageRequest
from src.app.repositories.node_repository import INodeRepository
from src.domain.node import Node

nodes = Node.__table__

NODE_ORDER = (nodes.c.node_number.asc(), nodes.c.id.asc())


class NodeRepository(INodeRepository):
    """SQLAlchemy implementation of Node repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, filters: NodeFilter, page_request: PageRequest) -> Page[Node]:
        return await PaginatedQuery(self.session).fetch(
            table=nodes,
            columns=NODE_COLUMNS,
            predicates=node_predicates(filters),
            order_by=NODE_ORDER,
            page_request=page_request,
            mapper=map_node,
        )

    async def get(self, node_id: UUID) -> Optional[Node]:
        result = await self.session.exec(select(*NODE_COLUMNS).where(nodes.c.id == node_id))
        row = result.first()
        return map_node(row) if row is not None else None

    async def delete(self, node_id: UUID) -> int:
        result = await self.session.execute(delete(nodes).where(nodes.c.id == node_id))
        return result.rowcount

    async def count_active(self, since: datetime) -> int:
        stmt = select(func.count()).select_from(nodes).where(nodes.c.health_check > since)
        result = await self.session.exec(stmt)
        return result.one()
