from typing import Optional
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.queries import (
    NODE_ASSIGNMENT_COLUMNS,
    PaginatedQuery,
    map_node_assignment,
    node_assignment_predicates,
)
from src.app.queries import NodeAssignmentFilter, Page, PageRequest
from src.app.repositories.node_assignment_repository import INodeAssignmentRepository
from src.domain.node_assignment import NodeAssignment

node_assignments = NodeAssignment.__table__

NODE_ASSIGNMENT_ORDER = (
    node_assignments.c.started.desc().nulls_last(),
    node_assignments.c.id.asc(),
)


class NodeAssignmentRepository(INodeAssignmentRepository):
    """SQLAlchemy implementation of NodeAssignment repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(
        self, filters: NodeAssignmentFilter, page_request: PageRequest
    ) -> Page[NodeAssignment]:
        return await PaginatedQuery(self.session).fetch(
            table=node_assignments,
            columns=NODE_ASSIGNMENT_COLUMNS,
            predicates=node_assignment_predicates(filters),
            order_by=NODE_ASSIGNMENT_ORDER,
            page_request=page_request,
            mapper=map_node_assignment,
        )

    async def get(self, assignment_id: str) -> Optional[NodeAssignment]:
        stmt = select(*NODE_ASSIGNMENT_COLUMNS).where(node_assignments.c.id == assignment_id)
        result = await self.session.exec(stmt)
        row = result.first()
        return map_node_assignment(row) if row is not None else None

    async def delete(self, assignment_id: str) -> int:
        stmt = delete(node_assignments).where(node_assignments.c.id == assignment_id)
        result = await self.session.execute(stmt)
        return result.rowcount
