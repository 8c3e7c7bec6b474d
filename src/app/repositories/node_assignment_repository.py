from abc import ABC, abstractmethod
from typing import Optional
from src.app.queries import NodeAssignmentFilter, Page, PageRequest
from src.domain.node_assignment import NodeAssignment


class INodeAssignmentRepository(ABC):
    """Repository interface for NodeAssignment entity"""

    @abstractmethod
    async def list(
        self, filters: NodeAssignmentFilter, page_request: PageRequest
    ) -> Page[NodeAssignment]:
        """Get one page of assignments, most recently started first"""
        pass

    @abstractmethod
    async def get(self, assignment_id: str) -> Optional[NodeAssignment]:
        """Get assignment by ID"""
        pass

    @abstractmethod
    async def delete(self, assignment_id: str) -> int:
        """Delete assignment by ID, returns deleted row count"""
        pass
