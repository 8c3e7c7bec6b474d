from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID
from src.app.queries import NodeFilter, Page, PageRequest
from src.domain.node import Node


class INodeRepository(ABC):
    """Repository interface for Node entity"""

    @abstractmethod
    async def list(self, filters: NodeFilter, page_request: PageRequest) -> Page[Node]:
        """Get one page of nodes ordered by node number"""
        pass

    @abstractmethod
    async def get(self, node_id: UUID) -> Optional[Node]:
        """Get node by ID"""
        pass

    @abstractmethod
    async def delete(self, node_id: UUID) -> int:
        """Delete node by ID, returns deleted row count"""
        pass

    @abstractmethod
    async def count_active(self, since: datetime) -> int:
        """Count nodes with a heartbeat strictly newer than since"""
        pass
