from abc import ABC, abstractmethod
from src.app.repositories import (
    IDeadLetterRepository,
    IIncomingEnvelopeRepository,
    INodeRepository,
    INodeAssignmentRepository,
)


class UnitOfWork(ABC):
    """
    Transaction boundary for one logical operation.

    Entering opens the repositories on a single session; leaving rolls back
    anything that was not committed.
    """

    dead_letters: IDeadLetterRepository
    incoming_envelopes: IIncomingEnvelopeRepository
    nodes: INodeRepository
    node_assignments: INodeAssignmentRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
