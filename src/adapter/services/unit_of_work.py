from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.dead_letter_repository import DeadLetterRepository
from src.adapter.repositories.incoming_envelope_repository import IncomingEnvelopeRepository
from src.adapter.repositories.node_repository import NodeRepository
from src.adapter.repositories.node_assignment_repository import NodeAssignmentRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.dead_letters = DeadLetterRepository(self.session)
        self.incoming_envelopes = IncomingEnvelopeRepository(self.session)
        self.nodes = NodeRepository(self.session)
        self.node_assignments = NodeAssignmentRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # No-op after a successful commit, discards everything otherwise
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
