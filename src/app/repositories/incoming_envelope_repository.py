from abc import ABC, abstractmethod
from typing import Optional
from src.app.queries import Facets, IncomingEnvelopeFilter, Page, PageRequest
from src.domain.envelope_key import EnvelopeKey
from src.domain.incoming_envelope import IncomingEnvelope


class IIncomingEnvelopeRepository(ABC):
    """Repository interface for IncomingEnvelope entity"""

    @abstractmethod
    async def list(
        self, filters: IncomingEnvelopeFilter, page_request: PageRequest
    ) -> Page[IncomingEnvelope]:
        """Get one page of envelopes matching the filters"""
        pass

    @abstractmethod
    async def facets(self) -> Facets:
        """Get distinct message types and statuses across all envelopes"""
        pass

    @abstractmethod
    async def get(self, key: EnvelopeKey) -> Optional[IncomingEnvelope]:
        """Get envelope by composite key"""
        pass

    @abstractmethod
    async def delete(self, key: EnvelopeKey) -> int:
        """Delete envelope by composite key, returns deleted row count"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all envelopes"""
        pass
