"""Dead Letter Repository Interface

Read and replay-flag access to the broker's dead letter table.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from src.app.queries import DeadLetterFilter, Facets, Page, PageRequest
from src.domain.dead_letter import DeadLetter
from src.domain.envelope_key import EnvelopeKey


class IDeadLetterRepository(ABC):
    """Interface for DeadLetter repository"""

    @abstractmethod
    async def list(self, filters: DeadLetterFilter, page_request: PageRequest) -> Page[DeadLetter]:
        """
        Get one page of dead letters matching the filters.

        Args:
            filters: Optional criteria, absent values do not constrain
            page_request: Page window

        Returns:
            Page[DeadLetter]: Page items plus the total count of matching rows
        """
        pass

    @abstractmethod
    async def facets(self) -> Facets:
        """
        Get the distinct message and exception types across all dead letters.

        Returns:
            Facets: Sorted values, independent of any filter
        """
        pass

    @abstractmethod
    async def get(self, key: EnvelopeKey) -> Optional[DeadLetter]:
        """
        Get a dead letter by its composite key.

        Returns:
            Optional[DeadLetter]: Dead letter if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_replayable(self, key: EnvelopeKey, replayable: bool) -> int:
        """
        Set the replayable flag on one dead letter.

        Returns:
            int: Number of matched rows (0 or 1)
        """
        pass

    @abstractmethod
    async def set_replayable_many(self, keys: List[EnvelopeKey], replayable: bool) -> int:
        """
        Set the replayable flag on every dead letter in keys.

        Runs on the caller's transaction; the caller commits or rolls back
        the whole batch.

        Returns:
            int: Number of distinct matched rows, keys without a row are skipped
            and repeated keys are applied once
        """
        pass

    @abstractmethod
    async def delete(self, key: EnvelopeKey) -> int:
        """
        Delete a dead letter by its composite key.

        Returns:
            int: Number of deleted rows (0 or 1)
        """
        pass

    @abstractmethod
    async def count(self, replayable_only: bool = False) -> int:
        """Count dead letters, optionally only those flagged replayable"""
        pass
