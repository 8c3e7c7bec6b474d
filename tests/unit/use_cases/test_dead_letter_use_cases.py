"""
Unit tests for the dead letter use cases
"""
import pytest
from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError
from src.app.queries import DeadLetterFilter, Facets, Page
from src.app.use_cases.dead_letters import (
    BulkSetReplayableRequestDTO,
    DeleteDeadLetterUseCase,
    GetDeadLetterUseCase,
    ListDeadLettersUseCase,
    SetDeadLetterReplayableUseCase,
    SetDeadLettersReplayableUseCase,
)
from src.domain import DeadLetter


@pytest.fixture
def mock_uow():
    """Create a mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.dead_letters = MagicMock()
    return uow


@pytest.fixture
def sample_dead_letter():
    return DeadLetter(
        id=uuid4(),
        received_at="node-1",
        message_type="Orders.PlaceOrder",
        body=b'envelope{"orderId":"A-1"}',
        exception_type="TimeoutException",
        replayable=False,
    )


def store_error():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.mark.asyncio
async def test_list_dead_letters_success(mock_uow, sample_dead_letter):
    # Arrange
    mock_uow.dead_letters.list = AsyncMock(
        return_value=Page(items=[sample_dead_letter], total_count=11, page=2, page_size=5)
    )
    mock_uow.dead_letters.facets = AsyncMock(
        return_value=Facets(message_types=["Orders.PlaceOrder"], exception_types=["TimeoutException"])
    )
    use_case = ListDeadLettersUseCase(mock_uow)

    # Act
    result = await use_case.execute(DeadLetterFilter(), page=2, page_size=5)

    # Assert
    assert result.is_ok()
    assert result.value.count == 11
    assert result.value.total_pages == 3
    assert result.value.data[0].json_body == '{"orderId":"A-1"}'
    assert result.value.filters.message_types == ["Orders.PlaceOrder"]


@pytest.mark.asyncio
@pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0), (1, 501)])
async def test_list_dead_letters_rejects_bad_pagination(mock_uow, page, page_size):
    mock_uow.dead_letters.list = AsyncMock()
    use_case = ListDeadLettersUseCase(mock_uow, max_page_size=500)

    result = await use_case.execute(DeadLetterFilter(), page=page, page_size=page_size)

    assert result.is_err()
    assert result.error.code == "INVALID_PAGINATION"
    mock_uow.dead_letters.list.assert_not_called()


@pytest.mark.asyncio
async def test_list_dead_letters_store_failure(mock_uow):
    mock_uow.dead_letters.list = AsyncMock(side_effect=store_error())
    use_case = ListDeadLettersUseCase(mock_uow)

    result = await use_case.execute(DeadLetterFilter())

    assert result.is_err()
    assert result.error.code == "STORE_FAILURE"
    assert "OperationalError" in result.error.reason


@pytest.mark.asyncio
async def test_get_dead_letter_not_found(mock_uow):
    mock_uow.dead_letters.get = AsyncMock(return_value=None)
    use_case = GetDeadLetterUseCase(mock_uow)

    result = await use_case.execute(uuid4(), "node-1")

    assert result.is_err()
    assert result.error.code == "DEAD_LETTER_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_dead_letter_requires_received_at(mock_uow):
    mock_uow.dead_letters.get = AsyncMock()
    use_case = GetDeadLetterUseCase(mock_uow)

    result = await use_case.execute(uuid4(), None)

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.dead_letters.get.assert_not_called()


@pytest.mark.asyncio
async def test_set_replayable_commits(mock_uow, sample_dead_letter):
    # Arrange
    mock_uow.dead_letters.set_replayable = AsyncMock(return_value=1)
    use_case = SetDeadLetterReplayableUseCase(mock_uow)

    # Act
    result = await use_case.execute(sample_dead_letter.id, "node-1", True)

    # Assert
    assert result.is_ok()
    assert result.value.replayable is True
    mock_uow.commit.assert_awaited_once()
    key, replayable = mock_uow.dead_letters.set_replayable.call_args.args
    assert key == sample_dead_letter.key
    assert replayable is True


@pytest.mark.asyncio
async def test_set_replayable_not_found(mock_uow):
    mock_uow.dead_letters.set_replayable = AsyncMock(return_value=0)
    use_case = SetDeadLetterReplayableUseCase(mock_uow)

    result = await use_case.execute(uuid4(), "node-1", True)

    assert result.is_err()
    assert result.error.code == "DEAD_LETTER_NOT_FOUND"


@pytest.mark.asyncio
async def test_bulk_replayable_rejects_empty_list(mock_uow):
    """Empty selections never open a transaction"""
    use_case = SetDeadLettersReplayableUseCase(mock_uow)

    result = await use_case.execute(BulkSetReplayableRequestDTO(dead_letters=[], replayable=True))

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.__aenter__.assert_not_awaited()


@pytest.mark.asyncio
async def test_bulk_replayable_reports_matched_count(mock_uow):
    # Arrange
    mock_uow.dead_letters.set_replayable_many = AsyncMock(return_value=2)
    request = BulkSetReplayableRequestDTO(
        dead_letters=[{"id": uuid4(), "received_at": "node-1"} for _ in range(3)],
        replayable=True,
    )
    use_case = SetDeadLettersReplayableUseCase(mock_uow)

    # Act
    result = await use_case.execute(request)

    # Assert
    assert result.is_ok()
    assert result.value.count == 2
    keys, replayable = mock_uow.dead_letters.set_replayable_many.call_args.args
    assert len(keys) == 3
    assert replayable is True
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_bulk_replayable_store_failure_does_not_commit(mock_uow):
    mock_uow.dead_letters.set_replayable_many = AsyncMock(side_effect=store_error())
    request = BulkSetReplayableRequestDTO(
        dead_letters=[{"id": uuid4(), "received_at": "node-1"}], replayable=False
    )
    use_case = SetDeadLettersReplayableUseCase(mock_uow)

    result = await use_case.execute(request)

    assert result.is_err()
    assert result.error.code == "STORE_FAILURE"
    mock_uow.commit.assert_not_awaited()
    mock_uow.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_bulk_replayable_rejects_blank_received_at(mock_uow):
    request = BulkSetReplayableRequestDTO(
        dead_letters=[{"id": uuid4(), "received_at": ""}], replayable=True
    )
    use_case = SetDeadLettersReplayableUseCase(mock_uow)

    result = await use_case.execute(request)

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_delete_dead_letter(mock_uow):
    mock_uow.dead_letters.delete = AsyncMock(return_value=1)
    use_case = DeleteDeadLetterUseCase(mock_uow)

    result = await use_case.execute(uuid4(), "node-1")

    assert result.is_ok()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_dead_letter_not_found(mock_uow):
    mock_uow.dead_letters.delete = AsyncMock(return_value=0)
    use_case = DeleteDeadLetterUseCase(mock_uow)

    result = await use_case.execute(uuid4(), "node-1")

    assert result.is_err()
    assert result.error.code == "DEAD_LETTER_NOT_FOUND"
