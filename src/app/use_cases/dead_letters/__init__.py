from .list_dead_letters_use_case import ListDeadLettersUseCase
from .get_dead_letter_use_case import GetDeadLetterUseCase
from .set_dead_letter_replayable_use_case import SetDeadLetterReplayableUseCase
from .set_dead_letters_replayable_use_case import SetDeadLettersReplayableUseCase
from .delete_dead_letter_use_case import DeleteDeadLetterUseCase
from .dtos import (
    DeadLetterDTO,
    DeadLetterFiltersDTO,
    ListDeadLettersResponseDTO,
    DeadLetterIdentifierDTO,
    SetReplayableRequestDTO,
    SetReplayableResponseDTO,
    BulkSetReplayableRequestDTO,
    BulkSetReplayableResponseDTO,
    DeleteDeadLetterResponseDTO,
)

__all__ = [
    "ListDeadLettersUseCase",
    "GetDeadLetterUseCase",
    "SetDeadLetterReplayableUseCase",
    "SetDeadLettersReplayableUseCase",
    "DeleteDeadLetterUseCase",
    "DeadLetterDTO",
    "DeadLetterFiltersDTO",
    "ListDeadLettersResponseDTO",
    "DeadLetterIdentifierDTO",
    "SetReplayableRequestDTO",
    "SetReplayableResponseDTO",
    "BulkSetReplayableRequestDTO",
    "BulkSetReplayableResponseDTO",
    "DeleteDeadLetterResponseDTO",
]
