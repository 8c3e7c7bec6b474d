from .list_incoming_envelopes_use_case import ListIncomingEnvelopesUseCase
from .get_incoming_envelope_use_case import GetIncomingEnvelopeUseCase
from .delete_incoming_envelope_use_case import DeleteIncomingEnvelopeUseCase
from .dtos import (
    IncomingEnvelopeDTO,
    IncomingEnvelopeFiltersDTO,
    ListIncomingEnvelopesResponseDTO,
    DeleteIncomingEnvelopeResponseDTO,
)

__all__ = [
    "ListIncomingEnvelopesUseCase",
    "GetIncomingEnvelopeUseCase",
    "DeleteIncomingEnvelopeUseCase",
    "IncomingEnvelopeDTO",
    "IncomingEnvelopeFiltersDTO",
    "ListIncomingEnvelopesResponseDTO",
    "DeleteIncomingEnvelopeResponseDTO",
]
