import pytest
from uuid import uuid4
from src.domain import EnvelopeKey, InvalidEnvelopeKey


def test_key_requires_received_at():
    with pytest.raises(InvalidEnvelopeKey):
        EnvelopeKey(id=uuid4(), received_at="")

    with pytest.raises(InvalidEnvelopeKey):
        EnvelopeKey(id=uuid4(), received_at=None)


def test_key_requires_uuid():
    with pytest.raises(InvalidEnvelopeKey):
        EnvelopeKey(id="not-a-uuid", received_at="node-1")


def test_same_id_under_different_partitions_are_different_keys():
    shared = uuid4()

    assert EnvelopeKey(shared, "node-1") != EnvelopeKey(shared, "node-2")
    assert EnvelopeKey(shared, "node-1") == EnvelopeKey(shared, "node-1")
