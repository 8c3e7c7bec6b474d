from uuid import uuid4
from src.domain import DeadLetter, decode_body, extract_json_body


def test_json_body_starts_at_first_brace():
    assert extract_json_body(b'prefix{"a":1}') == '{"a":1}'


def test_json_body_keeps_nested_objects_to_the_end():
    assert extract_json_body(b'hdr{"a":{"b":2}}') == '{"a":{"b":2}}'


def test_json_body_absent_without_brace():
    assert extract_json_body(b"plain text payload") is None
    assert extract_json_body(b"") is None
    assert extract_json_body(None) is None


def test_decode_body_replaces_invalid_utf8():
    assert decode_body(b"ok\xff") == "ok\ufffd"
    assert decode_body(None) == ""


def test_dead_letter_exposes_json_body():
    dead_letter = DeadLetter(
        id=uuid4(),
        received_at="node-1",
        message_type="Orders.PlaceOrder",
        body=b'envelope{"orderId":"A-1"}',
    )

    assert dead_letter.json_body == '{"orderId":"A-1"}'
    assert dead_letter.key.received_at == "node-1"
