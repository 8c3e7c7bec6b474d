from typing import Optional


def decode_body(body: Optional[bytes]) -> str:
    """Best-effort text view of a serialized message payload."""
    if not body:
        return ""
    return bytes(body).decode("utf-8", errors="replace")


def extract_json_body(body: Optional[bytes]) -> Optional[str]:
    """
    Return the JSON object embedded in a message body.

    Envelope serializers prefix the payload with headers, so the object is
    taken to start at the first "{" and run to the end of the body.

    Returns:
        Optional[str]: Text from the first "{" onwards, None when there is none
    """
    text = decode_body(body)
    start = text.find("{")
    if start == -1:
        return None
    return text[start:]
