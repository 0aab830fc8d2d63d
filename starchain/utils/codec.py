"""
Hex codec for star payloads stored in block bodies
"""

import binascii
import json
from typing import Any


class PayloadError(ValueError):
    """Raised when a block body cannot be decoded"""
    pass


def encode_payload(payload: Any) -> str:
    """Serialize payload as compact JSON and return its hex form"""
    data = json.dumps(payload, separators=(',', ':'), ensure_ascii=False)
    return data.encode('utf-8').hex()


def decode_payload(body: str) -> Any:
    """Decode a hex body back into the JSON payload it carries"""
    try:
        raw = binascii.unhexlify(body)
        return json.loads(raw.decode('utf-8'))
    except (binascii.Error, TypeError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadError(f"Invalid payload body: {e}") from e
