"""
StarChain utilities
"""

from .codec import encode_payload, decode_payload, PayloadError

__all__ = [
    'encode_payload',
    'decode_payload',
    'PayloadError'
]
