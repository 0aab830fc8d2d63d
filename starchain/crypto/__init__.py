"""
StarChain Crypto Package
"""

from .signature import recover_address, sign_message, verify_signature

__all__ = [
    'recover_address',
    'sign_message',
    'verify_signature'
]
