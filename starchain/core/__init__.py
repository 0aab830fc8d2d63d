"""
StarChain ledger core
"""

from .block import Block
from .blockchain import Blockchain, initialize_ledger
from .exceptions import (
    BlockchainError,
    SealError,
    GenesisError,
    AppendError,
    ChallengeError,
    MalformedChallenge,
    ExpiredChallenge,
    SignatureInvalid,
    NotFound
)
from .validation import NO_ERRORS, IntegrityError, LinkageError

__all__ = [
    'Block',
    'Blockchain',
    'initialize_ledger',
    'BlockchainError',
    'SealError',
    'GenesisError',
    'AppendError',
    'ChallengeError',
    'MalformedChallenge',
    'ExpiredChallenge',
    'SignatureInvalid',
    'NotFound',
    'NO_ERRORS',
    'IntegrityError',
    'LinkageError'
]
