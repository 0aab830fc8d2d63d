"""
Exceptions raised by the StarChain ledger
"""


class BlockchainError(Exception):
    """Base exception for blockchain errors"""
    pass


class SealError(BlockchainError):
    """Raised when a block is sealed more than once"""
    pass


class GenesisError(BlockchainError):
    """Raised when the genesis block cannot be appended"""
    pass


class AppendError(BlockchainError):
    """Raised when a sealed block fails the append post-conditions"""
    pass


class ChallengeError(BlockchainError):
    """Base exception for challenge message problems"""
    pass


class MalformedChallenge(ChallengeError):
    """Raised when a challenge message cannot be parsed"""
    pass


class ExpiredChallenge(ChallengeError):
    """Raised when a challenge message is older than the allowed window"""
    pass


class SignatureInvalid(BlockchainError):
    """Raised when the signature does not match the message and address"""
    pass


class NotFound(BlockchainError):
    """Raised when an owner has no registered stars"""
    pass
