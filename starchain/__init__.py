"""
StarChain - in-memory star ownership registry
"""

__version__ = "0.1.0"

from .core import Block, Blockchain, initialize_ledger, NO_ERRORS

__all__ = [
    'Block',
    'Blockchain',
    'initialize_ledger',
    'NO_ERRORS'
]
