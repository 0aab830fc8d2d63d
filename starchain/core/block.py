"""
Block structure of the star registry
"""

import hashlib
import json
from typing import Any, Dict, Optional

from ..config.env import GENESIS_DATA
from ..utils.codec import encode_payload, decode_payload
from .exceptions import SealError


class Block:
    """A single ledger entry, sealed exactly once by the blockchain.

    A block is created in one of two shapes: the genesis block, which
    carries a fixed marker payload and no owner, or an entry block, which
    carries an encoded star and the address that registered it. The
    linkage fields stay empty until ``seal`` is called.
    """

    def __init__(self, body: str, owner: Optional[str] = None):
        self.body = body
        self.owner = owner
        self.height: Optional[int] = None
        self.time: Optional[int] = None
        self.previous_hash: Optional[str] = None
        self.hash: Optional[str] = None
        self._sealed = False

    @classmethod
    def genesis(cls) -> 'Block':
        """Create the unsealed genesis block"""
        return cls(encode_payload({'data': GENESIS_DATA}))

    @classmethod
    def entry(cls, star: Any, owner: str) -> 'Block':
        """Create an unsealed block registering ``star`` for ``owner``"""
        return cls(encode_payload(star), owner=owner)

    @property
    def is_genesis(self) -> bool:
        return self.owner is None

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def timestamp(self) -> Optional[int]:
        return self.time

    def _header(self) -> Dict[str, Any]:
        return {
            'body': self.body,
            'height': self.height,
            'owner': self.owner,
            'previousBlockHash': self.previous_hash,
            'time': self.time
        }

    def calculate_hash(self) -> str:
        """Calculate SHA-256 over every field except the hash itself"""
        block_string = json.dumps(self._header(), sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(block_string.encode()).hexdigest()

    def seal(self, height: int, timestamp: int, previous_hash: Optional[str]) -> 'Block':
        """Assign the linkage fields and the hash"""
        if self._sealed:
            raise SealError(f"Block at height {self.height} is already sealed")

        self.height = height
        self.time = timestamp
        self.previous_hash = previous_hash
        self.hash = self.calculate_hash()
        self._sealed = True
        return self

    def validate(self) -> bool:
        """Check that the stored hash still matches the block content.

        Linkage with the previous block is not checked here.
        """
        if not self._sealed or not self.hash:
            return False
        try:
            return self.hash == self.calculate_hash()
        except (TypeError, ValueError):
            return False

    def get_body_data(self) -> Optional[Any]:
        """Return the decoded star, or None for the genesis block"""
        if self.is_genesis:
            return None
        return decode_payload(self.body)

    def to_dict(self) -> Dict[str, Any]:
        """Convert block to its wire shape"""
        data = {
            'height': self.height,
            'time': self.time,
            'previousBlockHash': self.previous_hash,
            'hash': self.hash
        }
        if self.owner is not None:
            data['owner'] = self.owner
        data['body'] = self.body
        return data

    def __repr__(self) -> str:
        return f"Block(height={self.height}, hash={self.hash}, owner={self.owner})"
