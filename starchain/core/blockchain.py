"""
In-memory star registry blockchain
"""

import logging
import threading
from typing import Any, Callable, List, Optional

from ..config.env import CHALLENGE_WINDOW_SECONDS, VALIDATE_ON_SUBMIT
from ..crypto.signature import verify_signature
from .block import Block
from .challenge import build_challenge, check_freshness, current_time
from .exceptions import AppendError, GenesisError, NotFound, SignatureInvalid
from .validation import (
    NO_ERRORS,
    is_clean,
    IntegrityError,
    LinkageError,
    ValidationFinding,
    ValidationReport
)

logger = logging.getLogger(__name__)

Verifier = Callable[[str, str, str], bool]


class Blockchain:
    """Append-only chain of sealed blocks registering star ownership.

    Every mutation goes through ``_add_block``, which holds the chain lock
    from the height computation until the block is appended. Readers work
    on a snapshot taken under the same lock.
    """

    def __init__(
        self,
        verifier: Verifier = verify_signature,
        challenge_window: int = CHALLENGE_WINDOW_SECONDS,
        validate_on_submit: bool = VALIDATE_ON_SUBMIT,
        clock: Callable[[], int] = current_time
    ):
        self.chain: List[Block] = []
        self.verifier = verifier
        self.challenge_window = challenge_window
        self.validate_on_submit = validate_on_submit
        self.clock = clock
        self._lock = threading.RLock()
        self.initialize_chain()

    @property
    def height(self) -> int:
        return len(self.chain) - 1

    def initialize_chain(self):
        """Append the genesis block if the chain is empty"""
        with self._lock:
            if self.chain:
                return
            try:
                self._add_block(Block.genesis())
            except Exception as e:
                logger.critical(f"Failed to create genesis block: {e}")
                raise GenesisError(f"Could not initialize chain: {e}") from e

    def get_height(self) -> int:
        with self._lock:
            return self.height

    def _snapshot(self) -> List[Block]:
        with self._lock:
            return list(self.chain)

    def _add_block(self, block: Block) -> Block:
        """Seal ``block`` on top of the chain and append it.

        The chain is left untouched when the block is rejected.
        """
        with self._lock:
            height = len(self.chain)
            previous_hash = self.chain[-1].hash if height > 0 else None
            block.seal(height, self.clock(), previous_hash)

            valid_block = bool(block.hash) and block.height == len(self.chain) and block.time is not None
            if not valid_block:
                logger.error(f"Rejected block at height {height}: post-conditions failed")
                raise AppendError("invalid block")

            self.chain.append(block)
            logger.info(f"Block {block.height} added: {block.hash}")
            return block

    def request_challenge(self, address: str) -> str:
        """Return the message ``address`` must sign before submitting a star"""
        return build_challenge(address, self.clock())

    def submit_entry(self, address: str, message: str, signature: str, star: Any) -> Block:
        """Register ``star`` for ``address`` once the signed challenge checks out.

        Raises:
            MalformedChallenge: message has no readable timestamp
            ExpiredChallenge: message is at least ``challenge_window`` seconds old
            SignatureInvalid: signature does not verify for address
            AppendError: the sealed block failed post-conditions
        """
        check_freshness(message, self.challenge_window, self.clock)

        if not self.verifier(message, address, signature):
            logger.warning(f"Signature verification failed for {address}")
            raise SignatureInvalid(f"Failed verification for address {address}")

        block = self._add_block(Block.entry(star, address))

        if self.validate_on_submit:
            self._log_validation()

        return block

    def _log_validation(self):
        report = self.validate_chain()
        if is_clean(report):
            logger.info("Chain is OK")
        else:
            logger.warning(f"Chain validation found {len(report)} error(s): "
                           f"{[finding.message for finding in report]}")

    def get_block_by_hash(self, block_hash: str) -> Optional[Block]:
        for block in self._snapshot():
            if block.hash == block_hash:
                return block
        return None

    def get_block_by_height(self, height: int) -> Optional[Block]:
        chain = self._snapshot()
        if 0 <= height < len(chain):
            return chain[height]
        return None

    def get_stars_by_owner(self, address: str) -> List[Any]:
        """Decoded stars owned by ``address``, in ascending height order"""
        stars = [
            block.get_body_data()
            for block in self._snapshot()
            if not block.is_genesis and block.owner == address
        ]
        if not stars:
            raise NotFound(f"No stars found for address {address}")
        return stars

    get_by_hash = get_block_by_hash
    get_by_height = get_block_by_height
    get_by_owner = get_stars_by_owner

    def validate_chain(self) -> ValidationReport:
        """Check every block hash and every link to the previous block.

        Returns the list of findings, or NO_ERRORS when there are none.
        """
        errors: List[ValidationFinding] = []
        chain = self._snapshot()

        for index, block in enumerate(chain):
            if not block.validate():
                errors.append(IntegrityError(height=block.height, hash=block.hash))
            if index > 0 and block.previous_hash != chain[index - 1].hash:
                errors.append(LinkageError(height=block.height, previous_height=chain[index - 1].height))

        return errors if errors else NO_ERRORS


_ledger: Optional[Blockchain] = None
_ledger_lock = threading.Lock()


def initialize_ledger() -> Blockchain:
    """Return the process-wide ledger, creating it on first call"""
    global _ledger
    with _ledger_lock:
        if _ledger is None:
            _ledger = Blockchain()
            logger.info("Ledger initialized")
        return _ledger
