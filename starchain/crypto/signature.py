"""
StarChain Signature Module
Verifies messages signed with the Ethereum personal-message scheme (EIP-191)
"""

import logging
from eth_account import Account
from eth_account.messages import encode_defunct

logger = logging.getLogger(__name__)


def recover_address(message: str, signature: str) -> str:
    """Recover the address that produced ``signature`` over ``message``"""
    return Account.recover_message(encode_defunct(text=message), signature=signature)


def verify_signature(message: str, address: str, signature: str) -> bool:
    """Verify that ``signature`` over ``message`` was made by ``address``"""
    try:
        recovered = recover_address(message, signature)
    except Exception as e:
        logger.debug(f"Could not recover signer for {address}: {e}")
        return False
    return recovered.lower() == address.lower()


def sign_message(message: str, private_key: str) -> str:
    """Sign message with private key and return the hex signature"""
    signed = Account.sign_message(encode_defunct(text=message), private_key=private_key)
    return signed.signature.hex()
