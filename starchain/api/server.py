"""
HTTP API for the star registry
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from ..config.env import CORS_ORIGINS
from ..core.blockchain import Blockchain, initialize_ledger
from ..core.exceptions import (
    AppendError,
    ChallengeError,
    NotFound,
    SignatureInvalid
)
from ..core.validation import is_clean

logger = logging.getLogger(__name__)


# API Models
class ValidationRequest(BaseModel):
    address: str = Field(min_length=1)


class Star(BaseModel):
    model_config = ConfigDict(extra="allow")

    dec: str
    ra: str
    story: str


class SubmitStarRequest(BaseModel):
    address: str = Field(min_length=1)
    message: str = Field(min_length=1)
    signature: str = Field(min_length=1)
    star: Star


def get_blockchain(request: Request) -> Blockchain:
    return request.app.state.blockchain


def create_app(blockchain: Optional[Blockchain] = None) -> FastAPI:
    """Build the API around ``blockchain`` (the process-wide ledger by default)"""
    app = FastAPI(title="StarChain API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.blockchain = blockchain if blockchain is not None else initialize_ledger()

    @app.get("/block/height/{height}")
    async def get_block_by_height(height: int, chain: Blockchain = Depends(get_blockchain)) -> Dict[str, Any]:
        """Returns the block at the given height"""
        block = chain.get_block_by_height(height)
        if block is None:
            raise HTTPException(status_code=404, detail="Block Not Found!")
        return block.to_dict()

    @app.get("/block/hash/{block_hash}")
    async def get_block_by_hash(block_hash: str, chain: Blockchain = Depends(get_blockchain)) -> Dict[str, Any]:
        """Returns the block with the given hash"""
        block = chain.get_block_by_hash(block_hash)
        if block is None:
            raise HTTPException(status_code=404, detail="Block Not Found!")
        return block.to_dict()

    @app.post("/requestValidation")
    async def request_validation(
        request: ValidationRequest,
        chain: Blockchain = Depends(get_blockchain)
    ) -> str:
        """Returns the challenge message the wallet must sign"""
        return chain.request_challenge(request.address)

    @app.post("/submitstar")
    async def submit_star(
        request: SubmitStarRequest,
        chain: Blockchain = Depends(get_blockchain)
    ) -> Dict[str, Any]:
        """Registers a star for the signing address"""
        try:
            block = chain.submit_entry(
                request.address,
                request.message,
                request.signature,
                request.star.model_dump()
            )
        except ChallengeError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except SignatureInvalid as e:
            raise HTTPException(status_code=401, detail=str(e))
        except AppendError as e:
            logger.error(f"Error adding star for {request.address}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return block.to_dict()

    @app.get("/blocks/{address}")
    async def get_stars_by_owner(address: str, chain: Blockchain = Depends(get_blockchain)) -> List[Any]:
        """Returns the stars registered by an address"""
        try:
            return chain.get_stars_by_owner(address)
        except NotFound as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.get("/height")
    async def get_height(chain: Blockchain = Depends(get_blockchain)) -> Dict[str, int]:
        return {"height": chain.get_height()}

    @app.get("/validateChain")
    async def validate_chain(chain: Blockchain = Depends(get_blockchain)) -> Dict[str, Any]:
        """Runs a full chain validation"""
        report = chain.validate_chain()
        if is_clean(report):
            return {"valid": True, "errors": []}
        return {"valid": False, "errors": [finding.to_dict() for finding in report]}

    return app
