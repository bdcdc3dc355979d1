"""
Token cache sidecar. GET /token runs one manager activation for the configured slot.
Local use only (binds 127.0.0.1); the token is handed to the calling process.
"""
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from token_cache import config
from token_cache.errors import ConfigurationError, StoreUnavailable
from token_cache.manager import TokenManager

logger = logging.getLogger(__name__)

app = FastAPI(title="Token Cache", version="0.1.0")


def get_manager(slot: str | None = None) -> TokenManager:
    return TokenManager.from_config(slot)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "token_cache"}


@app.get("/token")
def token(slot: str | None = None):
    """
    Return a usable access token for slot (default TOKEN_CACHE_SLOT).
    503 when authentication is currently unavailable, 500 when the store cannot be used.
    """
    try:
        manager = get_manager(slot)
    except ValueError as e:
        return JSONResponse({"error": "invalid_request", "error_description": str(e)}, status_code=400)
    except ConfigurationError as e:
        logger.error("Token cache misconfigured: %s", e)
        return JSONResponse({"error": "configuration_error", "error_description": str(e)}, status_code=500)
    try:
        value = manager.get_token()
    except StoreUnavailable as e:
        logger.error("Token store unavailable: %s", e)
        return JSONResponse(
            {"error": "store_unavailable", "error_description": "Token store could not be read or written"},
            status_code=500,
        )
    outcome = manager.last_outcome.label if manager.last_outcome else None
    if not value:
        return JSONResponse(
            {"error": "token_unavailable", "slot": manager.slot, "validation": outcome},
            status_code=503,
        )
    return {"slot": manager.slot, "access_token": value, "token_type": "Bearer", "validation": outcome}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "token_cache.main:app",
        host="127.0.0.1",
        port=8100,
        reload=True,
    )
