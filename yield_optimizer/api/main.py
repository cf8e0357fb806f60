"""FastAPI application for the yield optimizer.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from yield_optimizer import __version__
from yield_optimizer.api.endpoints import router
from yield_optimizer.precompiles import get_default_precompile_set

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("YIELD_OPTIMIZER_HOST", "0.0.0.0")
PORT = int(os.environ.get("YIELD_OPTIMIZER_PORT", "8000"))
DEBUG = os.environ.get("YIELD_OPTIMIZER_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (64 KiB); calldata is a handful of 32-byte words
MAX_REQUEST_SIZE = 64 * 1024

app = FastAPI(
    title="Yield Optimizer",
    description="Deterministic fixed-point capital allocation between two yield destinations",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "precompiles": get_default_precompile_set().addresses}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - YIELD_OPTIMIZER_HOST: Host to bind to (default: 0.0.0.0)
    - YIELD_OPTIMIZER_PORT: Port to bind to (default: 8000)
    - YIELD_OPTIMIZER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "yield_optimizer.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
