"""
Custom error handlers for the API.
"""

import logging
from fastapi import Request
from fastapi.responses import JSONResponse

async def not_found_handler(request: Request, exc):
    """Handle 404 errors"""
    return JSONResponse(
        status_code=404,
        content={
            "error": "Endpoint not found",
            "method": request.method,
            "path": str(request.url.path),
            "endpoints": ["/health", "/merge"]
        }
    )

async def internal_error_handler(request: Request, exc):
    """Handle 500 errors"""
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Schema merge failed", "detail": str(exc)}
    )
