"""
Main FastAPI application for gql-compose-core.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from gql_compose_core.version import __version__
from .health import router as health_router
from .merge import router as merge_router
from .errors import not_found_handler, internal_error_handler

app = FastAPI(
    title="gql-compose-core API",
    description="Merge GraphQL SDL documents into a single schema",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, tags=["system"])
app.include_router(merge_router, tags=["schema"])

# Add error handlers
app.add_exception_handler(404, not_found_handler)
app.add_exception_handler(500, internal_error_handler)

# To run: uvicorn gql_compose_core.api:app --reload --host 0.0.0.0 --port 8000
