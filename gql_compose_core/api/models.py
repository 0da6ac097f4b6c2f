"""
Pydantic models for API requests and responses.
"""

from typing import List, Literal
from pydantic import BaseModel, Field

class MergeRequest(BaseModel):
    """Request model for schema merging."""
    sources: List[str] = Field(default_factory=list, description="SDL documents to merge, in order")
    all: bool = Field(False, description="Merge every object type sharing a name, not only root operation types")
    dedupe: bool = Field(False, description="Drop fields repeated with an identical signature inside merged types")
    validate_schema: bool = Field(False, alias="validate", description="Build the merged schema and reject conflicting fields")
    output_format: Literal["sdl", "json"] = Field("sdl", description="Output format: sdl or json")

class MergeResponse(BaseModel):
    """JSON merge result."""
    status: str = Field(..., examples=["success"])
    sdl: str = Field(..., examples=["schema {\n  query: Query\n}"])
    merged_types: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["0.1.0"])

class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str = Field(..., examples=["An error occurred"])
