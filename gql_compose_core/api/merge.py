"""
Schema merge endpoint.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from graphql import GraphQLError
from gql_compose_core.api.models import ErrorResponse, MergeRequest, MergeResponse
from gql_compose_core.lib.merge import MergeOptions, merge_definitions
from gql_compose_core.lib.parser import extract_definitions
from gql_compose_core.lib.validate import SchemaValidationError, validate_merged_schema

router = APIRouter()

@router.post("/merge", responses={
    200: {
        "description": "Merge result",
        "content": {
            "text/plain": {
                "example": """schema {
  query: Query
}

type Query {
  clients: [Client]
  products: [Product]
}"""
            },
            "application/json": {
                "example": {
                    "status": "success",
                    "sdl": "schema {\n  query: Query\n}\n\ntype Query {\n  clients: [Client]\n}",
                    "merged_types": ["Query"],
                    "types": ["Client"]
                }
            }
        }
    },
    400: {
        "model": ErrorResponse,
        "description": "Invalid SDL or conflicting definitions",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Conflicting field definitions:\n  - Query.getClient: getClient(id: ID!): Client vs getClient(id: String!): Client"
                }
            }
        }
    }
})
async def merge_schemas(request: MergeRequest):
    """
    Merge SDL documents into a single schema.

    Query, Mutation and Subscription fields from every source are concatenated into
    one type each, and a single schema declaration is generated. With `all`, every
    object type sharing a name is merged the same way.
    """
    options = MergeOptions(merge_all=request.all, dedupe=request.dedupe)
    try:
        result = merge_definitions(extract_definitions(request.sources), options)
        sdl = result.to_sdl()
        if request.validate_schema:
            validate_merged_schema(sdl)
    except (GraphQLError, SchemaValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if request.output_format == "sdl":
        return PlainTextResponse(sdl)

    response = MergeResponse(
        status="success",
        sdl=sdl,
        merged_types=result.merged.definitions().names(),
        types=result.rest.names()
    )
    return JSONResponse(response.model_dump())
