"""
Command line interface for gql-compose-core.
"""

from gql_compose_core.cli.cli import main

__all__ = [
    "main",
]
