# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Infrastructure - Database introspection
# PURPOSE: Schema sources backed by a live database
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the type generator.

Provides:
- PostgresSchema: SchemaSource over a psycopg AsyncConnection
- get_connection_string: DATABASE_URL / POSTGRES_* resolution

Usage:
    from infrastructure import PostgresSchema

    schema = await PostgresSchema.connect(schema="public")
"""

from infrastructure.postgresql import (
    PostgresSchema,
    get_connection_string,
    mask_conninfo,
)

__all__ = [
    "PostgresSchema",
    "get_connection_string",
    "mask_conninfo",
]
