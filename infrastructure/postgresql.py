# ============================================================================
# POSTGRESQL SCHEMA SOURCE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Infrastructure - PostgreSQL schema introspection
# PURPOSE: Read enums, tables and columns from pg_catalog / information_schema
# CREATED: 19 OCT 2026
# ============================================================================
"""
PostgreSQL Schema Source

Implements the SchemaSource contract over a psycopg3 AsyncConnection:
- Enums from pg_type / pg_enum, labels in enumsortorder
- Tables and views from information_schema.tables
- Columns from information_schema.columns

Column mapping:
- type:        udt_name; for arrays the element udt_name (`_text` -> `text`)
- nullable:    is_nullable = 'YES'
- has_default: column_default present, identity, or generated
- can_insert:  information_schema.tables.is_insertable_into (false for
               most views)

Connection string priority:
1. Explicit connection string
2. DATABASE_URL environment variable
3. Individual POSTGRES_* components

Usage:
    schema = await PostgresSchema.connect(schema="public")
    try:
        tables = await schema.get_tables()
    finally:
        await schema.disconnect()
"""

import os
from collections import defaultdict
from typing import Any, Dict, List, Optional

import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from core.contracts import ColumnInfo, EnumInfo, TableInfo
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.SCHEMA)


# ============================================================================
# QUERIES
# ============================================================================

ENUMS_QUERY = sql.SQL("""
SELECT t.typname AS name,
       array_agg(e.enumlabel ORDER BY e.enumsortorder) AS labels
FROM pg_type t
JOIN pg_enum e ON e.enumtypid = t.oid
JOIN pg_namespace n ON n.oid = t.typnamespace
WHERE n.nspname = %(schema)s
GROUP BY t.typname
ORDER BY t.typname
""")

TABLES_QUERY = sql.SQL("""
SELECT table_name AS name,
       is_insertable_into = 'YES' AS can_insert
FROM information_schema.tables
WHERE table_schema = %(schema)s
  AND table_type IN ('BASE TABLE', 'VIEW', 'FOREIGN')
ORDER BY table_name
""")

COLUMNS_QUERY = sql.SQL("""
SELECT table_name,
       column_name AS name,
       CASE WHEN data_type = 'ARRAY' THEN substring(udt_name FROM 2) ELSE udt_name END AS type,
       is_nullable = 'YES' AS nullable,
       (column_default IS NOT NULL OR is_identity = 'YES' OR is_generated = 'ALWAYS') AS has_default,
       data_type = 'ARRAY' AS is_array,
       ordinal_position AS ordinal
FROM information_schema.columns
WHERE table_schema = %(schema)s
ORDER BY table_name, ordinal_position
""")


def get_connection_string() -> str:
    """
    Get database connection string from environment.

    Returns:
        PostgreSQL connection string
    """
    if url := os.environ.get("DATABASE_URL"):
        return url

    host = os.environ.get("POSTGRES_HOST", "localhost")
    port = os.environ.get("POSTGRES_PORT", "5432")
    name = os.environ.get("POSTGRES_DB", "postgres")
    user = os.environ.get("POSTGRES_USER", "postgres")
    password = os.environ.get("POSTGRES_PASSWORD", "")
    sslmode = os.environ.get("POSTGRES_SSLMODE", "prefer")

    return f"postgresql://{user}:{password}@{host}:{port}/{name}?sslmode={sslmode}"


def mask_conninfo(conninfo: str) -> str:
    """Strip credentials from a connection string for logging."""
    if "@" in conninfo:
        return conninfo.split("@")[-1]
    if "password=" in conninfo:
        return conninfo.split("password=")[0] + "password=***"
    return conninfo


# ============================================================================
# SCHEMA SOURCE
# ============================================================================

class PostgresSchema:
    """
    Schema snapshot reader for one PostgreSQL schema.

    Owns its connection: disconnect() closes it.
    """

    def __init__(self, conn: psycopg.AsyncConnection, schema: str = "public"):
        """
        Args:
            conn: Open async connection (dict_row factory expected)
            schema: PostgreSQL schema to introspect
        """
        self.conn = conn
        self.schema = schema

    @classmethod
    async def connect(
        cls,
        connection_string: Optional[str] = None,
        schema: str = "public",
    ) -> "PostgresSchema":
        """
        Open a connection and wrap it.

        Raises:
            psycopg.OperationalError if the database is unreachable
        """
        conninfo = connection_string or get_connection_string()
        logger.info(f"Connecting to PostgreSQL: {mask_conninfo(conninfo)} (schema={schema})")

        conn = await psycopg.AsyncConnection.connect(conninfo, row_factory=dict_row, autocommit=True)
        return cls(conn, schema=schema)

    async def _fetch_all(self, query: sql.Composable) -> List[Dict[str, Any]]:
        cursor = await self.conn.execute(query, {"schema": self.schema})
        return await cursor.fetchall()

    async def get_enums(self) -> List[EnumInfo]:
        rows = await self._fetch_all(ENUMS_QUERY)
        enums = [EnumInfo(name=row["name"], values=tuple(row["labels"])) for row in rows]
        logger.debug(f"Read {len(enums)} enums from schema {self.schema}")
        return enums

    async def get_tables(self) -> List[TableInfo]:
        table_rows = await self._fetch_all(TABLES_QUERY)
        column_rows = await self._fetch_all(COLUMNS_QUERY)

        columns_by_table: Dict[str, List[ColumnInfo]] = defaultdict(list)
        for row in column_rows:
            columns_by_table[row["table_name"]].append(ColumnInfo(
                name=row["name"],
                type=row["type"],
                nullable=row["nullable"],
                has_default=row["has_default"],
                is_array=row["is_array"],
                order=row["ordinal"],
            ))

        tables = [
            TableInfo(
                name=row["name"],
                can_insert=row["can_insert"],
                columns=tuple(columns_by_table.get(row["name"], ())),
            )
            for row in table_rows
        ]
        logger.debug(f"Read {len(tables)} tables from schema {self.schema}")
        return tables

    async def disconnect(self) -> None:
        await self.conn.close()
        logger.debug("PostgreSQL connection closed")


__all__ = [
    "PostgresSchema",
    "get_connection_string",
    "mask_conninfo",
    "ENUMS_QUERY",
    "TABLES_QUERY",
    "COLUMNS_QUERY",
]
