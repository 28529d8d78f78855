# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Foundation - Schema entity contracts and kind enums
# PURPOSE: Define the read-only schema snapshots consumed by the builders
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: TypeKind, TableVariant, ColumnInfo, TableInfo, EnumInfo
# DEPENDENCIES: enum, pydantic
# ============================================================================
"""
Base contracts for the type generator.

These are the records that cross the boundary between schema
introspection and declaration building:
- PostgreSQL (information_schema / pg_catalog rows)
- Python (builder input)

All records are frozen snapshots, fetched once per generation run.
"""

from enum import Enum
from typing import Protocol, Sequence, Tuple, runtime_checkable
from pydantic import BaseModel, Field


# ============================================================================
# KIND ENUMS
# ============================================================================

class TypeKind(str, Enum):
    """
    Kind tag stored alongside every type registry entry.

    BUILTIN entries are seeded by the registry itself; ENUM and TABLE
    entries are registered by the generator as it walks the schema.
    """
    BUILTIN = "builtin"      # PostgreSQL scalar type (int4, text, ...)
    ENUM = "enum"            # CREATE TYPE ... AS ENUM
    TABLE = "table"          # Table or view (composite row type)


class TableVariant(str, Enum):
    """
    Declaration variants produced from a single table.

    PRIMARY is the row as read back from the database. INSERT is the
    payload accepted when creating a row: columns with a default are
    optional.
    """
    PRIMARY = "primary"
    INSERT = "insert"

    @property
    def name_suffix(self) -> str:
        """Suffix appended to the table's type name."""
        return "$Insert" if self is TableVariant.INSERT else ""


# ============================================================================
# SCHEMA ENTITY CONTRACTS
# ============================================================================

class ColumnInfo(BaseModel):
    """
    One physical column.

    `type` is the schema-level type name (udt name for scalars, element
    udt name for arrays).
    """
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Schema-level type name")
    nullable: bool = False
    has_default: bool = False
    is_array: bool = False
    order: int = Field(default=0, ge=0, description="Ordinal position within the table")

    model_config = {"frozen": True}


class TableInfo(BaseModel):
    """
    One table or view with its ordered columns.
    """
    name: str = Field(..., min_length=1)
    can_insert: bool = Field(default=True, description="False for read-only views")
    columns: Tuple[ColumnInfo, ...] = ()

    model_config = {"frozen": True}

    def ordered_columns(self) -> Tuple[ColumnInfo, ...]:
        """Columns sorted by declared ordinal position (stable on ties)."""
        return tuple(sorted(self.columns, key=lambda column: column.order))


class EnumInfo(BaseModel):
    """
    One enumerated type with its labels in sort order.
    """
    name: str = Field(..., min_length=1)
    values: Tuple[str, ...] = ()

    model_config = {"frozen": True}


# ============================================================================
# SCHEMA SOURCE CONTRACT
# ============================================================================

@runtime_checkable
class SchemaSource(Protocol):
    """
    Where schema snapshots come from.

    Implemented by infrastructure.postgresql.PostgresSchema; tests pass
    in-memory fakes.
    """

    async def get_enums(self) -> Sequence[EnumInfo]:
        ...

    async def get_tables(self) -> Sequence[TableInfo]:
        ...

    async def disconnect(self) -> None:
        ...


__all__ = [
    "SchemaSource",
    "TypeKind",
    "TableVariant",
    "ColumnInfo",
    "TableInfo",
    "EnumInfo",
]
