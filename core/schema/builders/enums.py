# ============================================================================
# ENUM BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Enum declarations
# PURPOSE: Emit a string-valued TypeScript enum per database enum type
# CREATED: 19 OCT 2026
# ============================================================================
"""
Enum Builder

    CREATE TYPE order_status AS ENUM ('in_progress', 'shipped');

becomes

    export enum OrderStatus {
        InProgress = "in_progress",
        Shipped = "shipped"
    }

Member names go through transform.enum_members and are then made valid
identifiers (`1st` -> `_1st`); initializers keep the raw label so values
round-trip to the database unchanged.
"""

from core.casing import Transformations, to_identifier
from core.contracts import EnumInfo
from core.schema import ts_ast as ts
from core.schema.builders.base import NodeBuilder
from core.schema.registry import TypeRegistry


class EnumBuilder(NodeBuilder):
    """Enum declaration builder for one database enum."""

    def __init__(self, enum: EnumInfo, types: TypeRegistry, transform: Transformations):
        super().__init__(enum.name, types, transform)
        self.values = enum.values

    def build_node(self) -> ts.EnumDeclaration:
        members = tuple(
            ts.EnumMember(
                name=to_identifier(self.transform.enum_members(value)),
                initializer=ts.StringLiteral(value),
            )
            for value in self.values
        )
        return ts.EnumDeclaration(name=self.type_name(), members=members)
