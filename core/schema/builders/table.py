# ============================================================================
# TABLE BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Record type declarations per table
# PURPOSE: Compose column fields into the row interface and its insert variant
# CREATED: 19 OCT 2026
# ============================================================================
"""
Table Builder

Builds the exported interface for a table. The same member routine
serves both variants:

    PRIMARY:  export interface Users { id: number; createdAt: Date; }
    INSERT:   export interface Users$Insert { id: number; createdAt?: Date; }

The insert variant differs only in two rules: columns with a default
are optional, and the declared name carries the `$Insert` suffix.
Whether a table gets an insert variant at all (`can_insert`) is decided
by the generator, not here.
"""

from typing import List

from core.casing import Transformations
from core.contracts import TableInfo, TableVariant
from core.schema import ts_ast as ts
from core.schema.builders.base import NodeBuilder
from core.schema.builders.column import ColumnBuilder
from core.schema.registry import TypeRegistry


class TableBuilder(NodeBuilder):
    """
    Interface builder for one table.

    Usage:
        TableBuilder(table, types, transform).build_node()
        TableBuilder.insert_type(table, types, transform).build_node()
    """

    def __init__(
        self,
        table: TableInfo,
        types: TypeRegistry,
        transform: Transformations,
        variant: TableVariant = TableVariant.PRIMARY,
    ):
        super().__init__(table.name, types, transform)
        self.table = table
        self.variant = TableVariant(variant)

    @classmethod
    def insert_type(
        cls,
        table: TableInfo,
        types: TypeRegistry,
        transform: Transformations,
    ) -> "TableBuilder":
        """Builder for the insert variant of `table`."""
        return cls(table, types, transform, variant=TableVariant.INSERT)

    @property
    def can_insert(self) -> bool:
        return self.table.can_insert

    def declared_name(self) -> ts.Identifier:
        """Name of the produced declaration: type name plus variant suffix."""
        return ts.Identifier(self.type_name().text + self.variant.name_suffix)

    def build_members(self) -> List[ts.PropertySignature]:
        members = []
        for column in self.table.ordered_columns():
            signature = ColumnBuilder(column, self.types, self.transform).build_node()
            if self.variant is TableVariant.INSERT and column.has_default:
                signature = signature.with_optional()
            members.append(signature)
        return members

    def build_node(self) -> ts.InterfaceDeclaration:
        return ts.InterfaceDeclaration(
            name=self.declared_name(),
            members=tuple(self.build_members()),
        )
