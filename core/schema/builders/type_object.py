# ============================================================================
# TYPE OBJECT BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Runtime type metadata per table
# PURPOSE: Emit a const object mapping each column to its printed type
# CREATED: 19 OCT 2026
# ============================================================================
"""
Type Object Builder

Gives downstream code the table's shape at runtime, where interfaces
no longer exist:

    export const UsersType = {
        id: "number",
        tags: "string[] | null",
        status: "Status"
    } as const;
"""

from core.casing import Transformations
from core.contracts import TableInfo
from core.schema import ts_ast as ts
from core.schema.builders.base import NodeBuilder
from core.schema.builders.column import ColumnBuilder
from core.schema.printer import TypeScriptPrinter
from core.schema.registry import TypeRegistry

TYPE_OBJECT_SUFFIX = "Type"


class TypeObjectBuilder(NodeBuilder):
    """`<TypeName>Type` const builder for one table."""

    def __init__(self, table: TableInfo, types: TypeRegistry, transform: Transformations):
        super().__init__(table.name, types, transform)
        self.table = table
        self._printer = TypeScriptPrinter()

    def declared_name(self) -> ts.Identifier:
        return ts.Identifier(self.type_name().text + TYPE_OBJECT_SUFFIX)

    def build_node(self) -> ts.ConstDeclaration:
        properties = []
        for column in self.table.ordered_columns():
            builder = ColumnBuilder(column, self.types, self.transform)
            tag = self._printer.print_type(builder.build_type())
            properties.append(ts.PropertyAssignment(builder.field_name, ts.StringLiteral(tag)))

        return ts.ConstDeclaration(
            name=self.declared_name(),
            initializer=ts.AsConst(ts.ObjectLiteral(tuple(properties))),
        )
