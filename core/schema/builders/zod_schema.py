# ============================================================================
# ZOD SCHEMA BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Runtime validators per table
# PURPOSE: Emit a zod object schema mirroring the table's row shape
# CREATED: 19 OCT 2026
# ============================================================================
"""
Zod Schema Builder

    export const UsersSchema = z.object({
        id: z.number(),
        tags: z.array(z.string()).nullable(),
        status: z.nativeEnum(Status),
        manager: z.lazy(() => UsersSchema)
    });

Column types resolve through the registry by kind:
- builtin: matching zod primitive (unknown builtins -> z.unknown())
- enum:    z.nativeEnum(<Enum>)
- table:   z.lazy(() => <Table>Schema), order-independent

Declares a const, so the generator emits it once per table name.
"""

from typing import Dict

from core.casing import Transformations
from core.contracts import ColumnInfo, TableInfo, TypeKind
from core.schema import ts_ast as ts
from core.schema.builders.base import NodeBuilder
from core.schema.builders.column import ColumnBuilder
from core.schema.registry import TypeRegistry

SCHEMA_SUFFIX = "Schema"

ZOD = ts.Identifier("z")

# Builtin output identifier -> zod factory
ZOD_PRIMITIVES: Dict[str, str] = {
    "number": "number",
    "string": "string",
    "boolean": "boolean",
    "Date": "date",
    "Json": "unknown",
    "unknown": "unknown",
}


def schema_identifier(type_name: str) -> ts.Identifier:
    return ts.Identifier(type_name + SCHEMA_SUFFIX)


class ZodSchemaBuilder(NodeBuilder):
    """`<TypeName>Schema` const builder for one table."""

    def __init__(self, table: TableInfo, types: TypeRegistry, transform: Transformations):
        super().__init__(table.name, types, transform)
        self.table = table

    def declared_name(self) -> ts.Identifier:
        return schema_identifier(self.type_name().text)

    def build_column_schema(self, column: ColumnInfo) -> ts.Expression:
        """
        Raises:
            UnknownTypeError if the column type was never registered
        """
        kind = self.types.get_kind(column.type)
        identifier = self.types.get_identifier(column.type).text

        if kind is TypeKind.ENUM:
            expression = ts.call_method(ZOD, "nativeEnum", ts.Identifier(identifier))
        elif kind is TypeKind.TABLE:
            expression = ts.call_method(ZOD, "lazy", ts.ArrowFunction(schema_identifier(identifier)))
        else:
            expression = ts.call_method(ZOD, ZOD_PRIMITIVES.get(identifier, "unknown"))

        if column.is_array:
            expression = ts.call_method(ZOD, "array", expression)

        if column.nullable:
            expression = ts.call_method(expression, "nullable")

        return expression

    def build_node(self) -> ts.ConstDeclaration:
        properties = tuple(
            ts.PropertyAssignment(
                ColumnBuilder(column, self.types, self.transform).field_name,
                self.build_column_schema(column),
            )
            for column in self.table.ordered_columns()
        )
        return ts.ConstDeclaration(
            name=self.declared_name(),
            initializer=ts.call_method(ZOD, "object", ts.ObjectLiteral(properties)),
        )
