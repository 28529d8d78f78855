# ============================================================================
# COLUMN BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Field declaration from one column
# PURPOSE: Resolve a column's type through the registry into a property signature
# CREATED: 19 OCT 2026
# ============================================================================
"""
Column Builder

Builds one interface member from one ColumnInfo:

    name:  transform.columns(column.name)
    type:  registry type -> T[] if array -> T | null if nullable

Array wrapping happens before nullable widening, so a nullable array of
text is `string[] | null`, never `(string | null)[]`.
"""

from typing import Optional

from core.casing import Transformations
from core.contracts import ColumnInfo
from core.schema import ts_ast as ts
from core.schema.builders.base import NodeBuilder
from core.schema.registry import TypeRegistry


class ColumnBuilder(NodeBuilder):
    """
    Property signature builder for a single column.

    `override_type` replaces the registry lookup entirely; array and
    nullable wrapping still apply on top of it.
    """

    def __init__(
        self,
        column: ColumnInfo,
        types: TypeRegistry,
        transform: Transformations,
        override_type: Optional[ts.TypeNode] = None,
    ):
        super().__init__(column.name, types, transform)
        self.column = column
        self.override_type = override_type

    @property
    def field_name(self) -> str:
        return self.transform.columns(self.column.name)

    def build_type(self) -> ts.TypeNode:
        """
        Resolve the column's output type.

        Raises:
            UnknownTypeError if the column type was never registered
        """
        type_node = self.override_type or self.types.get(self.column.type)

        if self.column.is_array:
            type_node = ts.ArrayType(type_node)

        if self.column.nullable:
            type_node = ts.union(type_node, ts.NULL)

        return type_node

    def build_node(self) -> ts.PropertySignature:
        return ts.PropertySignature(name=self.field_name, type=self.build_type())
