# ============================================================================
# BUILDERS MODULE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Builder exports
# PURPOSE: Central export point for declaration builders
# CREATED: 19 OCT 2026
# ============================================================================

from core.schema.builders.base import NodeBuilder
from core.schema.builders.column import ColumnBuilder
from core.schema.builders.table import TableBuilder
from core.schema.builders.enums import EnumBuilder
from core.schema.builders.type_object import TypeObjectBuilder
from core.schema.builders.zod_schema import ZodSchemaBuilder
from core.schema.builders.utility_types import UTILITY_TYPE_NAMES, UtilityTypesBuilder

__all__ = [
    "NodeBuilder",
    "ColumnBuilder",
    "TableBuilder",
    "EnumBuilder",
    "TypeObjectBuilder",
    "ZodSchemaBuilder",
    "UtilityTypesBuilder",
    "UTILITY_TYPE_NAMES",
]
