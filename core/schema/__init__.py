# ============================================================================
# SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - TypeScript generation from database schema
# PURPOSE: Registry, builders, printer and orchestrator
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.schema import ts_ast
from core.schema.registry import (
    TypeRegistry,
    RegistryEntry,
    TypeRegistryError,
    UnknownTypeError,
    DuplicateRegistrationError,
    BUILTIN_TYPES,
)
from core.schema.printer import TypeScriptPrinter
from core.schema.builders import (
    NodeBuilder,
    ColumnBuilder,
    TableBuilder,
    EnumBuilder,
    TypeObjectBuilder,
    ZodSchemaBuilder,
    UtilityTypesBuilder,
)
from core.schema.generator import Generator, GeneratorState

__all__ = [
    # Orchestrator
    "Generator",
    "GeneratorState",
    # Registry
    "TypeRegistry",
    "RegistryEntry",
    "TypeRegistryError",
    "UnknownTypeError",
    "DuplicateRegistrationError",
    "BUILTIN_TYPES",
    # Builders
    "NodeBuilder",
    "ColumnBuilder",
    "TableBuilder",
    "EnumBuilder",
    "TypeObjectBuilder",
    "ZodSchemaBuilder",
    "UtilityTypesBuilder",
    # Output
    "TypeScriptPrinter",
    "ts_ast",
]
