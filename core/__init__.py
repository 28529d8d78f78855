# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core module initialization
# PURPOSE: Export contracts, configuration and the generator
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import (
    SchemaSource,
    TypeKind,
    TableVariant,
    ColumnInfo,
    TableInfo,
    EnumInfo,
)
from core.casing import Transformations
from core.config import GeneratorOptions, PrinterOptions, ConfigurationError
from core.schema import (
    Generator,
    TypeRegistry,
    UnknownTypeError,
    DuplicateRegistrationError,
)

__all__ = [
    # Contracts
    "SchemaSource",
    "TypeKind",
    "TableVariant",
    "ColumnInfo",
    "TableInfo",
    "EnumInfo",
    # Configuration
    "Transformations",
    "GeneratorOptions",
    "PrinterOptions",
    "ConfigurationError",
    # Generation
    "Generator",
    "TypeRegistry",
    "UnknownTypeError",
    "DuplicateRegistrationError",
]
