# ============================================================================
# GENERATION ORCHESTRATOR
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Builder sequencing and module assembly
# PURPOSE: Drive one schema snapshot through the builders into source text
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Orchestrator

One build() run walks a fixed sequence of phases:

    IDLE -> ENUM_PHASE -> TABLE_PHASE -> ASSEMBLED

1. ENUM_PHASE: fetch enums, register each as kind ENUM, stage an EnumBuilder
2. TABLE_PHASE: fetch tables, register each as kind TABLE and stage its
   interface; stage insert variants (insertable tables only), type
   objects and zod schemas (once per table name)
3. ASSEMBLED: build every staged node, prepend the utility types, print

Every enum is registered before any table is staged, so column lookups
against enums resolve. A lookup of anything never registered raises
UnknownTypeError and aborts the run; output is all-or-nothing.

Usage:
    async with Generator(schema, GeneratorOptions(transform_columns="camel")) as generator:
        source = await generator.build()
"""

import uuid
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from core.config import GeneratorOptions, PrinterOptions
from core.contracts import SchemaSource, TypeKind
from core.logging import ComponentType, get_logger, log_context
from core.schema import ts_ast as ts
from core.schema.builders import (
    EnumBuilder,
    NodeBuilder,
    TableBuilder,
    TypeObjectBuilder,
    UTILITY_TYPE_NAMES,
    UtilityTypesBuilder,
    ZodSchemaBuilder,
)
from core.schema.printer import TypeScriptPrinter
from core.schema.registry import TypeRegistry

logger = get_logger(__name__, ComponentType.GENERATOR)


class GeneratorState(str, Enum):
    """Phases of a single build() run."""
    IDLE = "idle"
    ENUM_PHASE = "enum_phase"
    TABLE_PHASE = "table_phase"
    ASSEMBLED = "assembled"


class Generator:
    """
    Sequences builders over one schema snapshot.

    The registry is recreated for every build() call; options and
    transformations are fixed at construction.
    """

    def __init__(
        self,
        schema: SchemaSource,
        options: Optional[GeneratorOptions] = None,
        printer_options: Optional[PrinterOptions] = None,
    ):
        """
        Initialize generator.

        Args:
            schema: Schema source (enums, tables, disconnect)
            options: Generation flags and naming strategies
            printer_options: Line endings and comment retention

        Raises:
            ConfigurationError if an unknown case strategy is configured
        """
        self.schema = schema
        self.options = options or GeneratorOptions()
        self.transform = self.options.to_transformations()
        self.printer = TypeScriptPrinter(printer_options or PrinterOptions())

        self.types = TypeRegistry(reserved=UTILITY_TYPE_NAMES)
        self.state = GeneratorState.IDLE
        self._destroyed = False

        # Metrics for the last run
        self.stats: Dict[str, int] = {}

    async def __aenter__(self) -> "Generator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.destroy()

    async def destroy(self) -> None:
        """Release the schema source's connection (once)."""
        if self._destroyed:
            return
        self._destroyed = True
        await self.schema.disconnect()
        logger.debug("Schema source disconnected")

    # =========================================================================
    # BUILD
    # =========================================================================

    async def build(self) -> str:
        """
        Run all phases and return the printed module.

        Raises:
            UnknownTypeError, DuplicateRegistrationError, or any schema
            source error; nothing is returned on failure
        """
        run_id = uuid.uuid4().hex[:12]
        self.types = TypeRegistry(reserved=UTILITY_TYPE_NAMES)
        self.state = GeneratorState.IDLE
        self.stats = {"enums": 0, "tables": 0, "declarations": 0}

        staged: List[NodeBuilder] = []

        with log_context(run_id=run_id):
            try:
                await self._build_enums(staged)
                await self._build_tables(staged)
                statements = self._assemble(staged)
            except Exception as e:
                logger.error(str(e))
                raise

            self.state = GeneratorState.ASSEMBLED
            logger.info(
                f"Generated {len(statements)} declarations "
                f"({self.stats['enums']} enums, {self.stats['tables']} tables)"
            )
            return self.printer.print_file(statements)

    async def _build_enums(self, builders: List[NodeBuilder]) -> None:
        self.state = GeneratorState.ENUM_PHASE
        with log_context(phase=self.state.value):
            enums = await self.schema.get_enums()
            logger.info(f"Fetched {len(enums)} enums")

            for enum_info in enums:
                self.stats["enums"] += 1
                if not self.options.gen_enums:
                    continue

                with log_context(entity=enum_info.name):
                    builder = EnumBuilder(enum_info, self.types, self.transform)
                    self.types.add(builder.name, builder.type_name().text, TypeKind.ENUM)
                    builders.append(builder)
                    logger.debug("Staged enum")

    async def _build_tables(self, builders: List[NodeBuilder]) -> None:
        self.state = GeneratorState.TABLE_PHASE
        with log_context(phase=self.state.value):
            tables = await self.schema.get_tables()
            logger.info(f"Fetched {len(tables)} tables")

            processed_table_names: Set[str] = set()

            for table_info in tables:
                self.stats["tables"] += 1
                with log_context(entity=table_info.name):
                    if self.options.gen_tables:
                        builder = TableBuilder(table_info, self.types, self.transform)
                        self.types.add(builder.name, builder.type_name().text, TypeKind.TABLE)
                        builders.append(builder)

                    if self.options.gen_insert_types and table_info.can_insert:
                        builders.append(TableBuilder.insert_type(table_info, self.types, self.transform))

                    if self.options.gen_type_objects:
                        builders.append(TypeObjectBuilder(table_info, self.types, self.transform))

                    # Schemas are consts: a second declaration would not compile
                    if self.options.gen_schema_objects and table_info.name not in processed_table_names:
                        builders.append(ZodSchemaBuilder(table_info, self.types, self.transform))
                        processed_table_names.add(table_info.name)

                    logger.debug("Staged table", extra={"columns": len(table_info.columns)})

    def _assemble(self, builders: List[NodeBuilder]) -> List[ts.Statement]:
        statements: List[ts.Statement] = list(
            UtilityTypesBuilder(include_zod_import=self.options.gen_schema_objects).build_nodes()
        )
        for builder in builders:
            with log_context(entity=builder.name, builder=type(builder).__name__):
                statements.append(builder.build_node())

        self.stats["declarations"] = len(builders)
        return statements

    def get_status(self) -> Dict[str, Any]:
        """Current phase and last-run counters."""
        return {
            "state": self.state.value,
            "registered_types": len(self.types.names(TypeKind.ENUM)) + len(self.types.names(TypeKind.TABLE)),
            **self.stats,
        }


__all__ = [
    "Generator",
    "GeneratorState",
]
