#!/usr/bin/env python
# ============================================================================
# TYPE GENERATION SCRIPT
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# PURPOSE: Generate TypeScript declarations from a PostgreSQL schema
# USAGE:
#   python scripts/generate_types.py                      # Print to stdout
#   python scripts/generate_types.py -o src/db/types.ts   # Write to file
#   python scripts/generate_types.py --config pgtypegen.yaml --schema app
# ============================================================================

import sys
import os
import argparse
import asyncio
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from __version__ import __version__
from core.casing import CASE_FUNCTIONS
from core.config import ConfigurationError, GeneratorOptions
from core.logging import ComponentType, configure_logging, get_logger
from core.schema import Generator, TypeRegistryError
from infrastructure import PostgresSchema

logger = get_logger("scripts.generate_types", ComponentType.CLI)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate TypeScript types from a PostgreSQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_types.py                         # Print to stdout
  python scripts/generate_types.py -o types.ts             # Write to file
  python scripts/generate_types.py --transform-columns camel --no-type-objects

Environment Variables:
  DATABASE_URL          Full PostgreSQL connection string
  POSTGRES_HOST         Database host (default: localhost)
  POSTGRES_DB           Database name (default: postgres)
  POSTGRES_USER         Database user (default: postgres)
  POSTGRES_PASSWORD     Database password
  POSTGRES_PORT         Database port (default: 5432)
  PGTYPEGEN_*           Any generator option, e.g. PGTYPEGEN_GEN_ENUMS=false
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--connection",
        type=str,
        help="PostgreSQL connection string (overrides environment)"
    )
    parser.add_argument(
        "--schema",
        type=str,
        default="public",
        help="PostgreSQL schema to introspect (default: public)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with generator options (environment is used when omitted)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )

    flags = parser.add_argument_group("generation")
    for flag, dest in (
        ("--no-enums", "gen_enums"),
        ("--no-insert-types", "gen_insert_types"),
        ("--no-tables", "gen_tables"),
        ("--no-type-objects", "gen_type_objects"),
        ("--no-schema-objects", "gen_schema_objects"),
    ):
        flags.add_argument(flag, dest=dest, action="store_const", const=False, default=None)

    naming = parser.add_argument_group("naming")
    choices = sorted(CASE_FUNCTIONS)
    naming.add_argument("--transform-columns", choices=choices)
    naming.add_argument("--transform-enum-members", choices=choices)
    naming.add_argument("--transform-type-names", choices=choices)

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON"
    )
    return parser


def resolve_options(args: argparse.Namespace) -> GeneratorOptions:
    """Config file (or environment), then CLI flags on top."""
    base = GeneratorOptions.from_yaml(args.config) if args.config else GeneratorOptions.from_env()
    return base.with_overrides(
        gen_enums=args.gen_enums,
        gen_insert_types=args.gen_insert_types,
        gen_tables=args.gen_tables,
        gen_type_objects=args.gen_type_objects,
        gen_schema_objects=args.gen_schema_objects,
        transform_columns=args.transform_columns,
        transform_enum_members=args.transform_enum_members,
        transform_type_names=args.transform_type_names,
    )


async def run(args: argparse.Namespace, options: GeneratorOptions) -> str:
    schema = await PostgresSchema.connect(args.connection, schema=args.schema)
    async with Generator(schema, options) as generator:
        return await generator.build()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else "INFO",
        json_output=args.json_logs,
    )

    try:
        options = resolve_options(args)
    except (ConfigurationError, OSError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        source = asyncio.run(run(args, options))
    except TypeRegistryError:
        # Already logged by the generator
        return 1
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(source, encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(source)
    return 0


if __name__ == "__main__":
    sys.exit(main())
