# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Default configuration values
# PURPOSE: Generation flags and naming strategies with env / YAML overrides
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for what gets generated and how identifiers are named.
These can be overridden via environment variables, a YAML file, or
CLI flags.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Validated on construction (unknown case strategies fail fast)
"""

import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from core.casing import CASE_FUNCTIONS, Transformations


ENV_PREFIX = "PGTYPEGEN_"


class ConfigurationError(ValueError):
    """Raised for unknown case strategies or malformed configuration files."""
    pass


class CaseStyle(str, Enum):
    """Naming strategies accepted by the transform_* options."""
    NONE = "none"
    PASCAL = "pascal"
    CAMEL = "camel"
    SNAKE = "snake"
    CONSTANT = "constant"
    KEBAB = "kebab"
    HEADER = "header"


def _parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"Invalid boolean value: {value!r}")


@dataclass(frozen=True)
class GeneratorOptions:
    """
    What to generate and how to name it.

    Every flag defaults to on; column names are emitted verbatim while
    enum members and type names are PascalCased.
    """
    gen_enums: bool = True
    gen_insert_types: bool = True
    gen_tables: bool = True
    gen_type_objects: bool = True
    gen_schema_objects: bool = True

    transform_columns: str = CaseStyle.NONE.value
    transform_enum_members: str = CaseStyle.PASCAL.value
    transform_type_names: str = CaseStyle.PASCAL.value

    def __post_init__(self):
        for option in ("transform_columns", "transform_enum_members", "transform_type_names"):
            value = getattr(self, option)
            normalized = value.value if isinstance(value, CaseStyle) else str(value).lower()
            if normalized not in CASE_FUNCTIONS:
                raise ConfigurationError(
                    f"{option}: unknown case transformation '{value}'. "
                    f"Expected one of: {', '.join(style.value for style in CaseStyle)}"
                )
            object.__setattr__(self, option, normalized)

    def to_transformations(self) -> Transformations:
        """Resolve the strategy names into the frozen function set."""
        return Transformations.from_names(
            columns=self.transform_columns,
            enum_members=self.transform_enum_members,
            type_names=self.transform_type_names,
        )

    def with_overrides(self, **overrides: Any) -> "GeneratorOptions":
        """Copy with the given non-None fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GeneratorOptions":
        """Create from a plain mapping, rejecting unknown keys."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key.startswith("gen_"):
                values[key] = _parse_bool(value)
            else:
                values[key] = str(value).lower()
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorOptions":
        """Create from PGTYPEGEN_* environment variables."""
        environ = os.environ if environ is None else environ
        data = {}
        for f in fields(cls):
            env_name = ENV_PREFIX + f.name.upper()
            if env_name in environ:
                data[f.name] = environ[env_name]
        return cls.from_mapping(data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "GeneratorOptions":
        """
        Load from a YAML file.

        The file holds a flat mapping of option names, e.g.:

            gen_type_objects: false
            transform_columns: camel
        """
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a mapping at top level")
        return cls.from_mapping(data)


@dataclass(frozen=True)
class PrinterOptions:
    """Text serialization settings for the emitted module."""
    new_line: str = "\n"
    remove_comments: bool = False
    indent: str = "    "


__all__ = [
    "ConfigurationError",
    "CaseStyle",
    "GeneratorOptions",
    "PrinterOptions",
    "ENV_PREFIX",
]
