# ============================================================================
# TYPE REGISTRY
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Schema type name registration and lookup
# PURPOSE: Resolve schema-level type names to output type references
# CREATED: 19 OCT 2026
# ============================================================================
"""
Type Registry

Run-scoped lookup table from schema-level type names (`int4`,
`order_status`, `users`) to the TypeScript type used when a column
references them.

Design:
- Seeded with the PostgreSQL built-in scalar types on construction
- Enums and tables are registered by the generator as it walks the schema
- Registered enums and tables shadow builtins of the same name
- Fail-fast on duplicate registration or a second claim on an identifier
- Fail-fast on lookup of an unregistered name (never a silent default)
- Append-only: there is no removal
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from core.contracts import TypeKind
from core.schema import ts_ast as ts

logger = logging.getLogger(__name__)


# ============================================================================
# BUILT-IN TYPES
# ============================================================================

DATE = ts.TypeReference("Date")
JSON = ts.TypeReference("Json")

# udt names and their information_schema spellings
BUILTIN_TYPES: Dict[str, ts.TypeNode] = {
    # Numbers
    "int2": ts.NUMBER,
    "int4": ts.NUMBER,
    "int": ts.NUMBER,
    "integer": ts.NUMBER,
    "smallint": ts.NUMBER,
    "float4": ts.NUMBER,
    "float8": ts.NUMBER,
    "real": ts.NUMBER,
    "double precision": ts.NUMBER,
    "oid": ts.NUMBER,
    # 64-bit and arbitrary precision come back from drivers as strings
    "int8": ts.STRING,
    "bigint": ts.STRING,
    "numeric": ts.STRING,
    "decimal": ts.STRING,
    "money": ts.STRING,

    # Strings
    "text": ts.STRING,
    "varchar": ts.STRING,
    "character varying": ts.STRING,
    "bpchar": ts.STRING,
    "char": ts.STRING,
    "character": ts.STRING,
    "name": ts.STRING,
    "citext": ts.STRING,
    "uuid": ts.STRING,
    "inet": ts.STRING,
    "cidr": ts.STRING,
    "macaddr": ts.STRING,
    "time": ts.STRING,
    "timetz": ts.STRING,
    "time without time zone": ts.STRING,
    "time with time zone": ts.STRING,
    "interval": ts.STRING,
    "bytea": ts.STRING,
    "tsvector": ts.STRING,
    "xml": ts.STRING,

    # Booleans
    "bool": ts.BOOLEAN,
    "boolean": ts.BOOLEAN,

    # Dates
    "date": DATE,
    "timestamp": DATE,
    "timestamptz": DATE,
    "timestamp without time zone": DATE,
    "timestamp with time zone": DATE,

    # JSON
    "json": JSON,
    "jsonb": JSON,
}


# ============================================================================
# EXCEPTIONS
# ============================================================================

class TypeRegistryError(Exception):
    """Base exception for type registry errors."""
    pass


class UnknownTypeError(TypeRegistryError):
    """Raised when a schema-level type name was never registered."""
    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        super().__init__(f"Unknown type: {schema_name}")


class DuplicateRegistrationError(TypeRegistryError):
    """
    Raised when a registration would make two declarations share a name.

    Either the schema-level name was registered before, or its output
    identifier is already taken (by another schema name that transforms
    to the same identifier, or by a reserved helper type).
    """
    def __init__(self, schema_name: str, identifier: str, taken_by: str):
        self.schema_name = schema_name
        self.identifier = identifier
        self.taken_by = taken_by
        super().__init__(
            f"Type already registered: {schema_name} -> {identifier} "
            f"(taken by {taken_by})"
        )


# ============================================================================
# REGISTRY
# ============================================================================

@dataclass(frozen=True)
class RegistryEntry:
    """What a schema-level name resolves to."""
    identifier: str
    kind: TypeKind
    type_node: ts.TypeNode


class TypeRegistry:
    """
    Write-once map of schema type names.

    Registered enums and tables shadow builtins of the same name: a
    table called `name` lives in the user schema, the builtin `name`
    in pg_catalog. Identifiers are unique across registered entries
    and reserved names (builtin type references plus `reserved`).

    Usage:
        types = TypeRegistry()
        types.add("order_status", "OrderStatus", TypeKind.ENUM)
        types.get("order_status")   # TypeReference("OrderStatus")
        types.get("int4")           # KeywordType("number")
    """

    def __init__(
        self,
        builtins: Optional[Mapping[str, ts.TypeNode]] = None,
        reserved: Iterable[str] = (),
    ):
        seed = BUILTIN_TYPES if builtins is None else builtins
        self._builtins: Dict[str, RegistryEntry] = {
            schema_name: RegistryEntry(
                identifier=_type_node_name(type_node),
                kind=TypeKind.BUILTIN,
                type_node=type_node,
            )
            for schema_name, type_node in seed.items()
        }
        self._entries: Dict[str, RegistryEntry] = {}

        # identifier -> what owns it
        self._identifiers: Dict[str, str] = {
            entry.identifier: f"builtin type {entry.identifier}"
            for entry in self._builtins.values()
            if isinstance(entry.type_node, ts.TypeReference)
        }
        for name in reserved:
            self._identifiers[name] = f"helper type {name}"

    def add(self, schema_name: str, identifier: str, kind: TypeKind) -> None:
        """
        Register a schema-level name.

        Raises:
            DuplicateRegistrationError if the name is already registered
            or the identifier is already taken
        """
        kind = TypeKind(kind)

        existing = self._entries.get(schema_name)
        if existing is not None:
            raise DuplicateRegistrationError(
                schema_name, identifier, f"{existing.kind.value} {schema_name}"
            )

        owner = self._identifiers.get(identifier)
        if owner is not None:
            raise DuplicateRegistrationError(schema_name, identifier, owner)

        self._entries[schema_name] = RegistryEntry(
            identifier=identifier,
            kind=kind,
            type_node=ts.TypeReference(identifier),
        )
        self._identifiers[identifier] = f"{kind.value} {schema_name}"
        logger.debug(f"Registered {kind.value}: {schema_name} -> {identifier}")

    def _entry(self, schema_name: str) -> RegistryEntry:
        entry = self._entries.get(schema_name) or self._builtins.get(schema_name)
        if entry is None:
            raise UnknownTypeError(schema_name)
        return entry

    def get(self, schema_name: str) -> ts.TypeNode:
        """
        Resolve a schema-level name to a type reference.

        Raises:
            UnknownTypeError if the name was never registered
        """
        return self._entry(schema_name).type_node

    def get_identifier(self, schema_name: str) -> ts.Identifier:
        """
        Resolve a schema-level name to its bare output identifier.

        Raises:
            UnknownTypeError if the name was never registered
        """
        return ts.Identifier(self._entry(schema_name).identifier)

    def get_kind(self, schema_name: str) -> TypeKind:
        """
        Raises:
            UnknownTypeError if the name was never registered
        """
        return self._entry(schema_name).kind

    def names(self, kind: Optional[TypeKind] = None) -> List[str]:
        """Resolvable schema-level names, optionally filtered by kind."""
        return [name for name in self if kind is None or self.get_kind(name) == kind]

    def __contains__(self, schema_name: object) -> bool:
        return schema_name in self._entries or schema_name in self._builtins

    def __len__(self) -> int:
        return len(self._builtins.keys() | self._entries.keys())

    def __iter__(self) -> Iterator[str]:
        yield from self._entries
        yield from (name for name in self._builtins if name not in self._entries)


def _type_node_name(type_node: ts.TypeNode) -> str:
    if isinstance(type_node, ts.KeywordType):
        return type_node.keyword
    if isinstance(type_node, ts.TypeReference):
        return type_node.name
    raise TypeError(f"Built-in types must be keywords or references, got {type(type_node).__name__}")


__all__ = [
    "TypeRegistry",
    "RegistryEntry",
    "TypeRegistryError",
    "UnknownTypeError",
    "DuplicateRegistrationError",
    "BUILTIN_TYPES",
]
