# ============================================================================
# TYPESCRIPT SYNTAX NODES
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Declaration tree for the emitted module
# PURPOSE: Immutable syntax nodes produced by builders, consumed by the printer
# CREATED: 19 OCT 2026
# EXPORTS: Type nodes, expression nodes, statement nodes
# ============================================================================
"""
TypeScript Syntax Nodes

A small, immutable subset of the TypeScript syntax tree: enough to
express interfaces, enums, type aliases, imports and `const` object
declarations.

Builders compose these nodes; only the printer turns them into text.
No string concatenation happens in the builders, so quoting and
precedence rules (e.g. parenthesizing a union inside an array type)
live in exactly one place.

Usage:
    from core.schema import ts_ast as ts

    field = ts.PropertySignature(
        name="tags",
        type=ts.union(ts.ArrayType(ts.STRING), ts.NULL),
    )
"""

from dataclasses import dataclass, replace
from typing import Tuple, Union


# ============================================================================
# TYPE NODES
# ============================================================================

@dataclass(frozen=True)
class KeywordType:
    """Built-in keyword type: number, string, boolean, null, unknown..."""
    keyword: str


@dataclass(frozen=True)
class TypeReference:
    """Named type, optionally generic: `Date`, `Nullable<T>`."""
    name: str
    type_arguments: Tuple["TypeNode", ...] = ()


@dataclass(frozen=True)
class ArrayType:
    """`T[]`"""
    element: "TypeNode"


@dataclass(frozen=True)
class UnionType:
    """`A | B | ...`"""
    types: Tuple["TypeNode", ...]


@dataclass(frozen=True)
class IndexSignature:
    """`[key: string]: T` inside a type literal."""
    parameter: str
    parameter_type: "TypeNode"
    type: "TypeNode"


@dataclass(frozen=True)
class PropertySignature:
    """`name?: T` inside an interface or type literal."""
    name: str
    type: "TypeNode"
    optional: bool = False

    def with_optional(self, optional: bool = True) -> "PropertySignature":
        """Copy with only the optionality flag changed."""
        return replace(self, optional=optional)


@dataclass(frozen=True)
class TypeLiteral:
    """`{ ...members }` in a type position."""
    members: Tuple[Union[PropertySignature, IndexSignature], ...]


TypeNode = Union[KeywordType, TypeReference, ArrayType, UnionType, TypeLiteral]

NUMBER = KeywordType("number")
STRING = KeywordType("string")
BOOLEAN = KeywordType("boolean")
UNKNOWN = KeywordType("unknown")
NULL = KeywordType("null")


def union(*types: TypeNode) -> UnionType:
    return UnionType(tuple(types))


# ============================================================================
# EXPRESSION NODES
# ============================================================================

@dataclass(frozen=True)
class Identifier:
    """Bare identifier, used both as expression and as declaration name."""
    text: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class PropertyAccess:
    """`expression.name`"""
    expression: "Expression"
    name: str


@dataclass(frozen=True)
class Call:
    """`callee(arg, ...)`"""
    callee: "Expression"
    arguments: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class ArrowFunction:
    """Parameterless arrow function with an expression body: `() => body`."""
    body: "Expression"


@dataclass(frozen=True)
class PropertyAssignment:
    """`name: initializer` inside an object literal."""
    name: str
    initializer: "Expression"


@dataclass(frozen=True)
class ObjectLiteral:
    properties: Tuple[PropertyAssignment, ...] = ()


@dataclass(frozen=True)
class AsConst:
    """`expression as const`"""
    expression: "Expression"


Expression = Union[Identifier, StringLiteral, PropertyAccess, Call, ArrowFunction, ObjectLiteral, AsConst]


def call_method(target: "Expression", method: str, *arguments: "Expression") -> Call:
    """`target.method(arguments...)`"""
    return Call(PropertyAccess(target, method), tuple(arguments))


# ============================================================================
# STATEMENT NODES
# ============================================================================

@dataclass(frozen=True)
class ImportDeclaration:
    """`import { a, b } from "module";`"""
    names: Tuple[str, ...]
    module: str


@dataclass(frozen=True)
class InterfaceDeclaration:
    name: Identifier
    members: Tuple[PropertySignature, ...]
    exported: bool = True


@dataclass(frozen=True)
class TypeAliasDeclaration:
    """`type Name<T, ...> = type;`"""
    name: Identifier
    type: TypeNode
    type_parameters: Tuple[str, ...] = ()
    exported: bool = True


@dataclass(frozen=True)
class EnumMember:
    name: str
    initializer: StringLiteral


@dataclass(frozen=True)
class EnumDeclaration:
    name: Identifier
    members: Tuple[EnumMember, ...]
    exported: bool = True


@dataclass(frozen=True)
class ConstDeclaration:
    """`const name = initializer;`"""
    name: Identifier
    initializer: Expression
    exported: bool = True


@dataclass(frozen=True)
class Comment:
    """Standalone `//` comment line; dropped when the printer removes comments."""
    text: str


Statement = Union[
    ImportDeclaration,
    InterfaceDeclaration,
    TypeAliasDeclaration,
    EnumDeclaration,
    ConstDeclaration,
    Comment,
]
