# ============================================================================
# TYPESCRIPT PRINTER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Text serialization of the declaration tree
# PURPOSE: Turn ts_ast statements into TypeScript source text
# CREATED: 19 OCT 2026
# EXPORTS: TypeScriptPrinter
# ============================================================================
"""
TypeScript Printer

Serializes declaration nodes to source text. Formatting follows the
TypeScript compiler's own printer: four-space indentation, double-quoted
strings, one statement after another with no blank lines.

Usage:
    printer = TypeScriptPrinter(PrinterOptions(new_line="\\n"))
    text = printer.print_file(statements)
"""

import json
import re
from typing import Iterable, Optional

from core.config import PrinterOptions
from core.schema import ts_ast as ts

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """True if `name` can be emitted without quotes."""
    return bool(_IDENTIFIER_RE.match(name))


def quote(value: str) -> str:
    return json.dumps(value)


def property_name(name: str) -> str:
    return name if is_identifier(name) else quote(name)


class TypeScriptPrinter:
    """
    Print declaration nodes as TypeScript.

    Stateless apart from its options; one instance can print any number
    of files.
    """

    def __init__(self, options: Optional[PrinterOptions] = None):
        self.options = options or PrinterOptions()

    # =========================================================================
    # FILE
    # =========================================================================

    def print_file(self, statements: Iterable[ts.Statement]) -> str:
        """
        Print an ordered sequence of statements as one module.

        Returns:
            Source text terminated by a newline, or "" for no statements
        """
        printed = []
        for statement in statements:
            if isinstance(statement, ts.Comment) and self.options.remove_comments:
                continue
            printed.append(self.print_statement(statement))

        if not printed:
            return ""

        text = "\n".join(printed) + "\n"
        if self.options.new_line != "\n":
            text = text.replace("\n", self.options.new_line)
        return text

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def print_statement(self, node: ts.Statement) -> str:
        export = "export " if getattr(node, "exported", False) else ""

        if isinstance(node, ts.InterfaceDeclaration):
            body = "".join(
                f"{self._indent(1)}{self._member(member, 1)};\n" for member in node.members
            )
            return f"{export}interface {node.name.text} {{\n{body}}}"

        if isinstance(node, ts.EnumDeclaration):
            members = ",\n".join(
                f"{self._indent(1)}{property_name(member.name)} = {quote(member.initializer.value)}"
                for member in node.members
            )
            body = f"{members}\n" if members else ""
            return f"{export}enum {node.name.text} {{\n{body}}}"

        if isinstance(node, ts.TypeAliasDeclaration):
            params = f"<{', '.join(node.type_parameters)}>" if node.type_parameters else ""
            return f"{export}type {node.name.text}{params} = {self.print_type(node.type)};"

        if isinstance(node, ts.ConstDeclaration):
            return f"{export}const {node.name.text} = {self.print_expression(node.initializer)};"

        if isinstance(node, ts.ImportDeclaration):
            return f"import {{ {', '.join(node.names)} }} from {quote(node.module)};"

        if isinstance(node, ts.Comment):
            return f"// {node.text}"

        raise TypeError(f"Cannot print statement of type {type(node).__name__}")

    # =========================================================================
    # TYPES
    # =========================================================================

    def print_type(self, node: ts.TypeNode, depth: int = 0) -> str:
        if isinstance(node, ts.KeywordType):
            return node.keyword

        if isinstance(node, ts.TypeReference):
            if node.type_arguments:
                args = ", ".join(self.print_type(arg, depth) for arg in node.type_arguments)
                return f"{node.name}<{args}>"
            return node.name

        if isinstance(node, ts.ArrayType):
            element = self.print_type(node.element, depth)
            # Array binds tighter than union
            if isinstance(node.element, ts.UnionType):
                return f"({element})[]"
            return f"{element}[]"

        if isinstance(node, ts.UnionType):
            return " | ".join(self.print_type(member, depth) for member in node.types)

        if isinstance(node, ts.TypeLiteral):
            if not node.members:
                return "{}"
            body = "".join(
                f"{self._indent(depth + 1)}{self._member(member, depth + 1)};\n"
                for member in node.members
            )
            return f"{{\n{body}{self._indent(depth)}}}"

        raise TypeError(f"Cannot print type node of type {type(node).__name__}")

    def _member(self, node, depth: int) -> str:
        if isinstance(node, ts.PropertySignature):
            optional = "?" if node.optional else ""
            return f"{property_name(node.name)}{optional}: {self.print_type(node.type, depth)}"
        if isinstance(node, ts.IndexSignature):
            return (
                f"[{node.parameter}: {self.print_type(node.parameter_type, depth)}]: "
                f"{self.print_type(node.type, depth)}"
            )
        raise TypeError(f"Cannot print member of type {type(node).__name__}")

    # =========================================================================
    # EXPRESSIONS
    # =========================================================================

    def print_expression(self, node: ts.Expression, depth: int = 0) -> str:
        if isinstance(node, ts.Identifier):
            return node.text

        if isinstance(node, ts.StringLiteral):
            return quote(node.value)

        if isinstance(node, ts.PropertyAccess):
            return f"{self.print_expression(node.expression, depth)}.{node.name}"

        if isinstance(node, ts.Call):
            args = ", ".join(self.print_expression(arg, depth) for arg in node.arguments)
            return f"{self.print_expression(node.callee, depth)}({args})"

        if isinstance(node, ts.ArrowFunction):
            return f"() => {self.print_expression(node.body, depth)}"

        if isinstance(node, ts.ObjectLiteral):
            if not node.properties:
                return "{}"
            body = ",\n".join(
                f"{self._indent(depth + 1)}{property_name(prop.name)}: "
                f"{self.print_expression(prop.initializer, depth + 1)}"
                for prop in node.properties
            )
            return f"{{\n{body}\n{self._indent(depth)}}}"

        if isinstance(node, ts.AsConst):
            return f"{self.print_expression(node.expression, depth)} as const"

        raise TypeError(f"Cannot print expression of type {type(node).__name__}")

    def _indent(self, depth: int) -> str:
        return self.options.indent * depth


__all__ = [
    "TypeScriptPrinter",
    "is_identifier",
    "property_name",
]
