# ============================================================================
# CASE TRANSFORMATIONS
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Identifier naming conventions
# PURPOSE: Pure str -> str case functions and the frozen Transformations set
# CREATED: 19 OCT 2026
# ============================================================================
"""
Case Transformations

Converts raw database identifiers (snake_case tables, lower-case enum
labels) into the naming convention requested for the generated code.

Every function splits its input into words first, so any source
convention converts to any target convention:

    pascal("created_at")    -> "CreatedAt"
    camel("created_at")     -> "createdAt"
    snake("createdAt")      -> "created_at"
    constant("in-progress") -> "IN_PROGRESS"
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List

CaseFunction = Callable[[str], str]

# Acronym run before a capitalized word, capitalized/lower word, acronym, digits
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(value: str) -> List[str]:
    """Split an identifier on separators and case boundaries."""
    return _WORD_RE.findall(value)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def none(value: str) -> str:
    return value


def pascal(value: str) -> str:
    return "".join(_capitalize(word) for word in split_words(value))


def camel(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def snake(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def constant(value: str) -> str:
    return "_".join(word.upper() for word in split_words(value))


def kebab(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


def header(value: str) -> str:
    return "-".join(_capitalize(word) for word in split_words(value))


_NON_IDENTIFIER_RE = re.compile(r"[^A-Za-z0-9_$]")


def to_identifier(value: str) -> str:
    """
    Make a transformed name usable as a declaration name.

    Characters outside [A-Za-z0-9_$] become underscores; a leading digit
    (or an empty result) gets an underscore prefix:

        to_identifier("2024Sales")  -> "_2024Sales"
        to_identifier("order items") -> "order_items"
    """
    value = _NON_IDENTIFIER_RE.sub("_", value)
    if not value or value[0].isdigit():
        value = "_" + value
    return value


CASE_FUNCTIONS: Dict[str, CaseFunction] = {
    "none": none,
    "pascal": pascal,
    "camel": camel,
    "snake": snake,
    "constant": constant,
    "kebab": kebab,
    "header": header,
}


def get_case_function(name: str) -> CaseFunction:
    """
    Look up a case function by strategy name.

    Raises:
        KeyError if the strategy is unknown
    """
    try:
        return CASE_FUNCTIONS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown case transformation '{name}'. "
            f"Expected one of: {', '.join(sorted(CASE_FUNCTIONS))}"
        ) from None


# ============================================================================
# TRANSFORMATION SET
# ============================================================================

@dataclass(frozen=True)
class Transformations:
    """
    Naming functions applied to emitted identifiers.

    Built once by the generator and shared by reference with every builder.
    """
    columns: CaseFunction = none
    enum_members: CaseFunction = pascal
    type_names: CaseFunction = pascal

    @classmethod
    def from_names(
        cls,
        columns: str = "none",
        enum_members: str = "pascal",
        type_names: str = "pascal",
    ) -> "Transformations":
        """Create from strategy names (e.g. "camel", "none")."""
        return cls(
            columns=get_case_function(columns),
            enum_members=get_case_function(enum_members),
            type_names=get_case_function(type_names),
        )


IDENTITY = Transformations(columns=none, enum_members=none, type_names=none)


__all__ = [
    "CaseFunction",
    "CASE_FUNCTIONS",
    "Transformations",
    "IDENTITY",
    "split_words",
    "to_identifier",
    "get_case_function",
    "none",
    "pascal",
    "camel",
    "snake",
    "constant",
    "kebab",
    "header",
]
