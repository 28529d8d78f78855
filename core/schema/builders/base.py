# ============================================================================
# NODE BUILDER BASE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Builder plugin interface
# PURPOSE: Shared contract for every schema-entity -> declaration builder
# CREATED: 19 OCT 2026
# ============================================================================
"""
Node Builder Base

Every builder turns one schema entity into one declaration node. It holds
the entity's raw name, the run's TypeRegistry and the Transformations,
and exposes build_node().
"""

from abc import ABC, abstractmethod
from typing import Any

from core.casing import Transformations, to_identifier
from core.schema import ts_ast as ts
from core.schema.registry import TypeRegistry


class NodeBuilder(ABC):
    """
    Base class for declaration builders.

    Subclasses must implement:
    - build_node(): Produce the declaration node
    """

    def __init__(self, name: str, types: TypeRegistry, transform: Transformations):
        self.name = name
        self.types = types
        self.transform = transform

    @abstractmethod
    def build_node(self) -> Any:
        """Build the declaration node for this entity."""
        pass

    def type_name(self) -> ts.Identifier:
        """
        Output identifier for this entity.

        Uses the same function the generator registers with, so
        self-references and cross-references agree exactly.
        """
        return ts.Identifier(to_identifier(self.transform.type_names(self.name)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
