# ============================================================================
# UTILITY TYPES BUILDER
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Fixed helper declarations
# PURPOSE: Emit the schema-independent preamble of every generated module
# CREATED: 19 OCT 2026
# ============================================================================
"""
Utility Types Builder

Emitted once per run, ahead of every schema-derived declaration:

    // This file is generated by pgtypegen. Do not edit by hand.
    import { z } from "zod";
    export type Json = string | number | boolean | null | Json[] | {
        [key: string]: Json;
    };
    export type Nullable<T> = T | null;

The zod import is only emitted when schema objects are generated.
"""

from typing import List

from core.schema import ts_ast as ts

HEADER_COMMENT = "This file is generated by pgtypegen. Do not edit by hand."

# Type aliases declared here; no table or enum may take these names
UTILITY_TYPE_NAMES = ("Json", "Nullable")


class UtilityTypesBuilder:
    """Builds the helper declarations; takes no schema input."""

    def __init__(self, include_zod_import: bool = True):
        self.include_zod_import = include_zod_import

    def build_nodes(self) -> List[ts.Statement]:
        json_ref = ts.TypeReference("Json")
        nodes: List[ts.Statement] = [ts.Comment(HEADER_COMMENT)]

        if self.include_zod_import:
            nodes.append(ts.ImportDeclaration(names=("z",), module="zod"))

        nodes.append(ts.TypeAliasDeclaration(
            name=ts.Identifier(UTILITY_TYPE_NAMES[0]),
            type=ts.union(
                ts.STRING,
                ts.NUMBER,
                ts.BOOLEAN,
                ts.NULL,
                ts.ArrayType(json_ref),
                ts.TypeLiteral((ts.IndexSignature("key", ts.STRING, json_ref),)),
            ),
        ))
        nodes.append(ts.TypeAliasDeclaration(
            name=ts.Identifier(UTILITY_TYPE_NAMES[1]),
            type=ts.union(ts.TypeReference("T"), ts.NULL),
            type_parameters=("T",),
        ))
        return nodes
