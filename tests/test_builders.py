# ============================================================================
# BUILDER TESTS
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Tests - Declaration builders
# PURPOSE: Verify each builder's node shape against the registry
# CREATED: 19 OCT 2026
# ============================================================================
"""
Builder Tests

Covers:
1. ColumnBuilder type resolution, array/nullable ordering, override
2. TableBuilder member ordering and naming
3. Insert variant optionality and suffix
4. EnumBuilder, TypeObjectBuilder, ZodSchemaBuilder, UtilityTypesBuilder

Run with:
    pytest tests/test_builders.py -v
"""

import pytest

from core.casing import IDENTITY
from core.contracts import ColumnInfo, EnumInfo, TableInfo, TableVariant, TypeKind
from core.schema import ts_ast as ts
from core.schema.builders import (
    ColumnBuilder,
    EnumBuilder,
    TableBuilder,
    TypeObjectBuilder,
    UtilityTypesBuilder,
    ZodSchemaBuilder,
)
from core.schema.printer import TypeScriptPrinter
from core.schema.registry import UnknownTypeError


@pytest.fixture
def printer():
    return TypeScriptPrinter()


@pytest.fixture
def registered(types, status_enum, users_table, transform):
    """Registry with the status enum and users table registered."""
    types.add(status_enum.name, transform.type_names(status_enum.name), TypeKind.ENUM)
    types.add(users_table.name, transform.type_names(users_table.name), TypeKind.TABLE)
    return types


# ============================================================================
# COLUMN BUILDER
# ============================================================================


class TestColumnBuilder:
    def test_scalar(self, types, transform):
        column = ColumnInfo(name="created_at", type="timestamptz")
        node = ColumnBuilder(column, types, transform).build_node()
        assert node == ts.PropertySignature("createdAt", ts.TypeReference("Date"))
        assert node.optional is False

    def test_identity_transform_keeps_name(self, types):
        column = ColumnInfo(name="created_at", type="text")
        node = ColumnBuilder(column, types, IDENTITY).build_node()
        assert node.name == "created_at"

    def test_array(self, types, transform):
        column = ColumnInfo(name="tags", type="text", is_array=True)
        node = ColumnBuilder(column, types, transform).build_node()
        assert node.type == ts.ArrayType(ts.STRING)

    def test_nullable(self, types, transform):
        column = ColumnInfo(name="bio", type="text", nullable=True)
        node = ColumnBuilder(column, types, transform).build_node()
        assert node.type == ts.union(ts.STRING, ts.NULL)

    def test_nullable_array_wraps_array_first(self, types, transform, printer):
        column = ColumnInfo(name="tags", type="text", is_array=True, nullable=True)
        node = ColumnBuilder(column, types, transform).build_node()

        assert node.type == ts.union(ts.ArrayType(ts.STRING), ts.NULL)
        assert printer.print_type(node.type) == "string[] | null"
        assert "(string | null)[]" not in printer.print_type(node.type)

    def test_enum_reference(self, registered, transform):
        column = ColumnInfo(name="status", type="status")
        node = ColumnBuilder(column, registered, transform).build_node()
        assert node.type == ts.TypeReference("Status")

    def test_unknown_type(self, types, transform):
        column = ColumnInfo(name="status", type="status")
        with pytest.raises(UnknownTypeError):
            ColumnBuilder(column, types, transform).build_node()

    def test_override_type_skips_lookup(self, types, transform):
        column = ColumnInfo(name="status", type="not_registered", nullable=True)
        builder = ColumnBuilder(column, types, transform, override_type=ts.TypeReference("Custom"))
        assert builder.build_node().type == ts.union(ts.TypeReference("Custom"), ts.NULL)


# ============================================================================
# TABLE BUILDER
# ============================================================================


class TestTableBuilder:
    def test_one_field_per_column(self, registered, users_table, transform):
        node = TableBuilder(users_table, registered, transform).build_node()

        assert isinstance(node, ts.InterfaceDeclaration)
        assert node.name == ts.Identifier("Users")
        assert node.exported is True
        assert [m.name for m in node.members] == ["id", "name", "status", "createdAt"]
        assert not any(m.optional for m in node.members)

    def test_members_follow_declared_order(self, types, transform):
        table = TableInfo(name="events", columns=(
            ColumnInfo(name="c", type="text", order=3),
            ColumnInfo(name="a", type="text", order=1),
            ColumnInfo(name="b", type="text", order=2),
        ))
        node = TableBuilder(table, types, transform).build_node()
        assert [m.name for m in node.members] == ["a", "b", "c"]

    def test_type_name_matches_registration(self, registered, users_table, transform):
        builder = TableBuilder(users_table, registered, transform)
        assert builder.type_name() == registered.get_identifier("users")

    def test_empty_table(self, types, transform):
        node = TableBuilder(TableInfo(name="empty"), types, transform).build_node()
        assert node.members == ()

    def test_unknown_enum_in_column(self, types, users_table, transform):
        """Building a table before its enum is registered fails."""
        with pytest.raises(UnknownTypeError) as exc_info:
            TableBuilder(users_table, types, transform).build_node()
        assert exc_info.value.schema_name == "status"


class TestInsertVariant:
    def test_name_suffix(self, registered, users_table, transform):
        node = TableBuilder.insert_type(users_table, registered, transform).build_node()
        assert node.name == ts.Identifier("Users$Insert")

    def test_default_columns_optional(self, registered, users_table, transform):
        primary = TableBuilder(users_table, registered, transform).build_node()
        insert = TableBuilder.insert_type(users_table, registered, transform).build_node()

        defaults = {"createdAt"}
        for base, variant in zip(primary.members, insert.members):
            assert base.name == variant.name
            assert base.type == variant.type
            assert base.optional is False
            assert variant.optional is (base.name in defaults)

    def test_optionality_independent_of_nullability(self, types, transform):
        table = TableInfo(name="notes", columns=(
            ColumnInfo(name="body", type="text", nullable=True, order=1),
            ColumnInfo(name="id", type="int4", has_default=True, order=2),
        ))
        insert = TableBuilder.insert_type(table, types, transform).build_node()
        body, id_ = insert.members
        assert body.optional is False
        assert body.type == ts.union(ts.STRING, ts.NULL)
        assert id_.optional is True
        assert id_.type == ts.NUMBER

    def test_variant_tag(self, types, users_table, transform):
        builder = TableBuilder.insert_type(users_table, types, transform)
        assert builder.variant is TableVariant.INSERT
        assert TableBuilder(users_table, types, transform).variant is TableVariant.PRIMARY

    def test_builder_does_not_filter_can_insert(self, types, transform):
        """The can_insert filter belongs to the generator."""
        view = TableInfo(name="active_users", can_insert=False, columns=(
            ColumnInfo(name="id", type="int4", order=1),
        ))
        builder = TableBuilder.insert_type(view, types, transform)
        assert builder.can_insert is False
        assert builder.build_node().name == ts.Identifier("ActiveUsers$Insert")


# ============================================================================
# SIBLING BUILDERS
# ============================================================================


class TestEnumBuilder:
    def test_members_transformed(self, types, status_enum, transform):
        node = EnumBuilder(status_enum, types, transform).build_node()

        assert node.name == ts.Identifier("Status")
        assert [m.name for m in node.members] == ["Active", "Inactive"]
        assert [m.initializer.value for m in node.members] == ["active", "inactive"]

    def test_labels_with_separators(self, types, transform):
        enum = EnumInfo(name="order_status", values=("in_progress", "on-hold"))
        node = EnumBuilder(enum, types, transform).build_node()
        assert node.name == ts.Identifier("OrderStatus")
        assert [m.name for m in node.members] == ["InProgress", "OnHold"]

    def test_members_made_identifiers(self, types, transform):
        enum = EnumInfo(name="place", values=("1st", "runner up"))
        node = EnumBuilder(enum, types, transform).build_node()
        assert [m.name for m in node.members] == ["_1St", "RunnerUp"]
        assert [m.initializer.value for m in node.members] == ["1st", "runner up"]

    def test_identity_members_made_identifiers(self, types):
        enum = EnumInfo(name="2fa_method", values=("sms code",))
        node = EnumBuilder(enum, types, IDENTITY).build_node()
        assert node.name == ts.Identifier("_2fa_method")
        assert node.members[0].name == "sms_code"

    def test_identity_members(self, types):
        enum = EnumInfo(name="mood", values=("happy",))
        node = EnumBuilder(enum, types, IDENTITY).build_node()
        assert node.name == ts.Identifier("mood")
        assert node.members[0].name == "happy"


class TestTypeObjectBuilder:
    def test_tags(self, registered, users_table, transform, printer):
        node = TypeObjectBuilder(users_table, registered, transform).build_node()

        assert node.name == ts.Identifier("UsersType")
        assert printer.print_statement(node) == (
            "export const UsersType = {\n"
            '    id: "number",\n'
            '    name: "string",\n'
            '    status: "Status",\n'
            '    createdAt: "Date"\n'
            "} as const;"
        )

    def test_nullable_array_tag(self, types, transform):
        table = TableInfo(name="posts", columns=(
            ColumnInfo(name="tags", type="text", is_array=True, nullable=True, order=1),
        ))
        node = TypeObjectBuilder(table, types, transform).build_node()
        prop = node.initializer.expression.properties[0]
        assert prop.initializer == ts.StringLiteral("string[] | null")


class TestZodSchemaBuilder:
    def test_object_schema(self, registered, users_table, transform, printer):
        node = ZodSchemaBuilder(users_table, registered, transform).build_node()

        assert node.name == ts.Identifier("UsersSchema")
        assert printer.print_statement(node) == (
            "export const UsersSchema = z.object({\n"
            "    id: z.number(),\n"
            "    name: z.string(),\n"
            "    status: z.nativeEnum(Status),\n"
            "    createdAt: z.date()\n"
            "});"
        )

    def test_array_nullable_and_table_reference(self, registered, transform, printer):
        table = TableInfo(name="teams", columns=(
            ColumnInfo(name="tags", type="text", is_array=True, nullable=True, order=1),
            ColumnInfo(name="owner", type="users", order=2),
            ColumnInfo(name="settings", type="jsonb", order=3),
        ))
        builder = ZodSchemaBuilder(table, registered, transform)
        tags, owner, settings = (builder.build_column_schema(c) for c in table.ordered_columns())

        assert printer.print_expression(tags) == "z.array(z.string()).nullable()"
        assert printer.print_expression(owner) == "z.lazy(() => UsersSchema)"
        assert printer.print_expression(settings) == "z.unknown()"

    def test_unknown_type(self, types, users_table, transform):
        with pytest.raises(UnknownTypeError):
            ZodSchemaBuilder(users_table, types, transform).build_node()


class TestUtilityTypesBuilder:
    def test_fixed_declarations(self, printer):
        text = printer.print_file(UtilityTypesBuilder().build_nodes())
        assert text == (
            "// This file is generated by pgtypegen. Do not edit by hand.\n"
            'import { z } from "zod";\n'
            "export type Json = string | number | boolean | null | Json[] | {\n"
            "    [key: string]: Json;\n"
            "};\n"
            "export type Nullable<T> = T | null;\n"
        )

    def test_without_zod_import(self):
        nodes = UtilityTypesBuilder(include_zod_import=False).build_nodes()
        assert not any(isinstance(node, ts.ImportDeclaration) for node in nodes)

    def test_schema_independent(self):
        assert UtilityTypesBuilder().build_nodes() == UtilityTypesBuilder().build_nodes()
