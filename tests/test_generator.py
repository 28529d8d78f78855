# ============================================================================
# GENERATOR TESTS
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Tests - End-to-end orchestration
# PURPOSE: Verify phase ordering, option flags, dedup and failure handling
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generator Tests

Drives Generator against an in-memory schema source.

Run with:
    pytest tests/test_generator.py -v
"""

import asyncio
import logging

import pytest

from core.config import GeneratorOptions, PrinterOptions
from core.contracts import ColumnInfo, EnumInfo, SchemaSource, TableInfo
from core.schema import Generator, GeneratorState
from core.schema.registry import DuplicateRegistrationError, UnknownTypeError


EXPECTED_USERS_MODULE = """\
// This file is generated by pgtypegen. Do not edit by hand.
import { z } from "zod";
export type Json = string | number | boolean | null | Json[] | {
    [key: string]: Json;
};
export type Nullable<T> = T | null;
export enum Status {
    Active = "active",
    Inactive = "inactive"
}
export interface Users {
    id: number;
    name: string;
    status: Status;
    createdAt: Date;
}
export interface Users$Insert {
    id: number;
    name: string;
    status: Status;
    createdAt?: Date;
}
export const UsersType = {
    id: "number",
    name: "string",
    status: "Status",
    createdAt: "Date"
} as const;
export const UsersSchema = z.object({
    id: z.number(),
    name: z.string(),
    status: z.nativeEnum(Status),
    createdAt: z.date()
});
"""


@pytest.fixture
def camel_options():
    return GeneratorOptions(transform_columns="camel")


def run_build(generator: Generator) -> str:
    return asyncio.run(generator.build())


# ============================================================================
# OUTPUT
# ============================================================================


class TestOutput:
    def test_full_module(self, fake_schema_factory, status_enum, users_table, camel_options):
        schema = fake_schema_factory([status_enum], [users_table])
        generator = Generator(schema, camel_options)

        assert run_build(generator) == EXPECTED_USERS_MODULE
        assert generator.state is GeneratorState.ASSEMBLED
        assert schema.calls == ["get_enums", "get_tables"]

    def test_fake_satisfies_contract(self, fake_schema_factory):
        assert isinstance(fake_schema_factory(), SchemaSource)

    def test_empty_schema(self, fake_schema_factory):
        source = run_build(Generator(fake_schema_factory()))
        assert source.startswith("// This file is generated by pgtypegen.")
        assert "export type Nullable<T> = T | null;" in source
        assert "interface" not in source

    def test_crlf_and_no_comments(self, fake_schema_factory, status_enum):
        generator = Generator(
            fake_schema_factory([status_enum]),
            printer_options=PrinterOptions(new_line="\r\n", remove_comments=True),
        )
        source = run_build(generator)
        assert not source.startswith("//")
        assert "\n" not in source.replace("\r\n", "")

    def test_repeat_build_is_fresh(self, fake_schema_factory, status_enum, users_table):
        """The registry is rebuilt per run, so a second build does not collide."""
        generator = Generator(fake_schema_factory([status_enum], [users_table]))
        assert run_build(generator) == run_build(generator)


class TestFlags:
    def test_view_has_no_insert_variant(self, fake_schema_factory):
        view = TableInfo(name="active_users", can_insert=False, columns=(
            ColumnInfo(name="id", type="int4", order=1),
        ))
        source = run_build(Generator(fake_schema_factory(tables=[view])))

        assert "export interface ActiveUsers {" in source
        assert "ActiveUsers$Insert" not in source
        assert "export const ActiveUsersType" in source
        assert "export const ActiveUsersSchema" in source

    def test_no_insert_types(self, fake_schema_factory, status_enum, users_table):
        options = GeneratorOptions(gen_insert_types=False)
        source = run_build(Generator(fake_schema_factory([status_enum], [users_table]), options))
        assert "$Insert" not in source
        assert "export interface Users {" in source

    def test_no_schema_objects_drops_zod_import(self, fake_schema_factory, status_enum, users_table):
        options = GeneratorOptions(gen_schema_objects=False)
        source = run_build(Generator(fake_schema_factory([status_enum], [users_table]), options))
        assert "zod" not in source
        assert "UsersSchema" not in source

    def test_no_type_objects(self, fake_schema_factory, status_enum, users_table):
        options = GeneratorOptions(gen_type_objects=False)
        source = run_build(Generator(fake_schema_factory([status_enum], [users_table]), options))
        assert "UsersType" not in source

    def test_default_columns_untransformed(self, fake_schema_factory, status_enum, users_table):
        source = run_build(Generator(fake_schema_factory([status_enum], [users_table])))
        assert "    created_at: Date;" in source
        assert "    created_at?: Date;" in source

    def test_schema_once_per_table_name(self, fake_schema_factory):
        table = TableInfo(name="events", columns=(ColumnInfo(name="id", type="int4", order=1),))
        options = GeneratorOptions(gen_tables=False)
        source = run_build(Generator(fake_schema_factory(tables=[table, table]), options))

        assert source.count("export const EventsSchema") == 1
        # Insert variants and type objects are not deduplicated
        assert source.count("export interface Events$Insert") == 2

    def test_duplicate_table_registration_fatal(self, fake_schema_factory):
        table = TableInfo(name="events")
        generator = Generator(fake_schema_factory(tables=[table, table]))
        with pytest.raises(DuplicateRegistrationError):
            run_build(generator)


class TestNaming:
    def test_names_colliding_after_transform_fatal(self, fake_schema_factory, caplog):
        id_column = (ColumnInfo(name="id", type="int4", order=1),)
        tables = [
            TableInfo(name="user_roles", columns=id_column),
            TableInfo(name="UserRoles", columns=id_column),
        ]
        generator = Generator(fake_schema_factory(tables=tables))

        with caplog.at_level(logging.ERROR):
            with pytest.raises(DuplicateRegistrationError) as exc_info:
                run_build(generator)

        assert exc_info.value.identifier == "UserRoles"
        assert any("UserRoles" in record.getMessage() for record in caplog.records)

    def test_table_named_like_builtin(self, fake_schema_factory):
        table = TableInfo(name="name", columns=(
            ColumnInfo(name="id", type="int4", order=1),
            ColumnInfo(name="label", type="text", order=2),
        ))
        source = run_build(Generator(fake_schema_factory(tables=[table])))

        assert "export interface Name {" in source
        assert "    label: string;" in source
        assert "export const NameSchema = z.object({" in source

    def test_table_named_like_helper_type_fatal(self, fake_schema_factory):
        generator = Generator(fake_schema_factory(tables=[TableInfo(name="nullable")]))
        with pytest.raises(DuplicateRegistrationError):
            run_build(generator)

    def test_leading_digits_prefixed(self, fake_schema_factory):
        rank = EnumInfo(name="rank", values=("1st", "2nd"))
        sales = TableInfo(name="2024_sales", columns=(
            ColumnInfo(name="rank", type="rank", order=1),
        ))
        source = run_build(Generator(fake_schema_factory([rank], [sales])))

        assert '    _1St = "1st",' in source
        assert '    _2Nd = "2nd"' in source
        assert "export interface _2024Sales {" in source
        assert "export interface _2024Sales$Insert {" in source
        assert "export const _2024SalesSchema" in source


# ============================================================================
# FAILURES
# ============================================================================


class TestFailures:
    def test_unregistered_enum_aborts(self, fake_schema_factory, status_enum, users_table, caplog):
        options = GeneratorOptions(gen_enums=False)
        generator = Generator(fake_schema_factory([status_enum], [users_table]), options)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(UnknownTypeError) as exc_info:
                run_build(generator)

        assert exc_info.value.schema_name == "status"
        assert any("Unknown type: status" in record.getMessage() for record in caplog.records)
        assert generator.state is not GeneratorState.ASSEMBLED

    def test_source_failure_propagates(self, fake_schema_factory, status_enum, caplog):
        schema = fake_schema_factory([status_enum], fail_on="get_tables")
        generator = Generator(schema)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(ConnectionError, match="table query failed"):
                run_build(generator)

        assert generator.state is GeneratorState.TABLE_PHASE
        assert any("table query failed" in record.getMessage() for record in caplog.records)

    def test_enums_fetched_before_tables(self, fake_schema_factory):
        schema = fake_schema_factory(fail_on="get_enums")
        with pytest.raises(ConnectionError):
            run_build(Generator(schema))
        assert schema.calls == ["get_enums"]


# ============================================================================
# LIFECYCLE
# ============================================================================


class TestLifecycle:
    def test_initial_state(self, fake_schema_factory):
        generator = Generator(fake_schema_factory())
        assert generator.state is GeneratorState.IDLE
        assert generator.get_status()["state"] == "idle"

    def test_destroy_disconnects_once(self, fake_schema_factory):
        schema = fake_schema_factory()
        generator = Generator(schema)

        async def destroy_twice():
            await generator.destroy()
            await generator.destroy()

        asyncio.run(destroy_twice())
        assert schema.calls.count("disconnect") == 1

    def test_context_manager(self, fake_schema_factory, status_enum, users_table):
        schema = fake_schema_factory([status_enum], [users_table])

        async def scenario():
            async with Generator(schema) as generator:
                return await generator.build()

        source = asyncio.run(scenario())
        assert "export enum Status" in source
        assert schema.calls[-1] == "disconnect"

    def test_context_manager_disconnects_on_failure(self, fake_schema_factory):
        schema = fake_schema_factory(fail_on="get_enums")

        async def scenario():
            async with Generator(schema) as generator:
                await generator.build()

        with pytest.raises(ConnectionError):
            asyncio.run(scenario())
        assert schema.calls == ["get_enums", "disconnect"]

    def test_status_counters(self, fake_schema_factory, status_enum, users_table):
        generator = Generator(fake_schema_factory([status_enum], [users_table]))
        run_build(generator)
        status = generator.get_status()

        assert status["state"] == "assembled"
        assert status["enums"] == 1
        assert status["tables"] == 1
        # enum, interface, insert variant, type object, schema
        assert status["declarations"] == 5
        assert status["registered_types"] == 2
