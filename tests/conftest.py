"""
pytest configuration for generator tests.

Adds the project root to sys.path so that 'from core.xxx import ...'
works without installing the package, and provides shared schema
fixtures.
"""

import sys
from pathlib import Path
from typing import List, Sequence

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.casing import Transformations
from core.contracts import ColumnInfo, EnumInfo, TableInfo
from core.schema.registry import TypeRegistry


class FakeSchema:
    """In-memory SchemaSource recording the calls made against it."""

    def __init__(
        self,
        enums: Sequence[EnumInfo] = (),
        tables: Sequence[TableInfo] = (),
        fail_on: str = "",
    ):
        self.enums = list(enums)
        self.tables = list(tables)
        self.fail_on = fail_on
        self.calls: List[str] = []

    async def get_enums(self) -> List[EnumInfo]:
        self.calls.append("get_enums")
        if self.fail_on == "get_enums":
            raise ConnectionError("enum query failed")
        return self.enums

    async def get_tables(self) -> List[TableInfo]:
        self.calls.append("get_tables")
        if self.fail_on == "get_tables":
            raise ConnectionError("table query failed")
        return self.tables

    async def disconnect(self) -> None:
        self.calls.append("disconnect")


@pytest.fixture
def status_enum() -> EnumInfo:
    return EnumInfo(name="status", values=("active", "inactive"))


@pytest.fixture
def users_table() -> TableInfo:
    return TableInfo(
        name="users",
        can_insert=True,
        columns=(
            ColumnInfo(name="id", type="int4", order=1),
            ColumnInfo(name="name", type="text", order=2),
            ColumnInfo(name="status", type="status", order=3),
            ColumnInfo(name="created_at", type="timestamp", has_default=True, order=4),
        ),
    )


@pytest.fixture
def transform() -> Transformations:
    return Transformations.from_names(columns="camel", enum_members="pascal", type_names="pascal")


@pytest.fixture
def types() -> TypeRegistry:
    return TypeRegistry()


@pytest.fixture
def fake_schema_factory():
    """Build FakeSchema instances without importing conftest directly."""
    return FakeSchema
