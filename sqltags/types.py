from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol, Union

import msgspec

__all__ = (
    "AdapterProtocol",
    "Arguments",
    "AsyncAdapterProtocol",
    "Named",
    "Operation",
    "Parameter",
    "Positional",
    "Query",
    "SyncAdapterProtocol",
)


class Operation(str, Enum):
    """Enumeration of query operation types, selected by the suffix of the query name."""

    INSERT_RETURNING = "insert_returning"
    INSERT_UPDATE_DELETE = "insert_update_delete"
    INSERT_UPDATE_DELETE_MANY = "insert_update_delete_many"
    SCRIPT = "script"
    SELECT_ONE_ROW = "select_one_row"
    SELECT = "select"


class Positional(msgspec.Struct, frozen=True, tag="positional"):
    """A ``?`` placeholder: takes the next positional argument."""


class Named(msgspec.Struct, frozen=True, tag="named"):
    """A ``:name`` placeholder: takes the keyword argument ``name``."""

    name: str


Parameter = Union[Positional, Named]


class Query(msgspec.Struct, frozen=True):
    """A compiled, named SQL statement."""

    name: str
    operation: Operation
    sql: str
    docs: str = ""
    params: tuple[Parameter, ...] = ()

    @property
    def query_string(self) -> str:
        return self.sql


class Arguments(msgspec.Struct, frozen=True):
    """Values supplied by a caller for one execution of a query."""

    positional: Sequence[Any] = ()
    keyword: dict[str, Any] = {}


class SyncAdapterProtocol(Protocol):
    def execute_script(self, sql: str) -> Any: ...  # pragma: no cover

    def insert_returning(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover

    def insert_update_delete(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover

    def insert_update_delete_many(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover

    def select(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover


class AsyncAdapterProtocol(Protocol):
    async def execute_script(self, sql: str) -> None: ...  # pragma: no cover

    async def insert_returning(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover

    async def insert_update_delete(self, sql: str, *parameters: Any) -> None: ...  # pragma: no cover

    async def insert_update_delete_many(self, sql: str, *parameters: Any) -> None: ...  # pragma: no cover

    async def select(self, sql: str, *parameters: Any) -> Any: ...  # pragma: no cover


AdapterProtocol = Union[SyncAdapterProtocol, AsyncAdapterProtocol]
