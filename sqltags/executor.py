"""Run compiled queries against a storage adapter.

The executor turns the caller's positional and keyword arguments into the flat,
ordered argument list matching the placeholders of a query, then calls the
adapter method selected by the query operation.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

from sqltags.config import ExecutorConfig
from sqltags.exceptions import AdapterNotRegisteredError, MissingParameterError, UnsupportedOperationError
from sqltags.types import Arguments, Operation, Positional
from sqltags.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from sqltags.types import AdapterProtocol, Parameter, Query

__all__ = (
    "Executor",
    "collapse_single_row",
    "default_executor",
    "execute",
    "register_adapter",
    "resolve_parameters",
)

logger = get_logger("executor")

_RESULT_DISCARDED = frozenset({Operation.INSERT_UPDATE_DELETE, Operation.INSERT_UPDATE_DELETE_MANY})


def resolve_parameters(params: Sequence[Parameter], arguments: Arguments, strict: bool = True) -> list[Any]:
    """Build the ordered argument list for ``params``.

    The n-th ``?`` placeholder always takes the n-th positional argument, however
    many ``:name`` placeholders come before it.

    Args:
        params: Placeholders of a query, in textual order.
        arguments: Values supplied by the caller.
        strict: Raise on a missing value instead of binding ``None``.

    Raises:
        MissingParameterError: when ``strict`` and a placeholder has no value.

    Returns:
        One value per placeholder.
    """
    resolved: list[Any] = []
    consumed = 0
    for param in params:
        if isinstance(param, Positional):
            if consumed < len(arguments.positional):
                resolved.append(arguments.positional[consumed])
            elif strict:
                msg = f"Missing positional parameter #{consumed + 1}"
                raise MissingParameterError(msg)
            else:
                resolved.append(None)
            consumed += 1
        elif param.name in arguments.keyword:
            resolved.append(arguments.keyword[param.name])
        elif strict:
            msg = f"Missing named parameter {param.name!r}"
            raise MissingParameterError(msg)
        else:
            resolved.append(None)
    return resolved


def collapse_single_row(result: Any) -> Any:
    """Return the only row of ``result``, or ``None`` when there is not exactly one."""
    if isinstance(result, Sequence) and not isinstance(result, (str, bytes, bytearray)) and len(result) == 1:
        return result[0]
    return None


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class Executor:
    """Dispatch compiled queries to a storage adapter.

    The adapter may be given at construction or later with :meth:`register_adapter`;
    the last registration wins. Adapter methods may be coroutine functions or
    plain functions.

    Example:
        >>> executor = Executor(MyAdapter())
        >>> queries = compile_queries(sql)
        >>> blog = await executor.call(queries.get_blog, blogid=10)
    """

    __slots__ = ("_adapter", "config")

    def __init__(self, adapter: AdapterProtocol | None = None, config: ExecutorConfig | None = None) -> None:
        self._adapter = adapter
        self.config = config or ExecutorConfig()

    @property
    def adapter(self) -> AdapterProtocol | None:
        return self._adapter

    def register_adapter(self, adapter: AdapterProtocol) -> None:
        self._adapter = adapter

    async def execute(self, query: Query, arguments: Arguments | None = None) -> Any:
        """Execute ``query`` with ``arguments``.

        Raises:
            AdapterNotRegisteredError: if no adapter has been registered.
            UnsupportedOperationError: if the query operation is unknown.

        Returns:
            The adapter result for returning operations, ``None`` otherwise.
        """
        adapter = self._adapter
        if adapter is None:
            raise AdapterNotRegisteredError
        if arguments is None:
            arguments = Arguments()
        operation = query.operation
        if not isinstance(operation, Operation):
            try:
                operation = Operation(operation)
            except (ValueError, TypeError):
                raise UnsupportedOperationError(operation) from None

        if operation is Operation.SCRIPT:
            logger.debug("executing %s", query.name, extra={"query": query.name, "operation": operation.value})
            await _maybe_await(adapter.execute_script(query.sql))
            return None
        if operation is Operation.INSERT_RETURNING:
            method: Callable[..., Any] = adapter.insert_returning
        elif operation is Operation.INSERT_UPDATE_DELETE:
            method = adapter.insert_update_delete
        elif operation is Operation.INSERT_UPDATE_DELETE_MANY:
            method = adapter.insert_update_delete_many
        else:
            method = adapter.select

        params = resolve_parameters(query.params, arguments, strict=self.config.strict_parameters)
        logger.debug(
            "executing %s",
            query.name,
            extra={"query": query.name, "operation": operation.value, "parameter_count": len(params)},
        )
        result = await _maybe_await(method(query.sql, *params))

        if operation in _RESULT_DISCARDED:
            return None
        if operation is Operation.SELECT_ONE_ROW:
            return collapse_single_row(result)
        return result

    async def call(self, query: Query, *args: Any, **kwargs: Any) -> Any:
        """Execute ``query``, taking positional and keyword arguments directly."""
        return await self.execute(query, Arguments(positional=args, keyword=kwargs))

    def bind(self, query: Query) -> Callable[..., Awaitable[Any]]:
        """Build a coroutine function running ``query`` on this executor.

        The function carries the query name, docs, SQL and operation.
        """

        async def fn(*args: Any, **kwargs: Any) -> Any:
            return await self.call(query, *args, **kwargs)

        fn.__name__ = fn.__qualname__ = query.name
        fn.__doc__ = query.docs or None
        fn.sql = query.sql  # type: ignore[attr-defined]
        fn.operation = query.operation  # type: ignore[attr-defined]
        return fn

    def bind_all(self, queries: Mapping[str, Query]) -> SimpleNamespace:
        """Bind every query of ``queries``, exposing them as attributes."""
        return SimpleNamespace(**{name: self.bind(query) for name, query in queries.items()})


default_executor = Executor()
"""Executor shared by the module level :func:`register_adapter` and :func:`execute`."""


def register_adapter(adapter: AdapterProtocol) -> None:
    default_executor.register_adapter(adapter)


async def execute(query: Query, arguments: Arguments | None = None) -> Any:
    return await default_executor.execute(query, arguments)
