"""sqltags: named, tagged SQL statements compiled into queries and dispatched to an adapter."""

from sqltags import exceptions
from sqltags.__metadata__ import __version__
from sqltags.compiler import QuerySet, compile_queries, to_positional_sql
from sqltags.config import CompilerConfig, ExecutorConfig, load_config_from_env
from sqltags.exceptions import (
    AdapterNotRegisteredError,
    DuplicateQueryError,
    MissingParameterError,
    QueryNameError,
    SQLTagsError,
    UnsupportedOperationError,
)
from sqltags.executor import Executor, execute, register_adapter, resolve_parameters
from sqltags.types import Arguments, Named, Operation, Positional, Query

__all__ = (
    "AdapterNotRegisteredError",
    "Arguments",
    "CompilerConfig",
    "DuplicateQueryError",
    "Executor",
    "ExecutorConfig",
    "MissingParameterError",
    "Named",
    "Operation",
    "Positional",
    "Query",
    "QueryNameError",
    "QuerySet",
    "SQLTagsError",
    "UnsupportedOperationError",
    "__version__",
    "compile_queries",
    "exceptions",
    "execute",
    "load_config_from_env",
    "register_adapter",
    "resolve_parameters",
    "to_positional_sql",
)
