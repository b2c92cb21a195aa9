"""Compile annotated SQL text into named query descriptors.

Each query in the text starts with a ``-- name:`` definition comment. The name
may end with a suffix selecting how the query is executed::

    -- name: get_user_blogs
    -- Get blogs authored by a user.
    select title, published from blogs where userid = :userid;

    -- name: remove_blog!
    delete from blogs where blogid = :blogid;

Comment lines following the name become the query documentation; everything
else is the SQL body, kept as written.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from sqltags.config import CompilerConfig
from sqltags.exceptions import DuplicateQueryError, QueryNameError
from sqltags.patterns import NON_ASCII, QUERY_DEF, QUERY_NAME, SQL_COMMENT, SQL_OPERATION_SUFFIXES, VAR_REF
from sqltags.types import Named, Operation, Positional, Query
from sqltags.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqltags.types import Parameter

__all__ = (
    "QuerySet",
    "compile_queries",
    "compile_query",
    "extract_parameters",
    "named_parameters",
    "split_docs_and_sql",
    "split_name_and_operation",
    "to_positional_sql",
)

logger = get_logger("compiler")


class QuerySet(Mapping[str, Query]):
    """Read-only mapping of query name to :class:`~sqltags.types.Query`.

    Queries are also reachable as attributes, ``queries.get_user`` being
    ``queries["get_user"]``. A query named like a mapping attribute (``keys``,
    ``items``, ``values``, ``get``, ``available_queries``...) is only reachable
    by subscription; :func:`compile_queries` logs a warning for such names.
    """

    __slots__ = ("_queries",)

    def __init__(self, queries: Mapping[str, Query] | None = None) -> None:
        object.__setattr__(self, "_queries", MappingProxyType(dict(queries or {})))

    def __getitem__(self, name: str) -> Query:
        return self._queries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._queries)

    def __len__(self) -> int:
        return len(self._queries)

    def __getattr__(self, name: str) -> Query:
        if not name.startswith("_"):
            try:
                return self._queries[name]
            except KeyError:
                pass
        msg = f"{type(self).__name__!r} object has no query {name!r}"
        raise AttributeError(msg)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__!r} object is read-only"
        raise AttributeError(msg)

    @property
    def available_queries(self) -> list[str]:
        """Sorted names of all the queries in this set."""
        return sorted(self._queries)

    def __repr__(self) -> str:
        return f"QuerySet({self.available_queries!r})"


QUERY_SET_ATTRIBUTES = frozenset(name for name in dir(QuerySet) if not name.startswith("_"))
"""Names that attribute access on a :class:`QuerySet` resolves to the mapping itself"""


def split_name_and_operation(header: str) -> tuple[str, Operation]:
    """Split a query header into the query name and its operation.

    Raises:
        QueryNameError: if what is left once the suffix is removed is not a valid name.
    """
    header = header.strip()
    name, operation = header, Operation.SELECT
    for suffix, suffix_operation in SQL_OPERATION_SUFFIXES:
        if header.endswith(suffix):
            name, operation = header[: -len(suffix)], suffix_operation
            break
    if not QUERY_NAME.fullmatch(name):
        raise QueryNameError(name)
    return name, operation


def split_docs_and_sql(lines: Iterable[str]) -> tuple[str, str]:
    """Separate documentation comment lines from SQL lines.

    Returns:
        ``(sql, docs)``; each doc line keeps a trailing newline.
    """
    docs, sql = "", ""
    for line in lines:
        if doc_match := SQL_COMMENT.match(line):
            docs += doc_match.group(1) + "\n"
        else:
            sql += line + "\n"
    return sql.strip(), docs


def extract_parameters(sql: str) -> tuple[Parameter, ...]:
    """List the placeholders of ``sql`` in the order they appear."""
    return tuple(
        Positional() if match.group("positional") else Named(match.group("var_name")) for match in VAR_REF.finditer(sql)
    )


def named_parameters(params: Sequence[Parameter]) -> list[Named]:
    return [param for param in params if isinstance(param, Named)]


def to_positional_sql(query: Query) -> str:
    """Rewrite every ``:name`` placeholder of ``query`` as ``?``.

    The result has one ``?`` per entry of ``query.params``, so it can be bound
    directly with the argument list built by the executor.
    """
    return VAR_REF.sub("?", query.sql)


def compile_query(definition: str, config: CompilerConfig | None = None) -> Query:
    """Build a query from one definition: the header line, then docs and SQL."""
    config = config or CompilerConfig()
    header, *lines = definition.strip().splitlines() or [""]
    name, operation = split_name_and_operation(header)
    if config.warn_non_ascii and NON_ASCII.search(name):
        logger.warning("non ASCII character in query name: %s", name, extra={"query": name})
    sql, docs = split_docs_and_sql(lines)
    return Query(name=name, operation=operation, sql=sql, docs=docs, params=extract_parameters(sql))


def compile_queries(sql: str, config: CompilerConfig | None = None) -> QuerySet:
    """Compile every ``-- name:`` definition found in ``sql``.

    Args:
        sql: Annotated SQL text holding one or more named queries.
        config: Compiler options, defaults to :class:`~sqltags.config.CompilerConfig`.

    Raises:
        QueryNameError: if a definition has an invalid name.
        DuplicateQueryError: if a name is defined twice and ``config.on_duplicate`` is ``"error"``.

    Returns:
        The compiled queries keyed by name.
    """
    config = config or CompilerConfig()
    preamble, *definitions = QUERY_DEF.split(sql)
    # a preamble of comments is dropped, anything else is parsed like a definition and fails on its name
    if any(line.strip() and not SQL_COMMENT.match(line) for line in preamble.splitlines()):
        definitions.insert(0, preamble)
    queries: dict[str, Query] = {}
    for definition in definitions:
        if not definition.strip():
            continue
        query = compile_query(definition, config)
        if query.name in queries:
            if config.on_duplicate == "error":
                raise DuplicateQueryError(query.name)
            logger.warning(
                "query %s is defined more than once, keeping the last definition",
                query.name,
                extra={"query": query.name},
            )
        if query.name in QUERY_SET_ATTRIBUTES:
            logger.warning(
                "query %s is shadowed by QuerySet.%s, use queries[%r] to reach it",
                query.name,
                query.name,
                query.name,
                extra={"query": query.name},
            )
        queries[query.name] = query
    logger.debug("compiled %d queries", len(queries), extra={"query_count": len(queries)})
    return QuerySet(queries)
