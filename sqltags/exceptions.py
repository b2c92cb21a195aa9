from typing import Any, Optional

__all__ = (
    "AdapterNotRegisteredError",
    "DuplicateQueryError",
    "ImproperConfigurationError",
    "MissingParameterError",
    "QueryNameError",
    "SQLTagsError",
    "UnsupportedOperationError",
)


class SQLTagsError(Exception):
    """Base exception class from which all sqltags exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLTagsError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLTagsError):
    """Raised when a configuration value is not one of the accepted choices."""


class QueryNameError(SQLTagsError, NameError):
    """A ``-- name:`` header does not declare a valid query name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid query name: {name!r}")
        self.name = name


class DuplicateQueryError(SQLTagsError):
    """The same query name is defined more than once in one source text."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Query {name!r} is defined more than once")
        self.name = name


class AdapterNotRegisteredError(SQLTagsError):
    """Raised when a query is executed before an adapter has been registered."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Missing adapter, call Executor.register_adapter() first."
        super().__init__(message)


class UnsupportedOperationError(SQLTagsError):
    """The query descriptor carries an operation the executor cannot dispatch."""

    def __init__(self, operation: Any) -> None:
        self.operation = operation
        super().__init__(f"Operation not supported: {operation!r}")


class MissingParameterError(SQLTagsError):
    """No argument was supplied for a placeholder of the query."""
