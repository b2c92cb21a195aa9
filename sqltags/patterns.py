from __future__ import annotations

import re

from sqltags.types import Operation

__all__ = (
    "NON_ASCII",
    "QUERY_DEF",
    "QUERY_NAME",
    "SQL_COMMENT",
    "SQL_OPERATION_SUFFIXES",
    "VAR_REF",
)


QUERY_DEF = re.compile(r"--\s*name\s*:\s*")
"""Identifies name definition comments"""

QUERY_NAME = re.compile(r"\w+")
"""A valid query name, matched against the whole header once the suffix is gone"""

NON_ASCII = re.compile(r"[^A-Za-z0-9_]")

SQL_COMMENT = re.compile(r"\s*--\s*(.*)$")
"""Get SQL comment contents"""

# NOTE a colon right after another colon is a type cast (``col::text``), not a variable
VAR_REF = re.compile(r"(?<!:):(?P<var_name>[\w-]+)|(?P<positional>\?)")
"""Pattern to identify ``:named`` and ``?`` placeholders in SQL code"""

# order matters: "<!" and "*!" must be tried before "!"
SQL_OPERATION_SUFFIXES: tuple[tuple[str, Operation], ...] = (
    ("<!", Operation.INSERT_RETURNING),
    ("*!", Operation.INSERT_UPDATE_DELETE_MANY),
    ("!", Operation.INSERT_UPDATE_DELETE),
    ("#", Operation.SCRIPT),
    ("?", Operation.SELECT_ONE_ROW),
)
"""map operation suffixes to their type, longest suffix first"""
