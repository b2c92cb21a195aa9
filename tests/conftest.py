from __future__ import annotations

import pytest

from sqltags import Executor, compile_queries
from sqltags.compiler import QuerySet
from tests.adapters import BLOG_SQL, RecordingAdapter


@pytest.fixture
def blog_queries() -> QuerySet:
    return compile_queries(BLOG_SQL)


@pytest.fixture
def adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def executor(adapter: RecordingAdapter) -> Executor:
    return Executor(adapter)
