from __future__ import annotations

from typing import Any

BLOG_SQL = """
-- name: publishBlog<!
insert into blogs (
  userid,
  title,
  content,
  published
)
values (
  :userid,
  :title,
  :content,
  :published
)

-- name: removeTwoBlogs*!
delete from blogs where blogid = :blogid1
delete from blogs where blogid = :blogid2

-- name: executeScript#
select * from blogs

-- name: removeBlog!
-- Remove a blog from the database
delete from blogs where blogid = :blogid;

-- name: getCurrentUser?
select * from users where userid = :userid

-- name: getUserBlogs
-- Get blogs authored by a user.
  select title,
         published
    from blogs
   where userid = :userid
order by published desc;
"""


class RecordingAdapter:
    """Async adapter echoing the parameters it receives and recording every call."""

    def __init__(self, select_result: Any = None) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.select_result = select_result

    async def execute_script(self, sql: str) -> str:
        self.calls.append(("execute_script", sql, ()))
        return "DONE"

    async def insert_returning(self, sql: str, *parameters: Any) -> Any:
        self.calls.append(("insert_returning", sql, parameters))
        return list(parameters)

    async def insert_update_delete(self, sql: str, *parameters: Any) -> int:
        self.calls.append(("insert_update_delete", sql, parameters))
        return 1

    async def insert_update_delete_many(self, sql: str, *parameters: Any) -> int:
        self.calls.append(("insert_update_delete_many", sql, parameters))
        return 2

    async def select(self, sql: str, *parameters: Any) -> Any:
        self.calls.append(("select", sql, parameters))
        if self.select_result is not None:
            return self.select_result
        return list(parameters)


class SyncRecordingAdapter(RecordingAdapter):
    """Same as :class:`RecordingAdapter` with plain, non-async methods."""

    def execute_script(self, sql: str) -> str:  # type: ignore[override]
        self.calls.append(("execute_script", sql, ()))
        return "DONE"

    def insert_returning(self, sql: str, *parameters: Any) -> Any:  # type: ignore[override]
        self.calls.append(("insert_returning", sql, parameters))
        return list(parameters)

    def insert_update_delete(self, sql: str, *parameters: Any) -> int:  # type: ignore[override]
        self.calls.append(("insert_update_delete", sql, parameters))
        return 1

    def insert_update_delete_many(self, sql: str, *parameters: Any) -> int:  # type: ignore[override]
        self.calls.append(("insert_update_delete_many", sql, parameters))
        return 2

    def select(self, sql: str, *parameters: Any) -> Any:  # type: ignore[override]
        self.calls.append(("select", sql, parameters))
        if self.select_result is not None:
            return self.select_result
        return list(parameters)
