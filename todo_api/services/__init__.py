# todo_api/services/__init__.py
from .todo_service import (
    InvalidTodoId,
    create_todo,
    delete_todo,
    get_todo,
    list_todos,
    parse_todo_id,
    update_todo,
)

__all__ = [
    "InvalidTodoId",
    "create_todo",
    "delete_todo",
    "get_todo",
    "list_todos",
    "parse_todo_id",
    "update_todo",
]
