# todo_api/services/todo_service.py
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate, TodoUpdate


class InvalidTodoId(ValueError):
    pass


def parse_todo_id(todo_id: str) -> str:
    try:
        return str(uuid.UUID(str(todo_id)))
    except ValueError as exc:
        raise InvalidTodoId(f"malformed todo id: {todo_id!r}") from exc


def create_todo(db: Session, todo_in: TodoCreate) -> Todo:

    db_todo = Todo(
        text=todo_in.text,
        completed=False,
    )
    db.add(db_todo)
    db.commit()
    db.refresh(db_todo)
    return db_todo


def get_todo(db: Session, todo_id: str) -> Optional[Todo]:

    return db.query(Todo).filter(Todo.id == parse_todo_id(todo_id)).first()


def list_todos(db: Session) -> List[Todo]:

    return db.query(Todo).order_by(Todo.created_at).all()


def update_todo(db: Session, todo_id: str, todo_in: TodoUpdate) -> Optional[Todo]:
    db_todo = get_todo(db, todo_id)
    if db_todo is None:
        return None

    for field, value in todo_in.model_dump(exclude_unset=True).items():
        setattr(db_todo, field, value)
    db.commit()
    db.refresh(db_todo)
    return db_todo


def delete_todo(db: Session, todo_id: str) -> Optional[Todo]:
    db_todo = get_todo(db, todo_id)
    if db_todo is None:
        return None

    db.delete(db_todo)
    db.commit()
    return db_todo
