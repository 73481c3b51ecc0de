# todo_api/api/routes_todos.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from todo_api.core.db import get_db
from todo_api.schemas.todo import ErrorResponse, TodoCreate, TodoRead, TodoUpdate
from todo_api.services.todo_service import (
    InvalidTodoId,
    create_todo,
    delete_todo,
    list_todos,
    update_todo,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)

NOT_FOUND = "ToDo not found"


@router.post("", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TodoRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_todo_endpoint(todo_in: TodoCreate, db: Session = Depends(get_db)):
    try:
        return create_todo(db, todo_in)
    except SQLAlchemyError:
        logger.exception("Failed to create todo")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to create ToDo")


@router.get(
    "",
    response_model=List[TodoRead],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
@router.get("/", response_model=List[TodoRead], include_in_schema=False)
def list_todos_endpoint(db: Session = Depends(get_db)):
    try:
        return list_todos(db)
    except SQLAlchemyError:
        logger.exception("Failed to list todos")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve ToDos",
        )


@router.put(
    "/{todo_id}",
    response_model=TodoRead,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def update_todo_endpoint(todo_id: str, todo_in: TodoUpdate, db: Session = Depends(get_db)):
    try:
        todo = update_todo(db, todo_id, todo_in)
    except InvalidTodoId:
        logger.info("Rejected update of malformed todo id %r", todo_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to update ToDo")
    except SQLAlchemyError:
        logger.exception("Failed to update todo %s", todo_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to update ToDo")
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return todo


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def delete_todo_endpoint(todo_id: str, db: Session = Depends(get_db)):
    try:
        todo = delete_todo(db, todo_id)
    except InvalidTodoId:
        logger.info("Rejected delete of malformed todo id %r", todo_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to delete ToDo")
    except SQLAlchemyError:
        logger.exception("Failed to delete todo %s", todo_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to delete ToDo")
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
