"""
/todos routes. Writes go through todo_body, so a bad payload is rejected
before the store is touched.
"""

import structlog
from fastapi import APIRouter, Depends, Request

from app.errors import TodoNotFound
from app.observability.metrics import TODOS_CREATED, TODOS_DELETED
from app.store import TodoStore
from app.validation import TodoIn, parse_todo

router = APIRouter(prefix="/todos", tags=["todos"])
log = structlog.get_logger()


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


async def todo_body(request: Request) -> TodoIn:
    return parse_todo(await request.body())


def parse_id(todo_id: str) -> int:
    # non-numeric ids can't match anything
    if not (todo_id.isascii() and todo_id.isdigit()):
        raise TodoNotFound(todo_id)
    try:
        return int(todo_id)
    except ValueError:
        # past the interpreter's int-string conversion limit
        raise TodoNotFound(todo_id) from None


@router.get("")
def list_todos(store: TodoStore = Depends(get_store)):
    return store.list()


@router.get("/{todo_id}")
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    return store.get(parse_id(todo_id))


@router.post("", status_code=201)
def create_todo(body: TodoIn = Depends(todo_body), store: TodoStore = Depends(get_store)):
    todo = store.append({**body.record_fields(), "completed": False})
    TODOS_CREATED.inc()
    log.info("todo created", todo_id=todo["id"])
    return todo


@router.put("/{todo_id}")
def update_todo(
    todo_id: str,
    body: TodoIn = Depends(todo_body),
    store: TodoStore = Depends(get_store),
):
    todo = store.replace(parse_id(todo_id), body.record_fields())
    log.info("todo updated", todo_id=todo["id"])
    return todo


@router.delete("/{todo_id}")
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    todo = store.remove(parse_id(todo_id))
    TODOS_DELETED.inc()
    log.info("todo deleted", todo_id=todo["id"])
    return {"message": "Todo deleted", "todo": todo}
