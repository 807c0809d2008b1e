from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from app.api.todos import get_store
from app.store import TodoStore

router = APIRouter(tags=["ops"])


@router.get("/health")
def health(store: TodoStore = Depends(get_store)):
    return {"status": "ok", "todos": len(store)}


@router.get("/metrics", response_class=PlainTextResponse)
def metrics():
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)
