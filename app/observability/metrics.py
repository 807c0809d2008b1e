"""
Prometheus metrics, defined once at import time and shared by every app instance
"""

from prometheus_client import Counter

REQUEST_TOTAL = Counter(
    "todo_api_requests_total",
    "HTTP requests served",
    ["method", "path", "status_code"],
)

TODOS_CREATED = Counter("todo_api_todos_created_total", "Todos created")
TODOS_DELETED = Counter("todo_api_todos_deleted_total", "Todos deleted")
