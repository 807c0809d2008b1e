"""
In-memory todo store. One instance per application; handlers get it via dependency injection.
"""

import copy

from app.errors import TodoNotFound

FIELDS = ("task", "description", "priority", "completed", "dueDate", "tags")

SEED_TODOS = [
    {
        "id": 1,
        "task": "Complete project proposal",
        "description": "Write and submit the final project proposal for the client",
        "priority": "high",
        "completed": False,
        "dueDate": "2024-01-15",
        "tags": ["work", "urgent"],
    },
    {
        "id": 2,
        "task": "Review code changes",
        "description": "Review pull requests from team members",
        "priority": "medium",
        "completed": True,
        "dueDate": "2024-01-12",
        "tags": ["development", "review"],
    },
    {
        "id": 3,
        "task": "Update documentation",
        "description": "Update API documentation with new endpoints",
        "priority": "low",
        "completed": False,
        "dueDate": "2024-01-20",
        "tags": ["documentation"],
    },
    {
        "id": 4,
        "task": "Team meeting",
        "description": "Weekly team standup meeting",
        "priority": "medium",
        "completed": False,
        "dueDate": "2024-01-14",
        "tags": ["meeting", "team"],
    },
]


def _record(todo_id: int, fields: dict) -> dict:
    record = {"id": todo_id}
    for name in FIELDS:
        record[name] = copy.deepcopy(fields.get(name))
    return record


class TodoStore:
    """Ordered list of todo records.

    Ids come from a counter that only moves forward, so an id is never handed
    out twice even after deletions. Not thread-safe: run a single worker.
    """

    def __init__(self, seed: list[dict] | None = None):
        seed = SEED_TODOS if seed is None else seed
        self._todos: list[dict] = [copy.deepcopy(t) for t in seed]
        self._last_id = max((t["id"] for t in self._todos), default=0)

    def __len__(self) -> int:
        return len(self._todos)

    def _index(self, todo_id: int) -> int:
        for i, todo in enumerate(self._todos):
            if todo["id"] == todo_id:
                return i
        raise TodoNotFound(todo_id)

    def list(self) -> list[dict]:
        return copy.deepcopy(self._todos)

    def get(self, todo_id: int) -> dict:
        return copy.deepcopy(self._todos[self._index(todo_id)])

    def append(self, fields: dict) -> dict:
        self._last_id += 1
        record = _record(self._last_id, fields)
        self._todos.append(record)
        return copy.deepcopy(record)

    def replace(self, todo_id: int, fields: dict) -> dict:
        i = self._index(todo_id)
        self._todos[i] = _record(todo_id, fields)
        return copy.deepcopy(self._todos[i])

    def remove(self, todo_id: int) -> dict:
        return self._todos.pop(self._index(todo_id))
