"""
Todo 内存存储层

整个进程共享一份有序列表（按插入顺序），重启即丢失。
每个 FastAPI 应用实例在 lifespan 中创建自己的 TodoStore，挂在 app.state 上。

并发策略：
- 所有读写都在同一把 threading.Lock 内完成，读方不会看到写了一半的状态
- 锁内只做一次列表扫描/修改，不做任何 I/O
- 对外返回的都是副本，调用方改不到内部数据
"""

import threading
import uuid

import structlog

from app.todo.schemas import Todo

log = structlog.get_logger()


class TodoStore:
    """进程内 Todo 列表的 CRUD"""

    def __init__(self) -> None:
        self._todos: list[Todo] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index_of(self, todo_id: str) -> int | None:
        """按 id 查找下标，调用方必须已持有锁"""
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        return None

    def list(self, filter: str | None = None) -> list[Todo]:
        """按完成状态过滤，保持插入顺序；未识别的 filter 等同 all"""
        with self._lock:
            if filter == "active":
                todos = [t for t in self._todos if not t.completed]
            elif filter == "completed":
                todos = [t for t in self._todos if t.completed]
            else:
                if filter not in (None, "all"):
                    log.debug("未识别的 filter，按 all 处理", filter=filter)
                todos = self._todos
            return [t.model_copy() for t in todos]

    def add(self, content: str) -> str:
        """追加一条未完成的 Todo，返回新生成的 id"""
        todo = Todo(id=str(uuid.uuid4()), content=content, completed=False)
        with self._lock:
            self._todos.append(todo)
        log.info("新增 Todo", todo_id=todo.id)
        return todo.id

    def remove(self, todo_id: str) -> bool:
        with self._lock:
            idx = self._index_of(todo_id)
            if idx is None:
                return False
            del self._todos[idx]
        log.info("删除 Todo", todo_id=todo_id)
        return True

    def update(self, todo_id: str, content: str) -> bool:
        """只替换 content，id 和 completed 保持不变"""
        with self._lock:
            idx = self._index_of(todo_id)
            if idx is None:
                return False
            self._todos[idx].content = content
        log.info("更新 Todo", todo_id=todo_id)
        return True

    def toggle_one(self, todo_id: str) -> bool:
        with self._lock:
            idx = self._index_of(todo_id)
            if idx is None:
                return False
            todo = self._todos[idx]
            todo.completed = not todo.completed
            completed = todo.completed
        log.info("切换 Todo 状态", todo_id=todo_id, completed=completed)
        return True

    def toggle_all(self) -> None:
        """
        全部已完成 → 全部置为未完成；否则 → 全部置为已完成。
        先整体扫描一次再统一修改，判断只做一次。
        """
        with self._lock:
            all_completed = all(t.completed for t in self._todos)
            for todo in self._todos:
                todo.completed = not all_completed
            count = len(self._todos)
        log.info("批量切换 Todo 状态", completed=not all_completed, count=count)

    def clear_completed(self) -> None:
        """删除所有已完成的 Todo，剩余条目保持原顺序"""
        with self._lock:
            before = len(self._todos)
            self._todos = [t for t in self._todos if not t.completed]
            removed = before - len(self._todos)
        log.info("清除已完成 Todo", removed=removed)
