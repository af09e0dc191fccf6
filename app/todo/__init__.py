"""
Todo 模块：进程内共享的任务列表

提供内存版 TodoStore 和 Todo 及接口信封 schema，供 app.api.todos 路由使用。
"""

from app.todo.schemas import Todo
from app.todo.store import TodoStore

__all__ = ["Todo", "TodoStore"]
