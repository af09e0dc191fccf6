"""
FastAPI 依赖注入：从 app.state 取共享的 TodoStore
"""

from starlette.requests import Request

from app.todo.store import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """lifespan 启动时创建，所有请求共享同一个实例"""
    return request.app.state.todo_store
