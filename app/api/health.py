"""
健康检查接口：探活 + 当前 Todo 条数
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_todo_store
from app.todo.store import TodoStore

router = APIRouter(tags=["健康检查"])


@router.get("/health")
async def health_check(store: TodoStore = Depends(get_todo_store)):
    """纯内存服务，没有外部依赖需要探测"""
    return {"status": "ok", "todos": len(store)}
