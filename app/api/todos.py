"""
Todo 接口：列表 / 新增 / 删除 / 修改 / 切换 / 批量操作

端点：
- GET  /todos?filter=all|active|completed
- POST /add_todo, /remove_todo, /update_todo, /toggle_todo
- POST /clear_completed, /toggle_all

每个接口只调用一次 TodoStore 操作。id 不存在不算 HTTP 错误，
状态码仍为 200，信封里 success=false 并给出原因。
请求体缺字段/类型错误由 FastAPI 校验直接拒绝（422），不会进入存储层。
"""

import structlog
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_todo_store
from app.observability.metrics import record_operation
from app.todo.schemas import (
    AddTodoPayload,
    Envelope,
    TodoIdPayload,
    TodosEnvelope,
    UpdateTodoPayload,
    not_found,
)
from app.todo.store import TodoStore

router = APIRouter(tags=["Todo"])
log = structlog.get_logger()


def _result(operation: str, found: bool, todo_id: str, store: TodoStore) -> Envelope:
    """按操作结果组装信封，并记录指标"""
    record_operation(operation, found, len(store))
    if not found:
        log.warning("Todo 不存在", operation=operation, todo_id=todo_id)
        return not_found(todo_id)
    return Envelope()


@router.get("/todos", response_model=TodosEnvelope)
async def list_todos(
    filter: str | None = Query(default=None, description="all | active | completed，其他值按 all 处理"),
    store: TodoStore = Depends(get_todo_store),
):
    todos = store.list(filter)
    return TodosEnvelope(data=todos)


@router.post("/add_todo", response_model=Envelope)
async def add_todo(payload: AddTodoPayload, store: TodoStore = Depends(get_todo_store)):
    store.add(payload.content)
    record_operation("add", True, len(store))
    return Envelope()


@router.post("/remove_todo", response_model=Envelope)
async def remove_todo(payload: TodoIdPayload, store: TodoStore = Depends(get_todo_store)):
    found = store.remove(payload.todo_id)
    return _result("remove", found, payload.todo_id, store)


@router.post("/update_todo", response_model=Envelope)
async def update_todo(payload: UpdateTodoPayload, store: TodoStore = Depends(get_todo_store)):
    found = store.update(payload.todo_id, payload.content)
    return _result("update", found, payload.todo_id, store)


@router.post("/toggle_todo", response_model=Envelope)
async def toggle_todo(payload: TodoIdPayload, store: TodoStore = Depends(get_todo_store)):
    found = store.toggle_one(payload.todo_id)
    return _result("toggle", found, payload.todo_id, store)


@router.post("/clear_completed", response_model=Envelope)
async def clear_completed(store: TodoStore = Depends(get_todo_store)):
    store.clear_completed()
    record_operation("clear_completed", True, len(store))
    return Envelope()


@router.post("/toggle_all", response_model=Envelope)
async def toggle_all(store: TodoStore = Depends(get_todo_store)):
    store.toggle_all()
    record_operation("toggle_all", True, len(store))
    return Envelope()
