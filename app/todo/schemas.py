"""
Todo 数据模型 + 接口请求/响应结构

所有响应统一为 {success, message} 信封，列表接口额外携带 data。
"""

from pydantic import BaseModel


class Todo(BaseModel):
    """单个 Todo 条目"""

    id: str
    content: str
    completed: bool = False


# ── 请求体 ──

class AddTodoPayload(BaseModel):
    content: str


class TodoIdPayload(BaseModel):
    """remove_todo / toggle_todo 共用"""

    todo_id: str


class UpdateTodoPayload(BaseModel):
    todo_id: str
    content: str


# ── 响应信封 ──

class Envelope(BaseModel):
    success: bool = True
    message: str = ""


class TodosEnvelope(Envelope):
    data: list[Todo] = []


def not_found(todo_id: str) -> Envelope:
    """目标 id 不存在：HTTP 仍返回 200，失败信息放在信封里"""
    return Envelope(success=False, message=f"{todo_id} is not found")
