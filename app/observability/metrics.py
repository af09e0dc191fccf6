"""
Prometheus 指标定义

所有指标统一在此文件定义，中间件和业务代码按需引用。
"""

from prometheus_client import Counter, Gauge, Histogram

# ── 请求级指标 ──

REQUEST_TOTAL = Counter(
    "todo_request_total",
    "HTTP 请求总数",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "todo_request_duration_ms",
    "HTTP 请求耗时（毫秒）",
    ["method", "endpoint"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

# ── 业务指标 ──

OPERATION_TOTAL = Counter(
    "todo_operation_total",
    "Todo 操作总数",
    ["operation", "result"],  # result: ok/not_found
)

TODO_ITEMS = Gauge(
    "todo_items",
    "当前内存中的 Todo 条数",
)


def record_operation(operation: str, found: bool, size: int) -> None:
    """记录一次存储操作，并刷新当前条数"""
    OPERATION_TOTAL.labels(operation=operation, result="ok" if found else "not_found").inc()
    TODO_ITEMS.set(size)
