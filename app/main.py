"""
FastAPI 应用主入口
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# 将项目根目录添加到 python path，以便直接运行 main.py 时能找到 app 模块
sys.path.append(str(Path(__file__).resolve().parent.parent))

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app

from app.config import Settings, get_settings
from app.observability.logging_config import setup_logging
from app.observability.metrics_middleware import MetricsMiddleware
from app.observability.request_logger import RequestLoggerMiddleware
from app.todo.store import TodoStore

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    """应用生命周期：Todo 只在内存中，关闭即丢弃"""
    settings: Settings = application.state.settings
    log.info("应用启动", env=settings.ENV, app=settings.APP_NAME)

    yield

    log.info("应用关闭，内存中的 Todo 已丢弃", todos=len(application.state.todo_store))


def create_app(settings: Settings | None = None) -> FastAPI:
    """每次调用都创建独立的 TodoStore，测试可以各自构建互不干扰的应用"""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.todo_store = TodoStore()

    # ── 中间件（执行顺序：从下往上注册，从上往下执行） ──
    application.add_middleware(RequestLoggerMiddleware)
    application.add_middleware(MetricsMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.CORS_ALLOW_ORIGIN_REGEX,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Prometheus 指标端点 ──
    application.mount("/metrics", make_asgi_app())

    # ── 静态资源：目录不存在时不挂载，/static 请求直接 404 ──
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        application.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        log.warning("静态资源目录不存在，跳过挂载", path=str(static_dir))

    # ── 路由注册 ──
    from app.api.health import router as health_router
    from app.api.pages import router as pages_router
    from app.api.todos import router as todos_router

    application.include_router(health_router)
    application.include_router(pages_router)
    application.include_router(todos_router)

    return application


settings = get_settings()

# 初始化日志（在 import 时就生效）
setup_logging(env=settings.ENV)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    # 允许直接运行 python app/main.py 启动服务
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT, reload=True)
