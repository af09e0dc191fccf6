"""
首页：直接返回前端打包好的 index 文件
"""

from pathlib import Path

import structlog
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from starlette.requests import Request

router = APIRouter(tags=["页面"])
log = structlog.get_logger()


@router.get("/", include_in_schema=False)
async def index(request: Request):
    index_file = Path(request.app.state.settings.INDEX_FILE)
    if not index_file.is_file():
        log.warning("首页文件不存在", path=str(index_file))
        raise HTTPException(status_code=404, detail="index not found")
    return FileResponse(index_file)
