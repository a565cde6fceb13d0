#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import json
import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import Response

import sizhu_core


# 自定义UTF-8 JSONResponse类，确保中文正确编码
class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,  # 关键：不转义非ASCII字符
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


# 优先加载 .env 文件（必须在读取配置之前）
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path)

# 配置日志（必须在导入路由之前初始化）
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from sizhu_server.api.v1.bazi import router as bazi_router
from sizhu_server.config.env_config import get_env_config
from sizhu_server.utils.async_executor import shutdown_executor


@asynccontextmanager
async def lifespan(app: FastAPI):
    env_config = get_env_config()
    logger.info(
        f"✓ 服务启动 (env={env_config.env}, 反推范围 {env_config.search_start_year}-{env_config.search_end_year}, "
        f"子时流派 {env_config.default_sect})"
    )
    yield
    shutdown_executor()


app = FastAPI(
    title="SizhuAPI",
    description="四柱排盘、大运流年与八字反推API服务",
    version=sizhu_core.__version__,
    lifespan=lifespan,
    default_response_class=UTF8JSONResponse  # 使用UTF-8编码的JSON响应
)

app.include_router(bazi_router, prefix="/api/v1", tags=["八字计算"])


@app.get("/health")
async def health_check():
    """健康检查"""
    return {
        "status": "healthy",
        "env": get_env_config().env,
        "version": sizhu_core.__version__,
    }


def run():
    import uvicorn
    uvicorn.run(
        "sizhu_server.main:app",
        host=os.getenv("SIZHU_HOST", "0.0.0.0"),
        port=int(os.getenv("SIZHU_PORT", "8001")),
        workers=1
    )


if __name__ == "__main__":
    run()
