"""
职业推荐 HTTP 入口。

两个互相独立的接口共享一份只读职业目录：
- POST /api/mbti-suggest：16 题 MBTI 答案 → 类型 → 加权规则打分 → Top-5
- POST /api/suggest-career：9 题属性答案 → 逐项比较打分 → Top-3

目录在 lifespan 启动阶段显式加载并挂到 app.state；加载失败则启动失败，不对外服务。
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from career_suggest.catalog import Catalog, load_catalog
from career_suggest.core.config import (
    cors_origins,
    legacy_top_k,
    log_level,
    mbti_top_k,
    use_standard_jp_axis,
)
from career_suggest.core.errors import CareerSuggestError, ConfigurationError
from career_suggest.core.logging import configure_logging
from career_suggest.matching import suggest_by_legacy, suggest_by_mbti, validate_criteria_table
from .schemas import ErrorResponse, LegacyCareerMatch, MbtiSuggestResponse

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "请求体无效"},
    500: {"model": ErrorResponse, "description": "匹配规则配置错误"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """启动：配置日志、校验规则表、加载目录（若未注入）。任一步失败即中止启动。"""
    configure_logging(log_level())
    validate_criteria_table()
    if getattr(app.state, "catalog", None) is None:
        try:
            app.state.catalog = load_catalog()
        except CareerSuggestError:
            logger.critical("Catalog could not be loaded, refusing to serve")
            raise
    yield


def get_catalog(request: Request) -> Catalog:
    """依赖项：取出启动时加载的只读目录。"""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise ConfigurationError("职业目录尚未加载")
    return catalog


async def _handle_domain_error(request: Request, exc: CareerSuggestError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.info("{} {} rejected: {}", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 主要是 JSON 解析失败；不把 pydantic 的错误细节透出
    logger.info("{} {} invalid body: {}", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "请求体不是有效的 JSON。"})


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("{} {} crashed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "服务器内部错误"})


def mbti_suggest(
    payload: Any = Body(None, description="16 道题的答案，如 {\"q1\": \"I\", ..., \"q16\": \"J\"}"),
    catalog: Catalog = Depends(get_catalog),
):
    """
    接收 MBTI 问卷结果，计算类型并推荐职业。
    答案不足 16 项返回 400；类型无对应规则返回 500。
    """
    result = suggest_by_mbti(
        catalog,
        payload,
        mbti_top_k(),
        standard_jp_axis=use_standard_jp_axis(),
    )
    return MbtiSuggestResponse(
        mbti_type=result.mbti_type,
        suggestions=[s.to_public() for s in result.suggestions],
        counts=result.counts,
    )


def suggest_career(
    payload: Any = Body(None, description="9 个属性答案，如 {\"people_person\": 1, ..., \"creativity_level\": 2}"),
    catalog: Catalog = Depends(get_catalog),
):
    """旧版 9 题接口：逐项比较打分，返回契合度最高的 3 个职业。空对象或非对象返回 400。"""
    matches = suggest_by_legacy(catalog, payload, legacy_top_k())
    return [LegacyCareerMatch(**m.to_public()) for m in matches]


def create_app(catalog: Catalog | None = None) -> FastAPI:
    """
    构建应用。传入 catalog 时直接使用（测试/脚本），否则在启动阶段按配置加载。
    """
    app = FastAPI(
        title="Career Suggest API",
        description="职业推荐：MBTI 16 题或 9 题属性问卷 → 职业目录打分排序",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CareerSuggestError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.add_api_route(
        "/api/mbti-suggest",
        mbti_suggest,
        methods=["POST"],
        response_model=MbtiSuggestResponse,
        response_model_by_alias=True,
        responses=_ERROR_RESPONSES,
    )
    app.add_api_route(
        "/api/suggest-career",
        suggest_career,
        methods=["POST"],
        response_model=list[LegacyCareerMatch],
        response_model_by_alias=True,
        responses=_ERROR_RESPONSES,
    )
    return app


app = create_app()
