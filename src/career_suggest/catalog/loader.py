"""
目录加载：读取静态 JSON 数组，校验为 CareerRecord，构建只读 Catalog。
任何失败都抛出 CatalogLoadError，由启动流程终止进程（不进入服务状态）。
"""
from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from career_suggest.core.config import get_catalog_path
from career_suggest.core.errors import CatalogLoadError
from .schemas import Catalog, CareerRecord


def parse_catalog(raw: object, source: str = "<memory>") -> Catalog:
    """把已解析的 JSON 值（应为对象数组）转为 Catalog。"""
    if not isinstance(raw, list):
        raise CatalogLoadError(source, "顶层必须是 JSON 数组")
    records: list[CareerRecord] = []
    for index, item in enumerate(raw):
        try:
            records.append(CareerRecord.model_validate(item))
        except ValidationError as e:
            raise CatalogLoadError(source, f"第 {index} 项格式错误: {e.errors()[0]['msg']}") from e
    return Catalog.from_records(records)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """
    从 JSON 文件加载目录。path 不传则用配置（CAREER_SUGGEST_CATALOG 或 data/careers.json）。
    """
    p = Path(path) if path is not None else get_catalog_path()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Failed to read catalog {}: {}", p, e)
        raise CatalogLoadError(str(p), f"读取失败: {e}") from e
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Catalog {} is not valid JSON: {}", p, e)
        raise CatalogLoadError(str(p), f"JSON 解析失败: {e}") from e

    catalog = parse_catalog(raw, source=str(p))
    logger.info(
        "Loaded catalog {} with {} records ({} unique by name)",
        p,
        len(catalog.records),
        len(catalog.unique_records),
    )
    return catalog
