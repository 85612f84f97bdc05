"""
职业目录：启动时从静态 JSON 加载一次，之后只读。
- records：完整序列，供 9 题旧版匹配使用。
- unique_records：按 name 去重，供 MBTI 匹配使用。
"""
from .schemas import IDENTITY_FIELDS, CareerRecord, Catalog
from .loader import load_catalog, parse_catalog

__all__ = [
    "IDENTITY_FIELDS",
    "CareerRecord",
    "Catalog",
    "load_catalog",
    "parse_catalog",
]
