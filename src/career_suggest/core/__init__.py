# 配置、错误分类、loguru 日志

from .config import (
    get_catalog_path,
    mbti_top_k,
    legacy_top_k,
    use_standard_jp_axis,
    cors_origins,
    log_level,
)
from .errors import (
    CareerSuggestError,
    InvalidInputError,
    ConfigurationError,
    UnknownTypeError,
    CatalogLoadError,
)
from .logging import configure_logging

__all__ = [
    "get_catalog_path",
    "mbti_top_k",
    "legacy_top_k",
    "use_standard_jp_axis",
    "cors_origins",
    "log_level",
    "CareerSuggestError",
    "InvalidInputError",
    "ConfigurationError",
    "UnknownTypeError",
    "CatalogLoadError",
    "configure_logging",
]
