"""
配置：从环境变量读取，供目录加载、匹配与 HTTP 层使用。
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# src/career_suggest/core/config.py -> parents[3] = 项目根（与 pyproject.toml 同层）
PROJECT_ROOT = Path(__file__).resolve().parents[3]

# 可选加载 .env（若存在）：先项目根，再当前工作目录
_env_paths = [
    PROJECT_ROOT / ".env",
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        load_dotenv(_p)
        break

DEFAULT_MBTI_TOP_K = 5
DEFAULT_LEGACY_TOP_K = 3
DEFAULT_PORT = 3000


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


def get_catalog_path() -> Path:
    """
    职业目录 JSON 路径。
    默认：项目根下的 data/careers.json；可通过 CAREER_SUGGEST_CATALOG 覆盖。
    """
    env_path = (os.getenv("CAREER_SUGGEST_CATALOG") or "").strip()
    if env_path:
        return Path(env_path)
    return PROJECT_ROOT / "data" / "careers.json"


def mbti_top_k() -> int:
    """MBTI 路径返回条数，默认 5，最少 1。"""
    return max(1, _int_env("CAREER_SUGGEST_MBTI_TOP_K", DEFAULT_MBTI_TOP_K))


def legacy_top_k() -> int:
    """9 题旧版路径返回条数，默认 3，最少 1。"""
    return max(1, _int_env("CAREER_SUGGEST_LEGACY_TOP_K", DEFAULT_LEGACY_TOP_K))


def use_standard_jp_axis() -> bool:
    """
    第四维（J/P）是否使用常规比较（J 多则 J）。
    默认 false：沿用线上既有的反向比较（J 多则 P），避免已有用户结果突变。
    """
    return _bool_env("CAREER_SUGGEST_STANDARD_JP_AXIS", False)


def cors_origins() -> list[str]:
    raw = (os.getenv("CAREER_SUGGEST_CORS_ORIGINS") or "*").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def log_level() -> str:
    return (os.getenv("CAREER_SUGGEST_LOG_LEVEL") or "INFO").strip().upper()


def get_host() -> str:
    return (os.getenv("HOST") or "127.0.0.1").strip()


def get_port() -> int:
    return _int_env("PORT", DEFAULT_PORT)
