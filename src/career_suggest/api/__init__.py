# HTTP 层：FastAPI 应用工厂、响应模型、错误映射

from .app import app, create_app, get_catalog

__all__ = ["app", "create_app", "get_catalog"]
