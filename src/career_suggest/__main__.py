"""
本地启动：python -m career_suggest（等价于 uvicorn career_suggest.api.app:app）。
监听地址由 HOST / PORT 环境变量决定，默认 127.0.0.1:3000。
"""
import uvicorn

from career_suggest.core.config import get_host, get_port


def main() -> None:
    uvicorn.run("career_suggest.api.app:app", host=get_host(), port=get_port())


if __name__ == "__main__":
    main()
