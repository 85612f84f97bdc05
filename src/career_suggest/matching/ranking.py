"""排序取 Top-K：按分数降序稳定排序，同分保留目录顺序。"""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def top_k(items: Iterable[T], key: Callable[[T], float], k: int) -> list[T]:
    """返回得分最高的前 k 项；k <= 0 返回空列表。"""
    if k <= 0:
        return []
    return sorted(items, key=key, reverse=True)[:k]
