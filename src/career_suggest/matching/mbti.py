"""
MBTI 问卷分类：16 道二选一题目的字母答案 → 4 字母类型。

按字母计数多数决定每一维。前三维平局时取后一个字母（I / N / F）。
第四维沿用线上既有行为：J 多时给 P，否则给 J（与前三维方向相反，见 DESIGN.md）；
standard_jp_axis=True 时改为常规比较。
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from career_suggest.core.errors import InvalidInputError

# 需要的最少答案数
REQUIRED_ANSWERS = 16

LETTERS = ("E", "I", "S", "N", "T", "F", "J", "P")

# 四个维度（前者, 后者）
AXES = (("E", "I"), ("S", "N"), ("T", "F"), ("J", "P"))


def tally_answers(answers: Mapping[str, Any]) -> dict[str, int]:
    """统计 8 个字母出现次数。非字母值（小写、数字、其他字母）忽略，不计数。"""
    counts = {letter: 0 for letter in LETTERS}
    for value in answers.values():
        if isinstance(value, str) and value in counts:
            counts[value] += 1
    return counts


def type_from_counts(counts: Mapping[str, int], *, standard_jp_axis: bool = False) -> str:
    """由字母计数得到 4 字母类型。"""
    mbti_type = ""
    mbti_type += "E" if counts["E"] > counts["I"] else "I"
    mbti_type += "S" if counts["S"] > counts["N"] else "N"
    mbti_type += "T" if counts["T"] > counts["F"] else "F"
    if standard_jp_axis:
        mbti_type += "J" if counts["J"] > counts["P"] else "P"
    else:
        mbti_type += "P" if counts["J"] > counts["P"] else "J"
    return mbti_type


def validate_mbti_answers(answers: Any) -> Mapping[str, Any]:
    """answers 必须是映射且至少 16 项（多余/未知的键不报错），否则抛出 InvalidInputError。"""
    if not isinstance(answers, Mapping) or len(answers) < REQUIRED_ANSWERS:
        raise InvalidInputError(f"数据无效，需要完整的 {REQUIRED_ANSWERS} 道题答案。")
    return answers


def classify_answers(answers: Any, *, standard_jp_axis: bool = False) -> str:
    """校验并分类，返回 4 字母类型。"""
    counts = tally_answers(validate_mbti_answers(answers))
    return type_from_counts(counts, standard_jp_axis=standard_jp_axis)


def all_types() -> list[str]:
    """16 种合法类型，按维度顺序展开。"""
    types = [""]
    for first, second in AXES:
        types = [t + letter for t in types for letter in (first, second)]
    return types
