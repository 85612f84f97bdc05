"""
9 题旧版匹配：用户答案与职业属性逐项比较。

8 个二值/类别字段完全相等各得 1 分；creativity_level 按差值给分
max(0, 1 - |diff| / 2)。满分 9。只校验答案是非空对象，缺失字段按不相等处理（得 0 分）。
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from career_suggest.catalog.schemas import CareerRecord
from career_suggest.core.errors import InvalidInputError
from .scoring import round_half_up

EXACT_FIELDS = (
    "people_person",
    "tech_comfort",
    "public_speaking",
    "artistic",
    "outdoor",
    "teamwork",
    "data_skill",
    "preferred_work_env",
)
CREATIVITY_FIELD = "creativity_level"
LEGACY_FIELDS = EXACT_FIELDS + (CREATIVITY_FIELD,)
TOTAL_ATTRIBUTES = len(LEGACY_FIELDS)


@dataclass(frozen=True)
class LegacyMatch:
    record: CareerRecord
    score: float

    @property
    def match_score(self) -> float:
        """原始得分保留两位小数（.5 向上，按浮点数的精确值），排序与展示都用它。"""
        return float(Decimal(self.score).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    @property
    def compatibility(self) -> int:
        return round_half_up(self.score / TOTAL_ATTRIBUTES * 100)

    def to_public(self) -> dict[str, Any]:
        return {
            "id": self.record.id,
            "name": self.record.name,
            "detail": self.record.detail,
            "matchScore": self.match_score,
            "compatibility": f"{self.compatibility}%",
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equals(a: Any, b: Any) -> bool:
    """类型严格的相等：缺失（None）永不相等，1 与 True、"1" 均不相等。"""
    if a is None or b is None:
        return False
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def validate_legacy_answers(answers: Any) -> Mapping[str, Any]:
    if not isinstance(answers, Mapping) or len(answers) == 0:
        raise InvalidInputError("输入数据无效。")
    return answers


def creativity_credit(career_level: float, user_level: float) -> float:
    """max(0, 1 - |diff| / 2)；超出浮点范围的数值视为差值无穷大，得 0 分。"""
    try:
        diff = abs(float(career_level) - float(user_level))
    except OverflowError:
        return 0.0
    return max(0.0, 1 - diff / 2)


def legacy_score(record: CareerRecord, answers: Mapping[str, Any]) -> float:
    score = 0.0
    for field in EXACT_FIELDS:
        if _strict_equals(record.attributes.get(field), answers.get(field)):
            score += 1
    career_level = record.attributes.get(CREATIVITY_FIELD)
    user_level = answers.get(CREATIVITY_FIELD)
    if _is_number(career_level) and _is_number(user_level):
        score += creativity_credit(career_level, user_level)
    return score


def legacy_match(record: CareerRecord, answers: Any) -> LegacyMatch:
    """校验答案并对单条记录打分。"""
    return LegacyMatch(record=record, score=legacy_score(record, validate_legacy_answers(answers)))
