"""
MBTI 类型 → 加权匹配规则表。

纯内存静态表，由通用打分函数（scoring.calculate_match_score）统一消费，
不为每种类型写单独的判断逻辑。每种类型 3–4 条规则，顺序即展示/调试顺序。
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from career_suggest.core.errors import ConfigurationError, UnknownTypeError
from .mbti import all_types


class ComparisonMode(str, Enum):
    EXACT = "exact"
    MIN_THRESHOLD = "min_threshold"
    MAX_THRESHOLD = "max_threshold"


@dataclass(frozen=True)
class Criterion:
    """单条加权规则：attribute 与 expected 的比较方式 + 权重。"""
    attribute: str
    mode: ComparisonMode
    expected: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ConfigurationError(f"规则 {self.attribute} 的权重必须为正数，当前 {self.weight}")
        if self.mode is not ComparisonMode.EXACT and self.expected <= 0:
            raise ConfigurationError(
                f"规则 {self.attribute} 的阈值必须大于 0，当前 {self.expected}"
            )


def exact(attribute: str, expected: float, weight: float) -> Criterion:
    return Criterion(attribute, ComparisonMode.EXACT, expected, weight)


def at_least(attribute: str, threshold: float, weight: float) -> Criterion:
    return Criterion(attribute, ComparisonMode.MIN_THRESHOLD, threshold, weight)


def at_most(attribute: str, threshold: float, weight: float) -> Criterion:
    return Criterion(attribute, ComparisonMode.MAX_THRESHOLD, threshold, weight)


# 16 型匹配规则（分析家 / 外交家 / 守护者 / 探险家）
MBTI_CRITERIA: Dict[str, List[Criterion]] = {
    # 分析家
    "INTJ": [
        exact("people_person", 0, 3),
        exact("data_skill", 1, 3),
        at_least("creativity_level", 1, 2),
    ],
    "INTP": [
        exact("people_person", 0, 3),
        exact("tech_comfort", 1, 3),
        at_least("creativity_level", 2, 2),
    ],
    "ENTJ": [
        exact("people_person", 1, 3),
        exact("public_speaking", 1, 2),
        exact("data_skill", 1, 3),
    ],
    "ENTP": [
        exact("people_person", 1, 3),
        exact("public_speaking", 1, 2),
        at_least("creativity_level", 2, 3),
    ],
    # 外交家
    "INFJ": [
        exact("people_person", 1, 2),
        exact("teamwork", 1, 2),
        at_least("creativity_level", 1, 2),
        exact("public_speaking", 0, 1),
    ],
    "INFP": [
        exact("people_person", 0, 2),
        exact("artistic", 1, 3),
        at_least("creativity_level", 2, 3),
    ],
    "ENFJ": [
        exact("people_person", 1, 3),
        exact("public_speaking", 1, 2),
        exact("teamwork", 1, 3),
    ],
    "ENFP": [
        exact("people_person", 1, 2),
        exact("artistic", 1, 3),
        at_least("creativity_level", 2, 3),
    ],
    # 守护者
    "ISTJ": [
        exact("people_person", 0, 2),
        exact("data_skill", 1, 3),
        exact("preferred_work_env", 0, 2),
    ],
    "ISFJ": [
        exact("people_person", 1, 3),
        exact("teamwork", 0, 1),
        exact("data_skill", 1, 2),
    ],
    "ESTJ": [
        exact("people_person", 1, 2),
        exact("public_speaking", 1, 2),
        exact("preferred_work_env", 1, 1),
        exact("teamwork", 1, 2),
    ],
    "ESFJ": [
        exact("people_person", 1, 3),
        exact("teamwork", 1, 3),
        at_most("creativity_level", 1, 2),
    ],
    # 探险家
    "ISTP": [
        exact("people_person", 0, 2),
        exact("tech_comfort", 0, 1),
        exact("outdoor", 1, 3),
    ],
    "ISFP": [
        exact("people_person", 0, 2),
        exact("artistic", 1, 3),
        exact("outdoor", 1, 2),
    ],
    "ESTP": [
        exact("people_person", 1, 2),
        exact("outdoor", 1, 3),
        exact("public_speaking", 1, 2),
    ],
    "ESFP": [
        exact("people_person", 1, 3),
        exact("artistic", 1, 2),
        exact("preferred_work_env", 1, 2),
    ],
}

MIN_CRITERIA_PER_TYPE = 3
MAX_CRITERIA_PER_TYPE = 4


def criteria_for_type(
    mbti_type: str,
    table: Mapping[str, Sequence[Criterion]] = MBTI_CRITERIA,
) -> Sequence[Criterion]:
    """按类型取规则列表；未收录的类型抛出 UnknownTypeError（500）。"""
    criteria = table.get(mbti_type)
    if not criteria:
        raise UnknownTypeError(mbti_type)
    return criteria


def max_possible_score(criteria: Sequence[Criterion]) -> float:
    """满分 = 各规则权重之和（扣分前）。"""
    return sum(c.weight for c in criteria)


def validate_criteria_table(table: Mapping[str, Sequence[Criterion]] = MBTI_CRITERIA) -> None:
    """
    启动时校验规则表：16 型齐全、每型 3–4 条、同型内属性不重复。
    单条规则的权重/阈值在 Criterion 构造时已校验。
    """
    missing = [t for t in all_types() if t not in table]
    if missing:
        raise ConfigurationError(f"规则表缺少类型: {', '.join(missing)}")
    for mbti_type, criteria in table.items():
        if not MIN_CRITERIA_PER_TYPE <= len(criteria) <= MAX_CRITERIA_PER_TYPE:
            raise ConfigurationError(
                f"类型 {mbti_type} 的规则数应为 {MIN_CRITERIA_PER_TYPE}–{MAX_CRITERIA_PER_TYPE}，当前 {len(criteria)}"
            )
        keys = [c.attribute for c in criteria]
        if len(set(keys)) != len(keys):
            raise ConfigurationError(f"类型 {mbti_type} 的规则中有重复属性")
