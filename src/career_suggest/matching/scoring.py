"""
加权规则打分：单条职业记录 × 规则列表 → 0–100 整数匹配分。

每条规则按比较方式给分（缺失属性按 0 计）：
- exact：weight * (1 - |value - expected|)，相差 1 即 0 分，序数属性相近给部分分
- min_threshold：value >= 阈值给满分，否则 weight * value / 阈值
- max_threshold：value <= 阈值给满分，否则 weight * 阈值 / value
然后对规则未覆盖的每个属性扣 5% 满分，截断到 >= 0，再归一化为百分制。
"""
from __future__ import annotations

import math
from typing import Sequence

from career_suggest.catalog.schemas import CareerRecord
from career_suggest.core.errors import ConfigurationError
from .criteria import ComparisonMode, Criterion, max_possible_score

# 每个未建模属性扣除的满分比例
UNMODELED_PENALTY_RATE = 0.05


def round_half_up(x: float) -> int:
    """四舍五入到整数（.5 向上），与前端展示的百分比保持一致。"""
    return int(math.floor(x + 0.5))


def criterion_score(value: float, criterion: Criterion) -> float:
    """单条规则得分。阈值类规则阈值 <= 0 视为配置错误。"""
    weight = criterion.weight
    expected = criterion.expected
    if criterion.mode is ComparisonMode.EXACT:
        return weight * (1 - abs(value - expected))
    if expected <= 0:
        raise ConfigurationError(f"规则 {criterion.attribute} 的阈值必须大于 0，当前 {expected}")
    if criterion.mode is ComparisonMode.MIN_THRESHOLD:
        if value >= expected:
            return weight
        return weight * (value / expected)
    if criterion.mode is ComparisonMode.MAX_THRESHOLD:
        if value <= expected:
            return weight
        return weight * (expected / value)
    raise ConfigurationError(f"未知的比较方式: {criterion.mode}")


def unmodeled_attributes(record: CareerRecord, criteria: Sequence[Criterion]) -> list[str]:
    """记录中未被任何规则引用的属性（标识/展示字段已不在 attributes 中）。"""
    referenced = {c.attribute for c in criteria}
    return [key for key in record.attributes if key not in referenced]


def raw_score(record: CareerRecord, criteria: Sequence[Criterion]) -> float:
    return sum(criterion_score(record.value(c.attribute), c) for c in criteria)


def calculate_match_score(record: CareerRecord, criteria: Sequence[Criterion]) -> int:
    """
    计算匹配分（0–100 整数）。纯函数：同一记录 + 同一规则总得到同一结果。
    """
    max_score = max_possible_score(criteria)
    if max_score <= 0:
        raise ConfigurationError("规则列表为空或权重之和不为正数")
    penalty = len(unmodeled_attributes(record, criteria)) * UNMODELED_PENALTY_RATE * max_score
    clamped = max(0.0, raw_score(record, criteria) - penalty)
    return round_half_up(100 * clamped / max_score)
