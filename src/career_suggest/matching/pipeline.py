"""
职业推荐流水线：（MBTI 时先分类）→ 对目录全部记录打分 → 降序排序 → 取 Top-K。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from career_suggest.catalog.schemas import Catalog, CareerRecord
from .criteria import criteria_for_type
from .legacy import LegacyMatch, legacy_score, validate_legacy_answers
from .mbti import tally_answers, type_from_counts, validate_mbti_answers
from .ranking import top_k
from .scoring import calculate_match_score


@dataclass(frozen=True)
class ScoredCareer:
    """单条 MBTI 推荐：职业记录 + 匹配分（仅用于响应）。"""
    record: CareerRecord
    match_score: int

    def to_public(self) -> dict[str, Any]:
        out = self.record.to_public()
        out["matchScore"] = self.match_score
        return out


@dataclass(frozen=True)
class MbtiSuggestion:
    mbti_type: str
    suggestions: list[ScoredCareer]
    counts: dict[str, int] = field(default_factory=dict)


def suggest_by_mbti(
    catalog: Catalog,
    answers: Any,
    k: int,
    *,
    standard_jp_axis: bool = False,
) -> MbtiSuggestion:
    """
    MBTI 路径：校验 16 题答案 → 计算类型 → 按规则表对去重目录全量打分 → 取前 k 条。
    答案不足抛 InvalidInputError；类型无规则抛 UnknownTypeError。
    """
    counts = tally_answers(validate_mbti_answers(answers))
    mbti_type = type_from_counts(counts, standard_jp_axis=standard_jp_axis)
    criteria = criteria_for_type(mbti_type)

    scored = [
        ScoredCareer(record=record, match_score=calculate_match_score(record, criteria))
        for record in catalog.unique_records
    ]
    results = top_k(scored, key=lambda s: s.match_score, k=k)
    logger.info(
        "MBTI {} scored {} careers, returning {}", mbti_type, len(scored), len(results)
    )
    return MbtiSuggestion(mbti_type=mbti_type, suggestions=results, counts=counts)


def suggest_by_legacy(catalog: Catalog, answers: Any, k: int) -> list[LegacyMatch]:
    """9 题旧版路径：对完整目录（不去重）逐条比较打分 → 取前 k 条。"""
    answers = validate_legacy_answers(answers)
    scored = [LegacyMatch(record=record, score=legacy_score(record, answers)) for record in catalog.records]
    results = top_k(scored, key=lambda m: m.match_score, k=k)
    logger.info(
        "Legacy match with {} answer fields scored {} careers, returning {}",
        len(answers),
        len(scored),
        len(results),
    )
    return results
