"""
匹配：MBTI 问卷分类、加权规则打分、9 题旧版逐项匹配、排序取 Top-K。
打分全部为纯函数，对只读目录做一次全量计算，无共享可变状态。
"""
from .mbti import classify_answers, tally_answers, type_from_counts, all_types
from .criteria import (
    MBTI_CRITERIA,
    ComparisonMode,
    Criterion,
    criteria_for_type,
    max_possible_score,
    validate_criteria_table,
)
from .scoring import calculate_match_score, criterion_score
from .legacy import LEGACY_FIELDS, LegacyMatch, legacy_match
from .ranking import top_k
from .pipeline import MbtiSuggestion, ScoredCareer, suggest_by_legacy, suggest_by_mbti

__all__ = [
    "classify_answers",
    "tally_answers",
    "type_from_counts",
    "all_types",
    "MBTI_CRITERIA",
    "ComparisonMode",
    "Criterion",
    "criteria_for_type",
    "max_possible_score",
    "validate_criteria_table",
    "calculate_match_score",
    "criterion_score",
    "LEGACY_FIELDS",
    "LegacyMatch",
    "legacy_match",
    "top_k",
    "MbtiSuggestion",
    "ScoredCareer",
    "suggest_by_legacy",
    "suggest_by_mbti",
]
