"""
加权规则打分单元测试：单条规则、未建模属性扣分、截断与归一化、规则表校验。
"""
import pytest

from career_suggest.catalog import CareerRecord, load_catalog
from career_suggest.core.config import PROJECT_ROOT
from career_suggest.core.errors import ConfigurationError, UnknownTypeError
from career_suggest.matching.criteria import (
    MBTI_CRITERIA,
    ComparisonMode,
    Criterion,
    at_least,
    at_most,
    criteria_for_type,
    exact,
    max_possible_score,
    validate_criteria_table,
)
from career_suggest.matching.mbti import all_types
from career_suggest.matching.scoring import (
    calculate_match_score,
    criterion_score,
    round_half_up,
    unmodeled_attributes,
)

INTJ = criteria_for_type("INTJ")  # people_person=0 (3), data_skill=1 (3), creativity_level>=1 (2)


def _record(**attributes) -> CareerRecord:
    return CareerRecord.model_validate({"id": 1, "name": "测试职业", "detail": "", **attributes})


class TestCriterionScore:
    def test_exact_equal_full_weight(self):
        """exact 相等得满权重。"""
        assert criterion_score(0, exact("people_person", 0, 3)) == 3

    def test_exact_off_by_one_zero(self):
        """二值属性差 1 得 0 分。"""
        assert criterion_score(1, exact("people_person", 0, 3)) == 0
        assert criterion_score(0, exact("people_person", 1, 3)) == 0

    def test_exact_partial_credit_for_ordinal(self):
        """有序属性差值小于 1 时按比例给分。"""
        assert criterion_score(2.5, exact("creativity_level", 2, 4)) == pytest.approx(2.0)

    @pytest.mark.parametrize("value", [2, 3, 100])
    def test_min_threshold_met_full_weight(self, value):
        """达到下限得满权重。"""
        assert criterion_score(value, at_least("creativity_level", 2, 3)) == 3

    def test_min_threshold_fractional(self):
        """低于下限按 value / threshold 给分。"""
        assert criterion_score(1, at_least("creativity_level", 2, 3)) == pytest.approx(1.5)
        assert criterion_score(0, at_least("creativity_level", 2, 3)) == 0

    def test_max_threshold(self):
        """不超过上限得满权重，超过按 threshold / value 给分。"""
        c = at_most("creativity_level", 1, 2)
        assert criterion_score(0, c) == 2
        assert criterion_score(1, c) == 2
        assert criterion_score(2, c) == pytest.approx(1.0)
        assert criterion_score(4, c) == pytest.approx(0.5)


class TestCriterionValidation:
    def test_non_positive_weight_rejected(self):
        """权重必须为正。"""
        with pytest.raises(ConfigurationError):
            exact("people_person", 1, 0)
        with pytest.raises(ConfigurationError):
            exact("people_person", 1, -2)

    @pytest.mark.parametrize("mode", [ComparisonMode.MIN_THRESHOLD, ComparisonMode.MAX_THRESHOLD])
    def test_non_positive_threshold_rejected(self, mode):
        """阈值模式的阈值必须为正。"""
        with pytest.raises(ConfigurationError):
            Criterion("creativity_level", mode, 0, 1)

    def test_exact_allows_zero_expected(self):
        """exact 可以期望 0。"""
        assert exact("people_person", 0, 1).expected == 0


class TestCalculateMatchScore:
    def test_perfect_match_without_extra_attributes(self):
        """全部规则满足且无多余属性 → 100。"""
        record = _record(people_person=0, data_skill=1, creativity_level=2)
        assert calculate_match_score(record, INTJ) == 100

    def test_unmodeled_attributes_penalised(self):
        """每个未建模属性扣总权重的 5%。"""
        # 6 个未建模属性：扣 6 * 5% * 8 = 2.4，(8 - 2.4) / 8 = 70%
        record = _record(
            people_person=0, data_skill=1, creativity_level=2,
            tech_comfort=1, public_speaking=0, artistic=0, outdoor=0, teamwork=0, preferred_work_env=0,
        )
        assert unmodeled_attributes(record, INTJ) == [
            "tech_comfort", "public_speaking", "artistic", "outdoor", "teamwork", "preferred_work_env",
        ]
        assert calculate_match_score(record, INTJ) == 70

    def test_identity_fields_not_penalised(self):
        """id、name、detail 不算未建模属性。"""
        record = _record(people_person=0, data_skill=1, creativity_level=1)
        assert unmodeled_attributes(record, INTJ) == []

    def test_missing_attributes_default_to_zero(self):
        """缺失属性按 0 计算。"""
        # people_person 缺失 → 0，正好满足 exact 0（3 分）；其余 0 分 → 3 / 8 = 37.5% → 38
        assert calculate_match_score(_record(), INTJ) == 38

    def test_heavy_penalty_clamped_to_zero(self):
        """扣分超过得分时截断为 0。"""
        extras = {f"extra_{i}": 1 for i in range(40)}
        record = _record(people_person=0, data_skill=1, creativity_level=3, **extras)
        assert calculate_match_score(record, INTJ) == 0

    def test_deterministic(self):
        """同样输入得同样分数。"""
        record = _record(people_person=1, data_skill=1, creativity_level=0, outdoor=1)
        first = calculate_match_score(record, INTJ)
        assert all(calculate_match_score(record, INTJ) == first for _ in range(5))

    def test_empty_criteria_is_configuration_error(self):
        """空规则列表是配置错误。"""
        with pytest.raises(ConfigurationError):
            calculate_match_score(_record(people_person=0), [])

    @pytest.mark.parametrize("mbti_type", all_types())
    def test_catalog_scores_within_bounds(self, mbti_type):
        """内置目录在每种类型下的得分都是 0–100 的整数。"""
        catalog = load_catalog(PROJECT_ROOT / "data" / "careers.json")
        criteria = criteria_for_type(mbti_type)
        for record in catalog.records:
            score = calculate_match_score(record, criteria)
            assert isinstance(score, int)
            assert 0 <= score <= 100


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(12.5, 13), (37.5, 38), (12.49, 12), (0.0, 0), (99.5, 100)])
    def test_values(self, value, expected):
        """.5 向上取整。"""
        assert round_half_up(value) == expected


class TestCriteriaTable:
    def test_default_table_valid(self):
        """内置规则表通过校验。"""
        validate_criteria_table()

    def test_every_type_has_three_or_four_positive_criteria(self):
        """每种类型 3–4 条正权重规则。"""
        for mbti_type in all_types():
            criteria = MBTI_CRITERIA[mbti_type]
            assert 3 <= len(criteria) <= 4
            assert max_possible_score(criteria) == sum(c.weight for c in criteria)
            assert all(c.weight > 0 for c in criteria)

    def test_unknown_type(self):
        """未知类型 → UnknownTypeError（500）。"""
        with pytest.raises(UnknownTypeError) as exc:
            criteria_for_type("XXXX")
        assert isinstance(exc.value, ConfigurationError)
        assert exc.value.status_code == 500

    def test_missing_type_detected(self):
        """缺少类型时校验失败。"""
        table = {k: v for k, v in MBTI_CRITERIA.items() if k != "ESFP"}
        with pytest.raises(ConfigurationError, match="ESFP"):
            validate_criteria_table(table)

    def test_wrong_criteria_count_detected(self):
        """规则条数不对时校验失败。"""
        table = dict(MBTI_CRITERIA)
        table["INTJ"] = [exact("people_person", 0, 1), exact("data_skill", 1, 1)]
        with pytest.raises(ConfigurationError):
            validate_criteria_table(table)

    def test_duplicate_attribute_detected(self):
        """同一类型重复引用属性时校验失败。"""
        table = dict(MBTI_CRITERIA)
        table["INTJ"] = [exact("people_person", 0, 1)] * 3
        with pytest.raises(ConfigurationError):
            validate_criteria_table(table)
