"""
共享夹具：小型内存目录 + 注入该目录的 TestClient。
不读取 data/careers.json，结果可手算核对。
"""
import pytest
from fastapi.testclient import TestClient

from career_suggest.api.app import create_app
from career_suggest.catalog import parse_catalog

_ATTRS = (
    "people_person",
    "tech_comfort",
    "public_speaking",
    "artistic",
    "outdoor",
    "teamwork",
    "data_skill",
    "preferred_work_env",
    "creativity_level",
)


def _record(id_, name, values, **extra):
    out = {"id": id_, "name": name, "detail": f"{name}的工作内容"}
    out.update(dict(zip(_ATTRS, values)))
    out.update(extra)
    return out


SAMPLE_RECORDS = [
    _record(1, "研究员", (0, 1, 0, 0, 0, 0, 1, 0, 3)),
    _record(2, "销售经理", (1, 0, 1, 0, 1, 1, 0, 1, 1)),
    _record(3, "平面设计师", (0, 1, 0, 1, 0, 0, 0, 0, 3)),
    _record(4, "护士", (1, 0, 0, 0, 0, 1, 0, 1, 0)),
    # 与 id=1 同名：MBTI 路径去重后不出现，旧版路径仍参与打分
    _record(5, "研究员", (0, 1, 0, 0, 0, 0, 1, 0, 2)),
    # 比其他记录多一个规则表之外的属性
    _record(6, "飞行员", (0, 1, 0, 0, 1, 1, 1, 1, 0), physical_fitness=1),
]

# 16 题，I/N/T/J 各 4 次
INTJ_PATTERN_ANSWERS = {f"q{i}": letter for i, letter in enumerate("INTJ" * 4, start=1)}

# 与 id=1「研究员」属性完全一致的旧版答案
RESEARCHER_LEGACY_ANSWERS = dict(zip(_ATTRS, (0, 1, 0, 0, 0, 0, 1, 0, 3)))


@pytest.fixture
def sample_catalog():
    return parse_catalog(SAMPLE_RECORDS)


@pytest.fixture
def client(sample_catalog, monkeypatch):
    """注入样例目录的客户端；清理可能影响结果的环境变量。"""
    for name in (
        "CAREER_SUGGEST_MBTI_TOP_K",
        "CAREER_SUGGEST_LEGACY_TOP_K",
        "CAREER_SUGGEST_STANDARD_JP_AXIS",
    ):
        monkeypatch.delenv(name, raising=False)
    return TestClient(create_app(catalog=sample_catalog))


@pytest.fixture
def intj_pattern_answers():
    return dict(INTJ_PATTERN_ANSWERS)


@pytest.fixture
def researcher_answers():
    return dict(RESEARCHER_LEGACY_ANSWERS)
