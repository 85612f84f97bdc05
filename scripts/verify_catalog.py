#!/usr/bin/env python3
"""
目录与规则表离线验收：加载职业目录、校验规则表，并打印每种 MBTI 类型的首选职业。
不启动 HTTP 服务，直接调用匹配层。

用法：uv run python scripts/verify_catalog.py [catalog.json]
"""
import sys

from career_suggest.catalog import load_catalog
from career_suggest.core.config import log_level
from career_suggest.core.errors import CareerSuggestError
from career_suggest.core.logging import configure_logging
from career_suggest.matching import (
    all_types,
    calculate_match_score,
    criteria_for_type,
    validate_criteria_table,
)
from career_suggest.matching.ranking import top_k


def main(argv: list[str]) -> int:
    configure_logging(log_level())
    try:
        validate_criteria_table()
        catalog = load_catalog(argv[1] if len(argv) > 1 else None)
    except CareerSuggestError as e:
        print(f"失败: {e}")
        return 1

    print(f"记录数: {len(catalog.records)}，按名称去重后: {len(catalog.unique_records)}")
    for mbti_type in all_types():
        criteria = criteria_for_type(mbti_type)
        best = top_k(
            ((r, calculate_match_score(r, criteria)) for r in catalog.unique_records),
            key=lambda pair: pair[1],
            k=1,
        )
        if best:
            record, score = best[0]
            print(f"{mbti_type}: {record.name} ({score})")
        else:
            print(f"{mbti_type}: （目录为空）")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
