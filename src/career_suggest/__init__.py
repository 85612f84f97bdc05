"""
career_suggest：职业推荐服务。

MBTI 16 题或 9 题属性问卷 → 对只读职业目录打分 → 返回匹配度最高的职业。
"""

__version__ = "0.1.0"
