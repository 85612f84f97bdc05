"""
两个推荐接口的响应模型。请求体是任意 JSON 对象，由匹配层自行校验（保持 400 + {error} 的错误形状）。
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Union


class ErrorResponse(BaseModel):
    """所有错误的统一返回格式，不含内部栈信息。"""
    error: str = Field(..., description="错误说明")


class MbtiSuggestResponse(BaseModel):
    """POST /api/mbti-suggest 响应。"""
    model_config = ConfigDict(populate_by_name=True)

    mbti_type: str = Field(..., alias="mbtiType", description="计算出的 4 字母 MBTI 类型")
    suggestions: list[dict[str, Any]] = Field(
        default_factory=list,
        description="按匹配分降序的职业记录（含全部属性与 matchScore 0–100）",
    )
    counts: dict[str, int] = Field(default_factory=dict, description="8 个字母的作答次数")


class LegacyCareerMatch(BaseModel):
    """POST /api/suggest-career 响应中的单条结果。"""
    model_config = ConfigDict(populate_by_name=True)

    id: Union[int, str] = Field(..., description="职业 ID")
    name: str = Field(..., description="职业名称")
    detail: str = Field("", description="职业描述")
    match_score: float = Field(..., alias="matchScore", description="原始得分，满分 9，保留两位小数")
    compatibility: str = Field(..., description="契合度百分比，如 \"78%\"")
