"""
职业目录的数据模型：单条职业记录 + 只读目录。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, model_validator

# 展示/标识字段，不参与打分，也不计入「未建模属性」
IDENTITY_FIELDS = ("id", "name", "detail")

AttributeValue = Union[StrictInt, StrictFloat]


class CareerRecord(BaseModel):
    """
    职业记录（来自目录 JSON 的一项）。
    除 id / name / detail 外的所有键都视为数值属性，收进 attributes；属性集合允许因记录而异。
    """
    model_config = ConfigDict(frozen=True)

    id: Union[StrictInt, str] = Field(..., description="职业 ID")
    name: str = Field(..., description="职业名称，MBTI 路径按此去重")
    detail: str = Field("", description="职业描述")
    attributes: dict[str, AttributeValue] = Field(
        default_factory=dict, description="数值属性，如 people_person、creativity_level"
    )

    @model_validator(mode="before")
    @classmethod
    def _collect_attributes(cls, data: Any) -> Any:
        """扁平 JSON → {id, name, detail, attributes}。已是结构化形式时原样返回。"""
        if not isinstance(data, dict) or "attributes" in data:
            return data
        out = {k: data[k] for k in IDENTITY_FIELDS if k in data}
        out["attributes"] = {k: v for k, v in data.items() if k not in IDENTITY_FIELDS}
        return out

    def value(self, key: str) -> float:
        """取属性值；缺失视为 0。"""
        return self.attributes.get(key, 0)

    def to_public(self) -> dict[str, Any]:
        """还原为扁平 JSON（与目录文件中的形状一致），供响应使用。"""
        out: dict[str, Any] = {"id": self.id, "name": self.name, "detail": self.detail}
        out.update(self.attributes)
        return out


@dataclass(frozen=True)
class Catalog:
    """
    只读目录：完整记录序列 + 按 name 去重后的序列（首次出现者保留，顺序不变）。
    进程内加载一次，之后只读，可被并发请求安全共享。
    """
    records: tuple[CareerRecord, ...]
    unique_records: tuple[CareerRecord, ...]

    @classmethod
    def from_records(cls, records: list[CareerRecord] | tuple[CareerRecord, ...]) -> "Catalog":
        seen: set[str] = set()
        unique: list[CareerRecord] = []
        for record in records:
            if record.name in seen:
                continue
            seen.add(record.name)
            unique.append(record)
        return cls(records=tuple(records), unique_records=tuple(unique))

    def __len__(self) -> int:
        return len(self.records)
