# consult_match/schemas/base_schema.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    所有 API Schema 的基底
    - 對外 (JSON) 使用 camelCase，例如 company_name <-> companyName
    - 內部 (Python) 仍使用 snake_case，兩種寫法都接受
    - 可直接從 ORM 物件建立
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(value):
    """
    部分更新 (PATCH 語意) 用：欄位可以不傳，但不能明確傳 null
    (注意) 對應的欄位在資料表為 NOT NULL，或 Out Schema 不接受 None
    """
    if value is None:
        raise ValueError("此欄位不可為 null")
    return value
