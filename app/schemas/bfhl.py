from typing import Any

from app.schemas.base import BaseSchema


class BfhlRequestSchema(BaseSchema):
    data: Any = None


class BfhlResponseSchema(BaseSchema):
    is_success: bool = True
    user_id: str
    email: str
    roll_number: str
    odd_numbers: list[str]
    even_numbers: list[str]
    alphabets: list[str]
    special_characters: list[str]
    sum: str
    concat_string: str


class OperationCodeSchema(BaseSchema):
    operation_code: int = 1
    user_id: str


class ErrorSchema(BaseSchema):
    is_success: bool = False
    error: str
