from app.schemas.base import BaseSchema


class HealthSchema(BaseSchema):
    message: str
    endpoints: dict[str, str]
