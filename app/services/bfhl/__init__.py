import json
import logging
from typing import Any

from dishka import Provider, Scope, provide

from app.schemas.bfhl import BfhlResponseSchema, OperationCodeSchema
from app.services.bfhl.classifier import classify
from app.services.errors import InternalFailureError, InvalidInputError
from app.settings.identity import IdentitySettings

logger = logging.getLogger(__name__)


def normalize(value: Any) -> str:
    """Text form of a JSON value, as a JavaScript client would print it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


class ClassifyDataInteractor:
    def __init__(self, identity: IdentitySettings):
        self.identity = identity

    def __call__(self, data: Any) -> BfhlResponseSchema:
        if not isinstance(data, list):
            raise InvalidInputError()
        tokens = [normalize(item) for item in data]
        try:
            result = classify(tokens)
        except Exception:
            logger.exception("Failed to classify %d tokens", len(tokens))
            raise InternalFailureError()
        logger.info(
            "Classified %d tokens: odd=%d even=%d alphabets=%d special=%d",
            len(tokens),
            len(result.odd_numbers),
            len(result.even_numbers),
            len(result.alphabets),
            len(result.special_characters),
        )
        return BfhlResponseSchema(
            user_id=self.identity.user_id,
            email=self.identity.email,
            roll_number=self.identity.roll_number,
            odd_numbers=result.odd_numbers,
            even_numbers=result.even_numbers,
            alphabets=result.alphabets,
            special_characters=result.special_characters,
            sum=result.sum,
            concat_string=result.concat_string,
        )

    def operation_code(self) -> OperationCodeSchema:
        return OperationCodeSchema(user_id=self.identity.user_id)


class BfhlServicesProvider(Provider):
    scope = Scope.REQUEST

    classify_data = provide(ClassifyDataInteractor)
