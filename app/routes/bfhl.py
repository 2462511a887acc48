from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from app.schemas.bfhl import (
    BfhlRequestSchema,
    BfhlResponseSchema,
    ErrorSchema,
    OperationCodeSchema,
)
from app.services.bfhl import ClassifyDataInteractor

router = APIRouter(prefix="/bfhl", tags=["bfhl"], route_class=DishkaRoute)


@router.post(
    "",
    summary="Classify tokens into numbers, alphabets and special characters",
    responses={400: {"model": ErrorSchema}, 500: {"model": ErrorSchema}},
)
async def process_data(
    payload: BfhlRequestSchema,
    classify_data: FromDishka[ClassifyDataInteractor],
) -> BfhlResponseSchema:
    return classify_data(payload.data)


@router.get("")
async def operation_code(
    classify_data: FromDishka[ClassifyDataInteractor],
) -> OperationCodeSchema:
    return classify_data.operation_code()
