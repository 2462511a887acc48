from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from app.routes.bfhl import router as bfhl_router
from app.schemas.health import HealthSchema


router = APIRouter(route_class=DishkaRoute)
router.include_router(bfhl_router)


@router.get("/")
async def health() -> HealthSchema:
    return HealthSchema(
        message="BFHL API is running",
        endpoints={
            "POST /bfhl": "Main API endpoint",
            "GET /bfhl": "Get operation code",
        },
    )
