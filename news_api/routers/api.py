from fastapi import APIRouter

from news_api.endpoints import ENDPOINTS

router = APIRouter(prefix="/api", tags=["api"])

@router.get("")
async def get_endpoints():
    return {"endpoints": ENDPOINTS}
