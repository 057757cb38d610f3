# app/api/routers/health.py
from fastapi import APIRouter, Depends

from app.api.deps import get_city_store
from app.db.store import CityStore

router = APIRouter()

@router.get("/health", summary="Health check")
async def health_check(store: CityStore = Depends(get_city_store)):
    return {"status": "ok", "cities": len(store.list_cities())}
