import os
from typing import List, Type

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import DocumentStore, get_store
from exceptions import SiteContentError, UnsupportedPlatformError
from logging_config import logger
from managers import MANAGERS, ContentManager
from platforms import platform_summary
from schemas import VideoResolveRequest, VideoValidateRequest
from video_formatter import get_platform_from_url, invalid_url_message, resolve_video, validate_url

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SiteContentError)
def site_content_error_handler(request: Request, exc: SiteContentError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ------------------------------
# Content CRUD routes
# ------------------------------

def build_content_router(manager_cls: Type[ContentManager]) -> APIRouter:
    """List/create/update/delete routes for one manager's collection, plus seed when it has defaults."""
    router = APIRouter()
    form_model = manager_cls.form_model
    record_model = manager_cls.record_model

    def get_manager(store: DocumentStore = Depends(get_store)) -> ContentManager:
        return manager_cls(store)

    @router.get("", response_model=List[record_model])
    def list_items(manager: ContentManager = Depends(get_manager)):
        return manager.list_all()

    @router.post("", response_model=record_model, status_code=201)
    def create_item(payload: form_model, manager: ContentManager = Depends(get_manager)):
        return manager.create(payload)

    @router.put("/{item_id}", response_model=record_model)
    def update_item(item_id: str, payload: form_model, manager: ContentManager = Depends(get_manager)):
        return manager.update(item_id, payload)

    @router.delete("/{item_id}")
    def delete_item(
        item_id: str,
        confirm: bool = Query(False, description="Must be true; deletes are not reversible"),
        manager: ContentManager = Depends(get_manager),
    ):
        manager.delete(item_id, confirmed=confirm)
        return {"status": "deleted"}

    if manager_cls.defaults:
        @router.post("/seed")
        def seed_items(manager: ContentManager = Depends(get_manager)):
            result = manager.seed()
            logger.info(f"Seeded {manager.collection}: {result}")
            return result

    return router


for slug, manager_cls in MANAGERS.items():
    app.include_router(build_content_router(manager_cls), prefix=f"/api/admin/{slug}", tags=[manager_cls.label])


# ------------------------------
# Video URL helpers
# ------------------------------

@app.get("/api/platforms")
def list_platforms():
    return platform_summary()


@app.post("/api/video/resolve")
def resolve_video_url(payload: VideoResolveRequest):
    platform = payload.platform or get_platform_from_url(payload.url)
    if platform is None:
        raise UnsupportedPlatformError(payload.url)
    return resolve_video(payload.url, platform)


@app.post("/api/video/validate")
def validate_video_url(payload: VideoValidateRequest):
    valid = validate_url(payload.url, payload.platform)
    return {
        "valid": valid,
        "message": None if valid else invalid_url_message(payload.platform),
    }


# ------------------------------
# Health and DB test
# ------------------------------

@app.get("/")
def root():
    return {"message": f"{settings.APP_NAME} running"}


@app.get("/test")
def test_database(store: DocumentStore = Depends(get_store)):
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_url": "✅ Set" if settings.DATABASE_URL else "❌ Not Set",
        "database_name": "✅ Set" if settings.DATABASE_NAME else "❌ Not Set",
        "connection_status": "Not Connected",
        "collections": [],
    }
    if store.database is None:
        return response
    response["database"] = "✅ Available"
    try:
        response["collections"] = store.collection_names()[:10]
        response["database"] = "✅ Connected & Working"
        response["connection_status"] = "Connected"
    except SiteContentError as e:
        logger.error(f"Database check failed: {e}", exc_info=True)
        response["database"] = f"⚠️ Connected but Error: {str(e)[:50]}"
    return response


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", settings.PORT))
    uvicorn.run(app, host="0.0.0.0", port=port)
