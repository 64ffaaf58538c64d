import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from src.api.routers.health import router as health_router
from src.api.routers.items import router as items_router
from src.api.routers.members import router as members_router
from src.api.routers.orders import router as orders_router
from src.api.routers.simple_orders import router as simple_orders_router
from src.core.config import allowed_origins, settings
from src.core.errors import ShopError
from src.core.observability import configure_logging, get_logger, log_event, set_request_id
from src.db.base import Base
from src.db.seed import seed_demo_data
from src.db.session import SessionLocal, engine

configure_logging(settings.log_level)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    import src.db.models  # noqa: F401 (register all SQLAlchemy models)

    if settings.create_schema:
        Base.metadata.create_all(bind=engine)
    if settings.seed_demo_data:
        with SessionLocal() as db:
            seed_demo_data(db)
    yield


openapi_tags = [
    {"name": "Health", "description": "Service and dependency health checks."},
    {"name": "Members", "description": "Member registration and listing."},
    {"name": "Items", "description": "Catalog items (books, albums, movies)."},
    {"name": "Simple orders", "description": "Order listings following ToOne relations only."},
    {"name": "Orders", "description": "Order listings with order items, one version per fetch strategy."},
]

app = FastAPI(
    title=settings.app_name,
    description="Backend service for the shop (members, items, orders).",
    version="0.1.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    set_request_id(request_id)

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("%s %s -> unhandled error", request.method, request.url.path)
        response = JSONResponse(
            status_code=500,
            content={"detail": {"code": "INTERNAL_ERROR", "message": "internal server error"}},
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    response.headers["X-Request-ID"] = request_id
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    log_event(f"request_failed:{exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": {"code": exc.code, "message": exc.message}},
    )


app.include_router(health_router)
app.include_router(members_router)
app.include_router(items_router)
app.include_router(simple_orders_router)
app.include_router(orders_router)
