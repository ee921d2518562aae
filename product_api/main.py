# product_api/main.py
import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .core import authenticate, validate_product
from .database import ProductStore, seeded_store
from .errors import AppError, ForbiddenError, ValidationError, error_payload, internal_error_payload
from .logger import get_logger
from .logic import (
    create_product_logic, delete_product_logic, get_product_logic, list_all_logic,
    list_products_logic, product_stats_logic, search_products_logic, update_product_logic,
)

log = get_logger(__name__)

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."
SEARCH_QUERY_REQUIRED = "Search query 'name' is required"
PROTECTED_PREFIXES = ("/api/product", "/api/products")


# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def is_protected(path: str) -> bool:
    for prefix in PROTECTED_PREFIXES:
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def _reject_constant(token: str):
    raise ValueError(f"Unsupported JSON constant {token}")


async def _read_payload(request: Request) -> Any:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise ValidationError("Malformed JSON body") from e


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": message})


# ---------------------------
# Legacy unfiltered listing
# ---------------------------
legacy_router = APIRouter(prefix="/api/product")


@legacy_router.get("")
async def list_all_products(store: ProductStore = Depends(get_store)):
    return await list_all_logic(store)


# ---------------------------
# Product endpoints
# ---------------------------
router = APIRouter(prefix="/api/products")


@router.get("/", include_in_schema=False)
@router.get("")
async def list_products(category: Optional[str] = None, page: Optional[str] = None,
                        limit: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await list_products_logic(store, category, page, limit)


# literal segments must be registered before /{product_id}
@router.get("/search")
async def search_products(name: Optional[str] = None, store: ProductStore = Depends(get_store)):
    if not name:
        return _bad_request(SEARCH_QUERY_REQUIRED)
    return await search_products_logic(store, name)


@router.get("/stats")
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)


@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("/", status_code=201, include_in_schema=False)
@router.post("", status_code=201)
async def create_product(request: Request, store: ProductStore = Depends(get_store)):
    outcome = validate_product(await _read_payload(request))
    if not outcome.ok:
        return _bad_request(outcome.message)
    return await create_product_logic(store, outcome.product)


@router.put("/{product_id}")
async def update_product(product_id: str, request: Request, store: ProductStore = Depends(get_store)):
    outcome = validate_product(await _read_payload(request))
    if not outcome.ok:
        return _bad_request(outcome.message)
    return await update_product_logic(store, product_id, outcome.product)


@router.delete("/{product_id}")
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)


# ---------------------------
# Error handling
# ---------------------------
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    name = {404: "NotFoundError", 405: "MethodNotAllowed"}.get(exc.status_code, "HTTPError")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(name, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = seeded_store() if settings.seed_products else ProductStore()

    app = FastAPI(title="Product API (in-memory)")
    app.state.settings = settings
    app.state.store = store

    # registered first so it sits inside CORS and request logging
    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        if is_protected(request.url.path):
            if not authenticate(request.headers.get("x-api-key"), request.app.state.settings.api_key):
                log.warning("Rejected {} {}: invalid or missing API key", request.method, request.url.path)
                return JSONResponse(status_code=403, content=ForbiddenError().to_payload())
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        log.info("{} request for '{}'", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            # unclassified fault: keep details in the log, not in the response
            log.exception("Unhandled error on {} {}", request.method, request.url.path)
            return JSONResponse(status_code=500, content=internal_error_payload())
        log.info("{} {} -> {}", request.method, request.url.path, response.status_code)
        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_TEXT

    app.include_router(legacy_router)
    app.include_router(router)
    return app


app = create_app()
