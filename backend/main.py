import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import dishes_router, orders_router
from api.dependencies import get_dishes_service, get_orders_service
from config import settings
from constants import LOGGER_NAME, SERVER_ERROR_MESSAGE
from errors import ApiError, MethodNotAllowedError, NotFoundError, ValidationError

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(settings.log_level)

app = FastAPI(title="GrubDash API")

if settings.allowed_origins == ["*"]:
    allow_origins = ["*"]
else:
    allow_origins = settings.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(orders_router)
app.include_router(dishes_router)


def _error_response(error: ApiError, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message},
        headers=headers,
    )


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "%s %s rejected status=%s error=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return _error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = NotFoundError(f"Path not found: {request.url.path}")
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowedError(f"{request.method} not allowed for {request.url.path}")
    else:
        error = ApiError(str(exc.detail), status_code=exc.status_code)
    logger.warning("%s %s status=%s", request.method, request.url.path, error.status_code)
    return _error_response(error, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s unreadable body: %s", request.method, request.url.path, exc.errors())
    return _error_response(ValidationError("Request body must be a JSON object"))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR_MESSAGE},
    )


@app.on_event("startup")
async def _on_startup() -> None:
    logger.info(
        "Store ready orders=%s dishes=%s",
        len(get_orders_service().repository),
        len(get_dishes_service().repository),
    )
    if allow_origins == ["*"]:
        logger.warning(
            "CORS is set to allow all origins; set ALLOWED_ORIGINS to explicit values outside local dev."
        )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    if request.method == "OPTIONS":
        origin = request.headers.get("origin", "")
        logger.info("CORS preflight %s %s origin=%s", request.method, request.url.path, origin)
    response = await call_next(request)
    logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response
