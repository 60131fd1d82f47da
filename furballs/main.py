from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from .config import config
from .routes import auth, admin, donations, donation_requests, donation_goals, gallery
from .utils.custom_exception import CustomMessageException


@asynccontextmanager
async def log_lifespan(app_: FastAPI):
    logger.info(
        f"Starting with project {config.firebase_project_id!r}, database {config.firebase_database_url!r}, "
        f"bucket {config.firebase_storage_bucket!r}"
    )
    if not config.firebase_auth_token:
        logger.warning("firebase_auth_token is not set, remote stores are accessed without credentials")
    if not config.admin_emails:
        logger.warning("admin_emails is empty, every signed in Firebase user is treated as an admin")

    yield

    logger.info("Shutting down")


def _field_message(err: dict) -> str:
    # "body.contact" -> "[contact] ..."
    field = ".".join(str(part) for part in err["loc"][1:])
    return f"[{field}] {err['msg']}" if field else err["msg"]


app = FastAPI(
    lifespan=log_lifespan,
    debug=config.is_debug,
    openapi_url="/openapi.json" if config.is_debug else None,
    root_path=config.root_path,
)
app.add_middleware(
    CORSMiddleware,  # type: ignore
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

for module in (auth, admin, donations, donation_requests, donation_goals, gallery):
    app.include_router(module.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"errors": [_field_message(err) for err in exc.errors()]}, status_code=422)


@app.exception_handler(CustomMessageException)
async def custom_message_exception_handler(request: Request, exc: CustomMessageException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.messages}")
    return JSONResponse({"errors": exc.messages}, status_code=exc.status_code)
