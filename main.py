import logging
import os
import secrets
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from fastapi import exceptions as exc
from api.pages import pages_router
from api.v1.router import contact_router, content_router
from core.setup import http_client
import handler as hlp
from config.setting import settings
from error import ServerError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.join(ROOT_DIR, "static")
ASSETS_DIR = os.path.join(ROOT_DIR, settings.ASSETS_FOLDER)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release pooled connections to the email API
    await http_client.close()
    logger.info("HTTP client closed")


app = FastAPI(
    title="Kauhan Hernandes Portfolio",
    version="1.0.0",
    description="Personal portfolio with a contact form",
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY or secrets.token_urlsafe(32),
    same_site="lax",
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


app.add_exception_handler(ValueError, hlp.value_error_handler)
app.add_exception_handler(ValidationError, hlp.validation_error_handler)
app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
app.add_exception_handler(exc.HTTPException, hlp.validation_http_exceptions_handler)
app.add_exception_handler(ServerError, hlp.server_error_handler)


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
# Profile photo, project screenshots and the CV, deployed next to the code
app.mount("/imgs", StaticFiles(directory=ASSETS_DIR, check_dir=False), name="imgs")
app.include_router(pages_router)
app.include_router(content_router, prefix=settings.API_PREFIX)
app.include_router(contact_router, prefix=settings.API_PREFIX)


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}
