from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sheetcollab.api import envelopes
from sheetcollab.api.http import health_router, sheets_router, revisions_router
from sheetcollab.core.config import settings
from sheetcollab.core.db import close_db, init_models

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    logger.info("Database tables are ready")
    yield
    await close_db()


app = FastAPI(
    title="SheetCollab",
    description="Совместное редактирование листов с историей ревизий",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации тела запроса отдаются как ParseError со статусом 200"""
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    error = envelopes.ParseError(message=str(exc.errors()))
    return JSONResponse(content=error.model_dump())


# Подключаем роутеры
app.include_router(health_router)
app.include_router(sheets_router)
app.include_router(revisions_router)


@app.get("/")
async def root():
    """Корневой эндпоинт с описанием API"""
    return {
        "message": "SheetCollab API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
