# app/main.py
import time
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import Base, engine
from app.exceptions import (
    COURSE_NOT_FOUND, INVALID_ARGUMENT,
    CourseNotFoundError, InvalidCourseArgumentError,
)
from app.logging_config import setup_logging
from app.routers import cursos


setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 建立資料表（若不存在）
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.APP_TITLE, version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


# CORS 設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 錯誤訊息固定，不帶細節
@app.exception_handler(CourseNotFoundError)
async def course_not_found_handler(request: Request, exc: CourseNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": COURSE_NOT_FOUND})


@app.exception_handler(InvalidCourseArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidCourseArgumentError):
    logger.warning("Invalid %s: %r", exc.field, exc.value)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": INVALID_ARGUMENT})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": INVALID_ARGUMENT})


# Routers
app.include_router(cursos.router)


@app.get("/")
def root():
    return {"message": "Course service is running!"}
