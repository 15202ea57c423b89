import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.common import get_controllers
from app.common.config import AppConfig
from app.common.db_connect import init_db

logger.remove()
logger.add(sys.stderr, level=AppConfig.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AppConfig.USER_REPOSITORY == "sql":
        init_db()
        logger.info("Database schema ready")
    yield


app = FastAPI(lifespan=lifespan)

# Use FastAPI's built-in origin pattern matching for CORS
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1|192\.168\.\d+\.\d+)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for controller in get_controllers():
    app.include_router(controller().router)
