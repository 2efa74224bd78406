from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.exceptions import (
    TechMarketError,
    InvalidInput,
    NotFound,
    Unavailable,
    InsufficientStock,
)
from app.core.logging import setup_logging, get_logger
from app.db.session import create_db_and_tables

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

# Error kind -> HTTP status; anything not listed is a 500
ERROR_STATUS = {
    NotFound: 404,
    InvalidInput: 400,
    Unavailable: 400,
    InsufficientStock: 400,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.PROJECT_NAME)
    create_db_and_tables()
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="Catalog, reviews and shopping cart API for TechMarket"
)

@app.exception_handler(TechMarketError)
async def techmarket_error_handler(request: Request, exc: TechMarketError):
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

@app.get("/")
def read_root():
    return {"message": "Welcome to TechMarket API. Visit /docs for Swagger UI."}

from app.routers import cart, products, categories, reviews, users

app.include_router(products.router, prefix=f"{settings.API_V1_STR}/products", tags=["products"])
app.include_router(categories.router, prefix=f"{settings.API_V1_STR}/categories", tags=["categories"])
app.include_router(reviews.router, prefix=f"{settings.API_V1_STR}/reviews", tags=["reviews"])
app.include_router(users.router, prefix=f"{settings.API_V1_STR}/users", tags=["users"])
app.include_router(cart.router, prefix=f"{settings.API_V1_STR}/cart", tags=["cart"])

# Add CORS
from fastapi.middleware.cors import CORSMiddleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
