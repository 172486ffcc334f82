import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth.router import router as auth_router
from candles.errors import CandleError, InvalidInput
from candles.router import router as candles_router
from config import settings
from flag.router import router as flag_router
from logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(flag_router)
app.include_router(candles_router)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"message": f"invalid request: {exc.field}"})


@app.exception_handler(CandleError)
async def candle_error_handler(request: Request, exc: CandleError):
    # callers only see a generic message, the kind is kept in the log
    logger.warning("%s failed: %s: %s", request.url.path, type(exc).__name__, exc)
    return JSONResponse(status_code=400, content={"message": "calculation error"})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": "invalid request"})


@app.get("/")
def root():
    return {"status": "Backend running"}
