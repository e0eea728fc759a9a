"""
Exception-to-HTTP mapping.

    NotFoundError                     -> 404
    SubscriptionNotBelongToUserError  -> 400
    RequestValidationError            -> 400
    DataAccessError                   -> 500 (generic message)
    anything else                     -> 500 (generic message)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from subscriptions_api.exceptions import DataAccessError, DomainError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "An unexpected error occurred"


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def data_access_error_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    # Already logged with traceback where it was raised
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_DETAIL})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": INTERNAL_ERROR_DETAIL})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(DataAccessError, data_access_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
