"""FastAPI application for emvqr."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from .codes import CURRENCIES, MERCHANT_CATEGORIES, currency_alpha, describe_currency, describe_merchant_category
from .config import Settings, settings
from .errors import CodecError
from .integrity import validate_payload
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_codec_error
from .schemas import (
    CodeDescriptionResponse,
    DecodePayloadRequest,
    DecodePayloadResponse,
    GeneratePayloadRequest,
    GeneratePayloadResponse,
    PaymentPayloadSchema,
    ValidatePayloadRequest,
    ValidatePayloadResponse,
)
from .services.generator import PaymentQRGenerator
from .services.scan import PaymentScanner

logger = logging.getLogger("emvqr.api")


def _warn_insecure_defaults(app_settings: Settings) -> None:
    if app_settings.api_key != "dev-secret-key":
        return
    level = logging.ERROR if app_settings.environment == "production" else logging.WARNING
    logger.log(
        level,
        "api key is using the default value",
        extra={"config_key": "api_key", "environment": app_settings.environment},
    )


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    logger.info("application started", extra={"app_name": settings.app_name, "environment": settings.environment})
    _warn_insecure_defaults(settings)
    yield


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
app.add_middleware(RequestLoggingMiddleware)


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


@app.exception_handler(CodecError)
async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    path = route_path(request)
    logger.warning("codec error", extra={"code": exc.code, "path": path, "method": request.method})
    record_codec_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled exception", extra={"path": route_path(request), "method": request.method})
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post("/v1/payloads", response_model=GeneratePayloadResponse, tags=["payloads"], dependencies=[Depends(require_api_key)])
async def generate_payload(request: GeneratePayloadRequest) -> GeneratePayloadResponse:
    generator = PaymentQRGenerator()
    payload = generator.build_payload(
        merchant_name=request.merchant_name,
        merchant_city=request.merchant_city,
        amount=request.amount,
        merchant_guid=request.merchant_guid,
        merchant_identifier=request.merchant_identifier,
        merchant_category_code=request.merchant_category_code,
        currency_code=request.currency_code,
        country_code=request.country_code,
        initiation_method=request.initiation_method,
        additional_data=request.additional_data,
    )
    result = generator.generate(payload, render=request.render_png)

    return GeneratePayloadResponse(
        payload=result.encoded.payload,
        crc=result.encoded.crc,
        merchant_info=result.payload.merchant_info(),
        qr_png_base64=result.qr_png_base64,
    )


@app.post("/v1/payloads/decode", response_model=DecodePayloadResponse, tags=["payloads"], dependencies=[Depends(require_api_key)])
async def decode_payload(request: DecodePayloadRequest) -> DecodePayloadResponse:
    result = PaymentScanner().scan(request.payload)

    return DecodePayloadResponse(
        data=PaymentPayloadSchema.from_payload(result.payload),
        crc_valid=result.crc_valid,
        currency_description=result.currency_description,
        merchant_category_description=result.merchant_category_description,
    )


@app.post("/v1/payloads/validate", response_model=ValidatePayloadResponse, tags=["payloads"], dependencies=[Depends(require_api_key)])
async def validate(request: ValidatePayloadRequest) -> ValidatePayloadResponse:
    return ValidatePayloadResponse(valid=validate_payload(request.payload))


@app.get("/v1/currencies/{code}", response_model=CodeDescriptionResponse, tags=["codes"], dependencies=[Depends(require_api_key)])
async def get_currency(code: str) -> CodeDescriptionResponse:
    if code not in CURRENCIES:
        raise HTTPException(status_code=404, detail="Currency not found")
    return CodeDescriptionResponse(code=code, description=describe_currency(code), alpha=currency_alpha(code))


@app.get(
    "/v1/merchant-categories/{code}",
    response_model=CodeDescriptionResponse,
    tags=["codes"],
    dependencies=[Depends(require_api_key)],
)
async def get_merchant_category(code: str) -> CodeDescriptionResponse:
    if code not in MERCHANT_CATEGORIES:
        raise HTTPException(status_code=404, detail="Merchant category not found")
    return CodeDescriptionResponse(code=code, description=describe_merchant_category(code))
