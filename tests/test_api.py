"""
API tests for payload generation, decoding, validation and code lookups.
"""

import logging
from decimal import Decimal

import pytest
from httpx import AsyncClient

from emvqr.api import _warn_insecure_defaults, app
from emvqr.config import Settings, settings
from emvqr.integrity import validate_payload


class TestSystemEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_metrics(self, async_client: AsyncClient):
        response = await async_client.get("/metrics")
        assert response.status_code == 200
        assert "emvqr_payloads_encoded" in response.text

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, async_client: AsyncClient):
        response = await async_client.get("/health", headers={"X-Request-ID": "req-1"})
        assert response.headers["X-Request-ID"] == "req-1"


class TestApplicationSettings:
    def test_title_from_settings(self):
        assert app.title == settings.app_name

    def test_default_key_is_an_error_in_production(self, caplog):
        with caplog.at_level(logging.WARNING, logger="emvqr.api"):
            _warn_insecure_defaults(Settings(environment="production", api_key="dev-secret-key"))
        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].environment == "production"

    def test_default_key_is_a_warning_in_development(self, caplog):
        with caplog.at_level(logging.WARNING, logger="emvqr.api"):
            _warn_insecure_defaults(Settings(environment="development", api_key="dev-secret-key"))
        assert caplog.records[-1].levelno == logging.WARNING

    def test_custom_key_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="emvqr.api"):
            _warn_insecure_defaults(Settings(api_key="rotated"))
        assert not caplog.records


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_missing_key(self, async_client: AsyncClient):
        response = await async_client.post("/v1/payloads/validate", json={"payload": ""})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_wrong_key(self, async_client: AsyncClient):
        response = await async_client.post(
            "/v1/payloads/validate", json={"payload": ""}, headers={"X-API-Key": "not-the-key"}
        )
        assert response.status_code == 401


class TestGeneratePayload:
    @pytest.mark.asyncio
    async def test_generate(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads",
            json={
                "merchant_name": "Test Shop",
                "merchant_city": "Dakar",
                "amount": "1000.00",
                "merchant_category_code": "5411",
                "currency_code": "952",
                "country_code": "SN",
            },
            headers=api_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["payload"].startswith("000201")
        assert "52045411" in body["payload"]
        assert body["payload"].endswith("6304" + body["crc"])
        assert body["merchant_info"] == "Test Shop - Dakar"
        assert body["qr_png_base64"] is None
        assert validate_payload(body["payload"])

    @pytest.mark.asyncio
    async def test_static_initiation(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads",
            json={"merchant_name": "Shop", "merchant_city": "Dakar", "amount": 5, "initiation_method": "11"},
            headers=api_headers,
        )
        assert response.status_code == 200
        assert response.json()["payload"].startswith("000201010211")

    @pytest.mark.asyncio
    async def test_invalid_field(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads",
            json={"merchant_name": "", "merchant_city": "Dakar", "amount": "1.00"},
            headers=api_headers,
        )
        assert response.status_code == 422
        assert response.json()["code"] == "ERR_INVALID_FIELD"

    @pytest.mark.asyncio
    async def test_schema_rejects_bad_currency(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads",
            json={"merchant_name": "Shop", "merchant_city": "Dakar", "amount": "1.00", "currency_code": "XOF"},
            headers=api_headers,
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_schema_rejects_negative_amount(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads",
            json={"merchant_name": "Shop", "merchant_city": "Dakar", "amount": "-1"},
            headers=api_headers,
        )
        assert response.status_code == 422


class TestDecodePayload:
    @pytest.mark.asyncio
    async def test_decode(self, async_client: AsyncClient, api_headers: dict, nyc_raw: str):
        response = await async_client.post("/v1/payloads/decode", json={"payload": nyc_raw}, headers=api_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["crc_valid"] is True
        assert body["data"]["currency_code"] == "840"
        assert body["data"]["country_code"] == "US"
        assert body["data"]["merchant_name"] == "Acme, Inc."
        assert Decimal(str(body["data"]["amount"])) == Decimal("10.00")
        assert body["currency_description"] == "US Dollar (USD)"

    @pytest.mark.asyncio
    async def test_decode_malformed(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post(
            "/v1/payloads/decode", json={"payload": "0002015999Acme"}, headers=api_headers
        )
        assert response.status_code == 422
        assert response.json()["code"] == "ERR_MALFORMED_FRAMING"

    @pytest.mark.asyncio
    async def test_decode_misframed_city(self, async_client: AsyncClient, api_headers: dict, acme_raw: str):
        response = await async_client.post("/v1/payloads/decode", json={"payload": acme_raw}, headers=api_headers)
        assert response.status_code == 422
        assert response.json()["code"] == "ERR_MALFORMED_FRAMING"

    @pytest.mark.asyncio
    async def test_decode_bad_amount(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post("/v1/payloads/decode", json={"payload": "5403abc"}, headers=api_headers)
        assert response.status_code == 422
        assert response.json()["code"] == "ERR_MALFORMED_AMOUNT"


class TestValidatePayload:
    @pytest.mark.asyncio
    async def test_valid(self, async_client: AsyncClient, api_headers: dict, nyc_raw: str):
        response = await async_client.post("/v1/payloads/validate", json={"payload": nyc_raw}, headers=api_headers)
        assert response.json() == {"valid": True}

    @pytest.mark.asyncio
    async def test_malformed_is_not_an_error(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.post("/v1/payloads/validate", json={"payload": "garbage"}, headers=api_headers)
        assert response.status_code == 200
        assert response.json() == {"valid": False}


class TestCodeLookups:
    @pytest.mark.asyncio
    async def test_currency(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.get("/v1/currencies/952", headers=api_headers)
        assert response.status_code == 200
        assert response.json() == {"code": "952", "description": "West African CFA Franc (XOF)", "alpha": "XOF"}

    @pytest.mark.asyncio
    async def test_unknown_currency(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.get("/v1/currencies/000", headers=api_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_merchant_category(self, async_client: AsyncClient, api_headers: dict):
        response = await async_client.get("/v1/merchant-categories/5812", headers=api_headers)
        assert response.status_code == 200
        assert response.json()["description"] == "Eating Places, Restaurants"
