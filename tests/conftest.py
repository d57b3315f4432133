from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from emvqr.config import settings
from emvqr.crc import crc16_ccitt, format_crc
from emvqr.models import PaymentPayload


def _with_crc(body: str) -> str:
    """Append a correct ``6304`` CRC field to ``body``."""
    crc_input = f"{body}6304"
    return f"{crc_input}{format_crc(crc16_ccitt(crc_input))}"


# Tag 60 declares four characters for "NYC", so this body does not frame.
ACME_BODY = "000201010211520459995303840540510.005802US5910Acme, Inc.6004NYC"
NYC_BODY = "000201010211520459995303840540510.005802US5910Acme, Inc.6003NYC"


@pytest.fixture
def dakar_payload() -> PaymentPayload:
    return PaymentPayload.create_for_country("Test Shop", "Dakar", Decimal("1000.00"), "SN", "952", "5411")


@pytest.fixture
def acme_raw() -> str:
    return _with_crc(ACME_BODY)


@pytest.fixture
def nyc_raw() -> str:
    return _with_crc(NYC_BODY)


@pytest.fixture
def with_crc():
    return _with_crc


@pytest.fixture
def api_headers() -> dict:
    return {"X-API-Key": settings.api_key}


@pytest_asyncio.fixture
async def async_client():
    from emvqr.api import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
