import time

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException

from agromart_ussd.api.schemas import UssdRequest
from agromart_ussd.core.config import settings
from agromart_ussd.domain.services.input_parser import level_of
from agromart_ussd.domain.services.pii_masking import mask_for_log, mask_phone
from agromart_ussd.domain.services.ussd_service import handle_ussd
from agromart_ussd.domain.services.ussd_text import end

router = APIRouter()


async def _read_body(request: Request) -> UssdRequest:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        body = await request.json()
    else:
        body = dict(await request.form())
    if not isinstance(body, dict):
        body = {}
    if body.get("text") is None:
        body["text"] = ""
    body["text"] = str(body["text"])
    return UssdRequest.model_validate(body)


@router.post("/ussd", response_class=PlainTextResponse)
async def ussd_callback(request: Request):
    try:
        body = await _read_body(request)
    except (ValueError, HTTPException) as exc:
        # Undecodable JSON, broken form data or fields of the wrong shape
        logger.warning("Rejected USSD request body: {}", exc)
        return PlainTextResponse(end("SERVER_ERROR"))

    session_id = body.session_id or f"session_{int(time.time() * 1000)}"

    logger.info(
        "USSD request session={} phone={} level={} text={}",
        session_id, mask_phone(body.phone_number or ""), level_of(body.text),
        mask_for_log(body.text),
    )

    try:
        reply = await handle_ussd(session_id, body.text)
    except Exception:
        logger.exception("USSD processing error for session {}", session_id)
        reply = end("SERVER_ERROR")

    return PlainTextResponse(reply)


@router.get("/ussd")
async def ussd_status():
    return {
        "status": "active",
        "service": "Lovitti Agro Mart USSD",
        "code": settings.USSD_SERVICE_CODE,
        "description": "Agricultural marketplace USSD service",
        "features": [
            "Browse Products",
            "Order Tracking",
            "Help",
            "KYC Registration",
        ],
        "sessionBackend": settings.SESSION_BACKEND,
    }
