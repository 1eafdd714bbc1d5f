"""
Spreadsheet feed integration.

Fetches one sheet of the shared spreadsheet through the gviz JSON export.
The export wraps its JSON in a JavaScript call:

    /*O_o*/
    google.visualization.Query.setResponse({"status":"ok","table":{...}});

One blocking request per call. No retry and no cache: a failure is raised
to the caller, which owns any re-fetch policy.
"""

from enum import Enum
import json

import requests
import structlog

from config import settings
from exceptions import SheetFetchError, SheetEnvelopeError
from models.sheet import RawTable

logger = structlog.get_logger(__name__)


class SheetSource(str, Enum):
    """Named sheets of the feed."""
    PRODUCTION = "production"
    INVOICE = "invoice"

    @property
    def sheet_name(self) -> str:
        if self is SheetSource.PRODUCTION:
            return settings.production_sheet_name
        return settings.invoice_sheet_name


def fetch_table(source: SheetSource) -> RawTable:
    """
    Fetch a sheet and return its raw table.

    Args:
        source: Which sheet to fetch

    Returns:
        RawTable with the sheet's rows

    Raises:
        SheetFetchError: If the request fails or the response is unreadable
    """
    sheet = source.sheet_name
    url = settings.gviz_url(sheet)

    try:
        logger.info("fetching_sheet", source=source.value, sheet=sheet)

        response = requests.get(url, timeout=settings.sheet_fetch_timeout_seconds)
        response.raise_for_status()

    except requests.exceptions.RequestException as e:
        logger.error("sheet_fetch_failed", source=source.value, sheet=sheet, error=str(e))
        raise SheetFetchError(sheet, details={"original_error": str(e)})

    payload = decode_gviz_response(response.text, sheet)
    table = RawTable.from_gviz(payload, sheet=sheet)

    logger.info("sheet_fetched", source=source.value, sheet=sheet, rows=len(table))
    return table


def decode_gviz_response(text: str, sheet: str = "") -> dict:
    """
    Strip the JavaScript wrapper and decode the JSON body.

    Raises:
        SheetEnvelopeError: If no JSON object is found, it does not decode,
            or the feed reports an error status
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        logger.error("sheet_envelope_invalid", sheet=sheet, reason="no_json_object")
        raise SheetEnvelopeError(sheet, "no JSON object in response")

    try:
        payload = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        logger.error("sheet_envelope_invalid", sheet=sheet, reason="json_decode", error=str(e))
        raise SheetEnvelopeError(sheet, f"invalid JSON: {e.msg}")

    if isinstance(payload, dict) and payload.get("status") == "error":
        messages = [
            err.get("detailed_message") or err.get("message") or err.get("reason", "")
            for err in payload.get("errors") or []
            if isinstance(err, dict)
        ]
        logger.error("sheet_feed_error_status", sheet=sheet, errors=messages)
        raise SheetEnvelopeError(sheet, "; ".join(m for m in messages if m) or "feed returned error status")

    return payload
