# mathcat/worksheet_uri.py
"""Shareable worksheet links: the whole worksheet, base64url-encoded (RFC 4648 §5, unpadded)."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from typing import Optional

from pydantic import ValidationError

from schemas.worksheets import Worksheet

logger = logging.getLogger(__name__)

SHARED_PATH = "/worksheet/shared/"


def encode_worksheet_to_uri(worksheet: Worksheet) -> str:
    raw = worksheet.model_dump_json().encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_worksheet_from_uri(encoded: str) -> Optional[Worksheet]:
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        return Worksheet.model_validate_json(raw)
    except (binascii.Error, UnicodeError, ValueError, ValidationError) as e:
        logger.warning("failed to decode worksheet from uri: %s", type(e).__name__)
        return None


def generate_shareable_url(worksheet: Worksheet, base_url: Optional[str] = None) -> str:
    base = base_url if base_url is not None else os.getenv("MATHCAT_PUBLIC_URL", "")
    return f"{base.rstrip('/')}{SHARED_PATH}{encode_worksheet_to_uri(worksheet)}"
