"""Turn uploaded files into inline (data URL) attachments."""

from __future__ import annotations

import base64
import binascii
import logging
import mimetypes

from common.errors import EncodingFailed
from data.models import Attachment, kind_for_mime, new_id

logger = logging.getLogger(__name__)


def _mime(upload) -> str:
    mime = getattr(upload, "type", None)
    if not mime:
        mime, _ = mimetypes.guess_type(getattr(upload, "name", "") or "")
    return mime or "application/octet-stream"


def _read_bytes(upload) -> bytes:
    if hasattr(upload, "getvalue"):
        return upload.getvalue()
    return upload.read()


def encode(upload) -> str:
    """Read an uploaded file handle and return ``data:<mime>;base64,<payload>``."""
    try:
        raw = _read_bytes(upload)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("could not read upload %r: %s", getattr(upload, "name", "?"), exc)
        raise EncodingFailed(f"cannot read {getattr(upload, 'name', 'file')}") from exc
    if not isinstance(raw, (bytes, bytearray)):
        raise EncodingFailed(f"cannot read {getattr(upload, 'name', 'file')}")
    payload = base64.b64encode(bytes(raw)).decode("ascii")
    return f"data:{_mime(upload)};base64,{payload}"


def attachment_from_upload(upload) -> Attachment:
    mime = _mime(upload)
    return Attachment(
        id=new_id(),
        name=getattr(upload, "name", "") or "dosya",
        kind=kind_for_mime(mime),
        data=encode(upload),
    )


def decode(data_url: str) -> bytes:
    """Return the raw bytes behind a data URL (for document downloads)."""
    _, _, payload = data_url.partition(",")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingFailed("attachment payload is not valid base64") from exc


def mime_of(data_url: str) -> str:
    head, _, _ = data_url.partition(",")
    return head[len("data:"):].split(";", 1)[0] or "application/octet-stream"
