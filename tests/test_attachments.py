"""Unit tests for data.attachments."""

import base64
import io

import pytest

from common.errors import EncodingFailed
from data.attachments import attachment_from_upload, decode, encode, mime_of


class FakeUpload(io.BytesIO):
    """Mimics streamlit's UploadedFile (a BytesIO with ``name`` and ``type``)."""

    def __init__(self, data: bytes, name: str, type: str = ""):
        super().__init__(data)
        self.name = name
        self.type = type


class BrokenUpload:
    name = "broken.pdf"
    type = "application/pdf"

    def getvalue(self):
        raise OSError("disk went away")


class TestEncode:
    def test_data_url_shape(self):
        url = encode(FakeUpload(b"hello", "a.txt", "text/plain"))
        assert url == "data:text/plain;base64," + base64.b64encode(b"hello").decode()

    def test_mime_guessed_from_name(self):
        url = encode(FakeUpload(b"x", "chart.png"))
        assert url.startswith("data:image/png;base64,")

    def test_unreadable_upload_raises(self):
        with pytest.raises(EncodingFailed):
            encode(BrokenUpload())

    def test_decode_inverts_encode(self):
        url = encode(FakeUpload(b"\x00\x01binary", "b.bin", "application/octet-stream"))
        assert decode(url) == b"\x00\x01binary"
        assert mime_of(url) == "application/octet-stream"

    def test_decode_rejects_garbage(self):
        with pytest.raises(EncodingFailed):
            decode("data:text/plain;base64,***")


class TestAttachmentFromUpload:
    def test_image_kind(self):
        att = attachment_from_upload(FakeUpload(b"png", "p.png", "image/png"))
        assert att.kind == "image"
        assert att.name == "p.png"

    def test_document_kind(self):
        att = attachment_from_upload(FakeUpload(b"%PDF", "slides.pdf", "application/pdf"))
        assert att.kind == "document"

    def test_failure_propagates(self):
        with pytest.raises(EncodingFailed):
            attachment_from_upload(BrokenUpload())
