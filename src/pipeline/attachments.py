"""
Attachment Encoder

Converts a typed attachment into the content fragments spliced into an
outgoing multimodal message.

- image: inline data URI image part (detail "auto")
- application/pdf: text note describing the attachment (PDFs are not decoded)
- text/plain: decoded UTF-8 contents, truncated to MAX_TEXT_ATTACHMENT_CHARS
- anything else: text note naming the file and its MIME type

encode_attachment() is total: decode failures degrade to a text fragment
and never propagate to the caller.
"""

import base64
import binascii
import logging

from src.core.exceptions import AttachmentDecodeError
from src.models.domain import ContentPart, ImagePart, TextPart
from src.models.requests import Attachment

logger = logging.getLogger(__name__)

MAX_TEXT_ATTACHMENT_CHARS = 8000

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"


def _clean_base64(data: str) -> str:
    """Drop a data URI prefix and embedded whitespace from base64 text."""
    if data.startswith("data:") and ";base64," in data:
        data = data.split(";base64,", 1)[1]
    return "".join(data.split())


def decode_base64(data: str, name: str) -> bytes:
    """
    Strictly decode base64 attachment data.

    Raises:
        AttachmentDecodeError: If the data is empty or not valid base64.
    """
    cleaned = _clean_base64(data)
    if not cleaned:
        raise AttachmentDecodeError(f"Attachment {name!r} has no data", attachment_name=name)
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AttachmentDecodeError(
            f"Attachment {name!r} is not valid base64: {e}", attachment_name=name
        ) from e


def decode_text(data: str, name: str) -> str:
    """
    Decode base64 data to UTF-8 text.

    Raises:
        AttachmentDecodeError: If the data is not base64 or not UTF-8.
    """
    raw = decode_base64(data, name)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AttachmentDecodeError(
            f"Attachment {name!r} is not UTF-8 text: {e}", attachment_name=name
        ) from e


def _base_mime_type(mime_type: str) -> str:
    """'text/plain; charset=utf-8' -> 'text/plain'."""
    return mime_type.split(";", 1)[0].strip().lower()


def _encode_image(attachment: Attachment) -> ContentPart:
    try:
        decode_base64(attachment.data, attachment.name)
    except AttachmentDecodeError as e:
        logger.warning(f"Unreadable image attachment: {e.message}")
        return TextPart(
            text=f'[User attached an image named "{attachment.name}" but it could not be read.]'
        )
    return ImagePart.from_base64(attachment.mime_type, _clean_base64(attachment.data))


def _encode_text_document(attachment: Attachment) -> ContentPart:
    try:
        decoded = decode_text(attachment.data, attachment.name)
    except AttachmentDecodeError as e:
        logger.warning(f"Unreadable text attachment: {e.message}")
        return TextPart(
            text=f'[User attached a text file named "{attachment.name}" but it could not be read.]'
        )

    trimmed = decoded[:MAX_TEXT_ATTACHMENT_CHARS]
    return TextPart(
        text=(
            f'[User attached a text file named "{attachment.name}". '
            f"Here is its content:\n\n{trimmed}]"
        )
    )


def encode_attachment(attachment: Attachment) -> list[ContentPart]:
    """
    Encode one attachment into content fragments.

    Args:
        attachment: The attachment to encode.

    Returns:
        At least one content fragment. Never raises for decode failures.
    """
    if attachment.kind == "image":
        return [_encode_image(attachment)]

    mime_type = _base_mime_type(attachment.mime_type)

    if mime_type == PDF_MIME_TYPE:
        return [
            TextPart(
                text=(
                    f'[User attached a PDF document named "{attachment.name}". '
                    "Treat its content as context and provide relevant social media / "
                    "content advice based on it.]"
                )
            )
        ]

    if mime_type == TEXT_MIME_TYPE:
        return [_encode_text_document(attachment)]

    return [
        TextPart(
            text=(
                f'[User attached a document named "{attachment.name}" ({attachment.mime_type}). '
                "Acknowledge this and let them know you can best work with plain text, "
                "PDF, or image files for analysis.]"
            )
        )
    ]


def encode_attachments(attachments: list[Attachment]) -> list[ContentPart]:
    """Encode attachments in order, concatenating their fragments."""
    parts: list[ContentPart] = []
    for attachment in attachments:
        parts.extend(encode_attachment(attachment))
    return parts
