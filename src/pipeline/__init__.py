"""
Pipeline Package - provider-agnostic message processing.

Components:
- attachments: Attachment Encoder
- normalizer: Message Normalizer
- formatter: Response Formatter
"""

from src.pipeline.attachments import (
    MAX_TEXT_ATTACHMENT_CHARS,
    encode_attachment,
    encode_attachments,
)
from src.pipeline.formatter import BulletStyle, ResponseFormatter
from src.pipeline.normalizer import DEFAULT_PROMPT, MessageNormalizer, has_attachments

__all__ = [
    "MAX_TEXT_ATTACHMENT_CHARS",
    "encode_attachment",
    "encode_attachments",
    "BulletStyle",
    "ResponseFormatter",
    "DEFAULT_PROMPT",
    "MessageNormalizer",
    "has_attachments",
]
