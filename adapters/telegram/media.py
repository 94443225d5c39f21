"""
Image downloads for profile pictures.
"""

import logging
from typing import Optional

from aiogram.types import Message

from core.domain.models import ImageAttachment
from adapters.telegram.loader import bot

logger = logging.getLogger(__name__)


def has_image(message: Message) -> bool:
    if message.photo:
        return True
    document = message.document
    return bool(document and (document.mime_type or "").startswith("image/"))


async def download_image(message: Message) -> Optional[ImageAttachment]:
    """
    Fetch the photo (largest size) or image document attached to `message`.
    The file path Telegram reports supplies the extension for the MIME type.
    """
    if message.photo:
        file_id = message.photo[-1].file_id
        file_name = None
    elif has_image(message):
        file_id = message.document.file_id
        file_name = message.document.file_name
    else:
        return None

    file = await bot.get_file(file_id)
    buffer = await bot.download_file(file.file_path)
    content = buffer.read() if buffer is not None else b""
    logger.debug(f"Downloaded {file.file_path} ({len(content)} bytes)")
    return ImageAttachment.from_uri(file_name or file.file_path, content=content)
