"""
Receipt image storage.
"""
import logging
import os
import uuid
from typing import Optional
from fastapi import UploadFile
from tripledger.core.config import settings
from tripledger.core.exceptions import InvalidReceiptError, NotFoundError

logger = logging.getLogger(__name__)


async def save_receipt(file: Optional[UploadFile], upload_dir: Optional[str] = None) -> Optional[str]:
    """
    Store an uploaded receipt image and return its generated filename.

    Returns None when no file was sent.

    Raises:
        InvalidReceiptError: for non-image uploads or files over MAX_UPLOAD_SIZE
    """
    if file is None or not file.filename:
        return None

    if not (file.content_type or "").startswith("image/"):
        raise InvalidReceiptError(f"Invalid file type: {file.content_type}. Only images are allowed.")

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise InvalidReceiptError(
            f"File too large: {len(content)} bytes (limit {settings.MAX_UPLOAD_SIZE})"
        )

    target_dir = upload_dir or settings.UPLOAD_DIR
    os.makedirs(target_dir, exist_ok=True)

    file_ext = os.path.splitext(file.filename)[1].lower()
    unique_filename = f"receipt-{uuid.uuid4()}{file_ext}"
    with open(os.path.join(target_dir, unique_filename), "wb") as buffer:
        buffer.write(content)

    logger.info("Stored receipt %s (%d bytes)", unique_filename, len(content))
    return unique_filename


def resolve_receipt(filename: str, upload_dir: Optional[str] = None) -> str:
    """Return the path of a stored receipt; only plain filenames inside the upload dir resolve."""
    target_dir = os.path.abspath(upload_dir or settings.UPLOAD_DIR)
    if not filename or os.path.basename(filename) != filename:
        raise NotFoundError("Receipt", filename)

    path = os.path.join(target_dir, filename)
    if not os.path.isfile(path):
        raise NotFoundError("Receipt", filename)
    return path


def discard_receipt(filename: Optional[str], upload_dir: Optional[str] = None) -> None:
    """Remove a stored receipt that no expense ended up referencing."""
    if not filename:
        return
    path = os.path.join(upload_dir or settings.UPLOAD_DIR, filename)
    if os.path.isfile(path):
        os.remove(path)
        logger.info("Discarded receipt %s", filename)
