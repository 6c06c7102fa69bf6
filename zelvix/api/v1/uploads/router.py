"""
Image upload endpoint
Files land in UPLOAD_DIR and are served back from UPLOAD_URL_PREFIX
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pathlib import Path
from typing import Optional
import logging

from zelvix.core.config import settings
from zelvix.core.exceptions import BadRequestException, InternalServerException
from zelvix.utils.dependencies import require_admin
from zelvix.utils.helpers import current_millis, read_limited
from zelvix.utils.validators import sanitize_filename

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])

def _store(directory: Path, name: str, content: bytes) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_bytes(content)

@router.post("", status_code=status.HTTP_201_CREATED, summary="Upload an image")
async def upload_image(file: Optional[UploadFile] = File(None)):
    """Store one image and return its public URL"""
    try:
        if file is None or not file.filename:
            raise BadRequestException("File is required")

        if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
            raise BadRequestException("Only jpg, png, webp, or gif files are allowed")

        content = await read_limited(file, settings.MAX_IMAGE_SIZE)
        if content is None:
            raise BadRequestException("File size must be 5MB or less")
        if not content:
            raise BadRequestException("File is empty")

        name = f"{current_millis()}-{sanitize_filename(file.filename)}"
        await run_in_threadpool(_store, Path(settings.UPLOAD_DIR), name, content)

        logger.info(f"Image uploaded: {name} ({len(content)} bytes)")
        return {
            "message": "File uploaded successfully",
            "data": {
                "url": f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{name}",
                "name": name,
                "size": len(content),
                "type": file.content_type,
            },
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Image upload failed: {e}")
        raise InternalServerException("Failed to upload file")
