"""File storage utilities"""
import io
import logging
import uuid
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from PIL import Image, ImageOps, UnidentifiedImageError
from sdh_inventory.infrastructure.config.settings import settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads/"


def ensure_upload_dir() -> Path:
    """Ensure upload directory exists"""
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def get_file_extension(filename: str) -> str:
    """Get file extension from filename"""
    return Path(filename).suffix.lower()


def is_allowed_image_file(filename: str) -> bool:
    """Check if file is an allowed image type"""
    ext = get_file_extension(filename)
    return ext in settings.ALLOWED_IMAGE_EXTENSIONS


def process_image(contents: bytes) -> bytes:
    """Shrink an image to fit IMAGE_MAX_DIMENSION and re-encode it as JPEG"""
    try:
        with Image.open(io.BytesIO(contents)) as image:
            image.load()
            image = ImageOps.exif_transpose(image).convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError("File is not a readable image") from e

    image.thumbnail((settings.IMAGE_MAX_DIMENSION, settings.IMAGE_MAX_DIMENSION))
    output = io.BytesIO()
    image.save(output, format="JPEG", quality=settings.IMAGE_JPEG_QUALITY, optimize=True)
    return output.getvalue()


async def save_uploaded_file(file: UploadFile) -> str:
    """Save an uploaded image as a resized JPEG and return its URL path"""
    if not file.filename:
        raise ValueError("Filename is required")

    if not is_allowed_image_file(file.filename):
        raise ValueError(f"File type not allowed. Allowed types: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}")

    contents = await file.read()
    if len(contents) > settings.MAX_UPLOAD_SIZE:
        raise ValueError(f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE / 1024 / 1024}MB")

    processed = process_image(contents)
    unique_filename = f"{uuid.uuid4()}.jpg"
    file_path = ensure_upload_dir() / unique_filename
    file_path.write_bytes(processed)
    logger.info("Stored image %s (%d -> %d bytes)", unique_filename, len(contents), len(processed))

    return f"{UPLOAD_URL_PREFIX}{unique_filename}"


def delete_file(url_path: Optional[str]) -> bool:
    """Delete an uploaded file; URLs that point elsewhere are left alone"""
    if not url_path or not url_path.startswith(UPLOAD_URL_PREFIX):
        return False

    name = Path(url_path[len(UPLOAD_URL_PREFIX):]).name
    full_path = ensure_upload_dir() / name
    try:
        full_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning("Could not delete uploaded file %s: %s", full_path, e)
        return False
    return True
