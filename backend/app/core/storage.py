import logging
import re
import shutil
import time
from pathlib import Path
from urllib.parse import quote

from fastapi import UploadFile, HTTPException, status

from .config import settings
from .thumbs import verify_image

logger = logging.getLogger(__name__)


def ensure_bucket_dir(bucket: str) -> Path:
    """Ensure the directory backing a storage bucket exists."""
    bucket_path = Path(settings.UPLOAD_DIR) / bucket
    bucket_path.mkdir(parents=True, exist_ok=True)
    return bucket_path


def get_file_extension(filename: str) -> str:
    """Get file extension in lowercase."""
    return Path(filename).suffix.lower()


def slugify(name: str) -> str:
    """Lowercase a display name, join its words with hyphens and drop anything else."""
    hyphenated = re.sub(r"\s+", "-", name.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", hyphenated)


def validate_image_upload(file: UploadFile) -> None:
    """Validate that an upload looks like an image before storing it."""
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="No filename provided"
        )

    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Only image uploads are accepted, got '{content_type or 'unknown'}'",
        )

    extension = get_file_extension(file.filename)
    if extension not in settings.ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File type {extension} not allowed. Allowed types: {', '.join(sorted(settings.ALLOWED_EXTENSIONS))}",
        )


def generate_object_name(prefix: str, original_filename: str) -> str:
    """Name a stored object after its owner and the upload time, keeping the extension."""
    extension = get_file_extension(original_filename)
    millis = int(time.time() * 1000)
    return f"{slugify(prefix)}-{millis}{extension}"


def public_url(bucket: str, object_name: str) -> str:
    """Public address of a stored object."""
    return f"{settings.MEDIA_URL.rstrip('/')}/{quote(bucket)}/{quote(object_name)}"


async def save_upload_file(file: UploadFile, bucket: str, object_name: str) -> Path:
    """
    Store an uploaded image in a bucket, overwriting any object of the same name.

    Returns:
        Path of the stored object
    """
    validate_image_upload(file)

    # Check file size
    file.file.seek(0, 2)  # Seek to end
    file_size = file.file.tell()
    file.file.seek(0)  # Reset to beginning

    if file_size > settings.MAX_FILE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size: {settings.MAX_FILE_SIZE / (1024*1024):.1f}MB",
        )

    file_path = ensure_bucket_dir(bucket) / object_name

    try:
        with open(file_path, "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)
    except OSError as e:
        logger.error(f"Failed to store {object_name} in {bucket}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save file: {str(e)}",
        )

    if not verify_image(file_path):
        remove_stored_file(file_path)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is not a readable image",
        )

    logger.info(f"Stored {object_name} in bucket {bucket} ({file_size} bytes)")
    return file_path


def remove_stored_file(file_path: Path) -> None:
    """Delete a stored object, ignoring objects that are already gone."""
    try:
        Path(file_path).unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove stored file {file_path}: {e}")
