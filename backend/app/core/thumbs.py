import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from .config import settings

logger = logging.getLogger(__name__)


def verify_image(path: Path) -> bool:
    """Check that a file decodes as an image."""
    try:
        with Image.open(path) as img:
            img.verify()
        return True
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"File is not a valid image: {path} ({e})")
        return False


def create_thumbnail(src: Path, size: tuple[int, int] = None) -> Optional[Path]:
    """
    Create a JPEG thumbnail next to an image.

    Args:
        src: Source file path
        size: Thumbnail size (width, height). Defaults to settings.THUMBNAIL_SIZE

    Returns:
        Path to the created thumbnail or None if failed
    """
    if size is None:
        size = settings.THUMBNAIL_SIZE

    src_path = Path(src)
    if not src_path.exists():
        logger.error(f"Source file does not exist: {src_path}")
        return None

    thumb_path = src_path.parent / f"thumb_{src_path.stem}.jpg"

    try:
        with Image.open(src_path) as img:
            # Handle EXIF orientation
            img = ImageOps.exif_transpose(img)

            # Flatten transparency onto white
            if img.mode in ("RGBA", "LA", "P"):
                background = Image.new("RGB", img.size, (255, 255, 255))
                if img.mode == "P":
                    img = img.convert("RGBA")
                background.paste(img, mask=img.split()[-1])
                img = background
            elif img.mode != "RGB":
                img = img.convert("RGB")

            img.thumbnail(size, Image.Resampling.LANCZOS)
            img.save(thumb_path, "JPEG", quality=settings.THUMBNAIL_QUALITY, optimize=True)
    except (UnidentifiedImageError, OSError) as e:
        logger.error(f"Failed to create thumbnail for {src_path}: {e}")
        return None

    logger.info(f"Created thumbnail: {thumb_path}")
    return thumb_path
