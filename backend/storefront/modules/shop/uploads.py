"""
Image storage for product uploads.
"""

import shutil
import time
from pathlib import Path

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from loguru import logger

from storefront.core.config import Settings

IMAGES_PATH = "/images"
UPLOAD_FIELD = "product"


class ImageStorage:
    """
    Stores uploaded product images on local disk.

    Files are named ``<field>_<epoch millis><original extension>`` and
    served back from ``/images``.

    Usage:
        storage = ImageStorage(settings)
        url = await storage.save(upload)
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.directory = Path(settings.upload_dir)

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def filename_for(self, original_name: str | None) -> str:
        suffix = Path(original_name or "").suffix
        millis = int(time.time() * 1000)
        return f"{UPLOAD_FIELD}_{millis}{suffix}"

    def url_for(self, filename: str) -> str:
        return f"{self.settings.public_url}{IMAGES_PATH}/{filename}"

    def _write(self, file: UploadFile, path: Path) -> None:
        file.file.seek(0)
        with path.open("wb") as buffer:
            shutil.copyfileobj(file.file, buffer)

    async def save(self, file: UploadFile) -> str:
        """
        Persist an uploaded file.

        Returns:
            Public URL of the stored image
        """
        filename = self.filename_for(file.filename)
        path = self.ensure_directory() / filename
        await run_in_threadpool(self._write, file, path)

        logger.info(f"Stored upload {file.filename!r} as {filename}")
        return self.url_for(filename)
