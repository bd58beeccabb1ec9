import logging
import shutil
import time
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

from fleet.core.config import settings

logger = logging.getLogger(__name__)


def _upload_root() -> Path:
    root = Path(settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


MAX_EXT_LEN = 10


def _extension(filename: str | None) -> str:
    ext = Path(filename or "").suffix.lower()
    if len(ext) > MAX_EXT_LEN or not ext[1:].isalnum():
        return ""
    return ext


def save_photo(upload: UploadFile) -> str:
    ext = _extension(upload.filename)
    name = f"{int(time.time() * 1000)}-{uuid4().hex[:8]}{ext}"
    with (_upload_root() / name).open("wb") as f:
        shutil.copyfileobj(upload.file, f)
    return name


def remove_photo(name: str) -> None:
    path = _upload_root() / name
    if path.exists():
        path.unlink()
        logger.info("removed unattached photo %s", name)
