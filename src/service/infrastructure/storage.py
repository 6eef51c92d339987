import os
import re
import time
from dataclasses import dataclass
from typing import BinaryIO, Optional

from ...common.logging import setup_logger

CHUNK_SIZE = 1024 * 1024
UNSAFE_CHARS = re.compile(r"[^\w.\-]+", re.ASCII)

@dataclass
class StoredUpload:
    filename: str
    path: str
    url: str
    size_bytes: int

def safe_filename(original: str) -> str:
    """Replaces every run of characters outside [A-Za-z0-9_.-] with '_'."""
    return UNSAFE_CHARS.sub("_", original)

class LocalUploadStorage:
    """
    Stores uploaded files under uploads_dir as <epoch-millis>_<safe-name>.
    """
    def __init__(self, uploads_dir: str, url_prefix: str = "/uploads"):
        self.uploads_dir = uploads_dir
        self.url_prefix = url_prefix.rstrip("/")
        self.logger = setup_logger(__name__)
        self.ensure_directory()

    def ensure_directory(self):
        os.makedirs(self.uploads_dir, exist_ok=True)

    def build_filename(self, original: Optional[str], now_ms: Optional[int] = None) -> str:
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        return f"{now_ms}_{safe_filename(original or '')}"

    def save(self, stream: BinaryIO, original_filename: Optional[str]) -> StoredUpload:
        filename = self.build_filename(original_filename)
        path = os.path.join(self.uploads_dir, filename)

        total = 0
        with open(path, mode='wb') as f:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                f.write(chunk)
                total += len(chunk)

        self.logger.info(f"Stored upload {filename} ({total} bytes)")
        return StoredUpload(
            filename=filename,
            path=path,
            url=f"{self.url_prefix}/{filename}",
            size_bytes=total,
        )
