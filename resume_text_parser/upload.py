from __future__ import annotations

import dataclasses
import mimetypes
import re
from pathlib import Path

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_TYPE_RE = re.compile(
    r"^application/pdf$|^text/|^application/msword|^" + re.escape(DOCX_TYPE) + "$"
)

SUFFIX_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": DOCX_TYPE,
    ".txt": "text/plain",
    ".text": "text/plain",
    ".md": "text/markdown",
}


class UploadRejected(ValueError):
    pass


@dataclasses.dataclass(frozen=True)
class UploadInfo:
    file_name: str
    file_size: int
    file_type: str


def validate_upload(info: UploadInfo, max_size: int = MAX_UPLOAD_BYTES) -> UploadInfo:
    if not info.file_name.strip():
        raise UploadRejected("File name is required")
    if info.file_size <= 0:
        raise UploadRejected(f"{info.file_name} is empty")
    if info.file_size > max_size:
        raise UploadRejected(
            f"{info.file_name} is {info.file_size} bytes; the limit is {max_size}"
        )
    if not ALLOWED_TYPE_RE.match(info.file_type or ""):
        raise UploadRejected(
            f"{info.file_name} has unsupported type {info.file_type or 'unknown'}"
        )
    return info


def upload_info_for(path: str | Path) -> UploadInfo:
    path = Path(path)
    file_type = SUFFIX_TYPES.get(path.suffix.lower())
    if file_type is None:
        file_type = mimetypes.guess_type(path.name)[0] or ""
    return UploadInfo(
        file_name=path.name,
        file_size=path.stat().st_size,
        file_type=file_type,
    )
