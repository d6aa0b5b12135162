from __future__ import annotations

import logging
import re
import warnings
from pathlib import Path

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

CID_RE = re.compile(r"\(cid:\d+\)")
TEXT_SUFFIXES = {".txt", ".text", ".md"}


class DocumentError(Exception):
    pass


def extract_text(path: str | Path) -> str:
    path = Path(path)
    if not path.is_file():
        raise DocumentError(f"Resume file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = pdf_to_text(path)
    elif suffix == ".docx":
        text = docx_to_text(path)
    elif suffix in TEXT_SUFFIXES:
        text = path.read_text(encoding="utf-8-sig", errors="replace")
    elif suffix == ".doc":
        raise DocumentError(f"Legacy Word documents are not supported: {path.name}")
    else:
        raise DocumentError(f"Unsupported resume file type: {path.name}")
    logger.info("Extracted %d characters from %s", len(text), path.name)
    return text


def pdf_to_text(path: Path) -> str:
    try:
        with pdfplumber.open(path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:
        raise DocumentError(f"Could not read PDF {path.name}: {exc}") from exc
    return CID_RE.sub("", "\n".join(pages))


def docx_to_text(path: Path) -> str:
    try:
        document = Document(str(path))
    except Exception as exc:
        raise DocumentError(f"Could not read DOCX {path.name}: {exc}") from exc
    parts = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)
