from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .documents import DocumentError, extract_text
from .parser import ParseFailure, parse_text
from .profile import build_profile_update
from .upload import MAX_UPLOAD_BYTES, UploadRejected, upload_info_for, validate_upload

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract structured candidate data from a resume file."
    )
    parser.add_argument("resume", type=Path, help="Path to a PDF, DOCX or text resume")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSON file path (default: stdout)",
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Write profile update suggestions instead of the parsed resume.",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Existing profile JSON to merge suggestions against (implies --suggest).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON config (max_upload_bytes, indent).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def load_json_optional(path: Path | None) -> dict[str, Any]:
    if not path or not path.exists():
        return {}
    return load_json(path)


def run(args: argparse.Namespace, config: dict[str, Any]) -> dict:
    max_size = int(config.get("max_upload_bytes", MAX_UPLOAD_BYTES))
    if not args.resume.is_file():
        raise DocumentError(f"Resume file not found: {args.resume}")
    validate_upload(upload_info_for(args.resume), max_size=max_size)
    parsed = parse_text(extract_text(args.resume))
    if args.suggest or args.profile:
        return build_profile_update(parsed, load_json_optional(args.profile))
    return parsed.to_dict()


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_json_optional(args.config)
    try:
        result = run(args, config)
    except (UploadRejected, DocumentError, ParseFailure) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    indent = int(config.get("indent", 2))
    payload = json.dumps(result, indent=indent)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
