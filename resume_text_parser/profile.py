from __future__ import annotations

from .models import ParsedResume


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def set_if_missing(update: dict, existing: dict, key: str, value: str | None) -> bool:
    clean = normalize_name(value)
    if not clean or normalize_name(existing.get(key)):
        return False
    update[key] = clean
    return True


def merge_skills(current: list[str], suggested: list[str]) -> tuple[list[str], bool]:
    merged = []
    seen = set()
    for name in current:
        clean = normalize_name(name)
        if clean and clean.lower() not in seen:
            seen.add(clean.lower())
            merged.append(clean)
    added = False
    for name in suggested:
        clean = normalize_name(name)
        if not clean or clean.lower() in seen:
            continue
        seen.add(clean.lower())
        merged.append(clean)
        added = True
    return merged, added


def build_profile_update(parsed: ParsedResume, existing: dict | None = None) -> dict:
    existing = existing or {}
    update: dict = {}
    info = parsed.personal_info
    set_if_missing(update, existing, "phone", info.phone)
    set_if_missing(update, existing, "linkedinUrl", info.linkedin_url)
    set_if_missing(update, existing, "githubUrl", info.github_url)
    set_if_missing(update, existing, "profileSummary", parsed.summary)

    current = existing.get("skills")
    if not isinstance(current, list):
        current = []
    skills, added = merge_skills([str(name) for name in current], parsed.skills)
    if added:
        update["skills"] = skills
    return update
