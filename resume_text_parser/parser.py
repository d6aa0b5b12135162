from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .documents import extract_text
from .models import (
    Certification,
    Education,
    ParsedResume,
    PersonalInfo,
    Project,
    WorkExperience,
)
from .vocabulary import (
    CERTIFICATION_KEYWORDS,
    DEGREE_KEYWORDS,
    LANGUAGES,
    MAJOR_HEADINGS,
    SECTION_KEYWORDS,
    SKILLS,
)

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[A-Za-z0-9_-]+", re.I)
GITHUB_RE = re.compile(r"github\.com/[A-Za-z0-9_-]+", re.I)

WORK_ENTRY_RE = re.compile(
    r"(?:^|\n)([A-Z][^|\n]+?)(?:\s*[-|]\s*)([A-Z][^|\n]+?)(?:\s*[-|]\s*)?"
    r"(\d{4}(?:\s*[-]\s*\d{4}|\s*[-]\s*present)?)",
    re.I | re.M,
)
DEGREE_RE = re.compile("(?:" + "|".join(DEGREE_KEYWORDS) + ")", re.I)
YEAR_RE = re.compile(r"\b(19|20)\d{2}\b")

SUMMARY_LIMIT = 500
PROJECT_LIMIT = 5
PROJECT_NAME_LENGTH = 50


class ParseFailure(Exception):
    pass


def parse_file(path: str | Path) -> ParsedResume:
    return parse_text(extract_text(path))


def parse_text(resume_text: str) -> ParsedResume:
    """Extract a ParsedResume from plain resume text.

    Finding nothing is a valid, empty result. Only unexpected faults are
    reported, as ParseFailure.
    """
    try:
        resume = ParsedResume(
            personal_info=extract_personal_info(resume_text),
            skills=extract_skills(resume_text),
            work_experience=extract_work_experience(resume_text),
            education=extract_education(resume_text),
            certifications=extract_certifications(resume_text),
            projects=extract_projects(resume_text),
            languages=extract_languages(resume_text),
            summary=extract_summary(resume_text),
        )
    except Exception as exc:
        logger.exception("Error parsing resume")
        raise ParseFailure("Failed to parse resume") from exc
    logger.debug(
        "Parsed resume: %d skills, %d jobs, %d education entries, %d projects",
        len(resume.skills),
        len(resume.work_experience),
        len(resume.education),
        len(resume.projects),
    )
    return resume


def extract_section(text: str, keywords: Iterable[str]) -> str | None:
    keywords = tuple(keywords)
    lines = text.splitlines()
    start = None
    for index, line in enumerate(lines):
        lowered = line.lower()
        if any(keyword in lowered for keyword in keywords):
            start = index
            break
    if start is None:
        return None

    end = len(lines)
    for index in range(start + 1, len(lines)):
        lowered = lines[index].lower()
        if any(
            heading in lowered and heading not in keywords
            for heading in MAJOR_HEADINGS
        ):
            end = index
            break
    return "\n".join(lines[start:end])


def extract_personal_info(text: str) -> PersonalInfo:
    email = EMAIL_RE.search(text)
    phone = PHONE_RE.search(text)
    linkedin = LINKEDIN_RE.search(text)
    github = GITHUB_RE.search(text)
    return PersonalInfo(
        email=email.group(0) if email else None,
        phone=phone.group(0) if phone else None,
        linkedin_url=f"https://{linkedin.group(0)}" if linkedin else None,
        github_url=f"https://{github.group(0)}" if github else None,
    )


def extract_skills(text: str) -> list[str]:
    lowered = text.lower()
    return find_keywords(lowered, SKILLS)


def extract_work_experience(text: str) -> list[WorkExperience]:
    section = extract_section(text, SECTION_KEYWORDS["experience"])
    if not section:
        return []
    return [
        WorkExperience(
            job_title=match.group(1).strip(),
            company_name=match.group(2).strip(),
            duration=match.group(3).strip(),
        )
        for match in WORK_ENTRY_RE.finditer(section)
    ]


def extract_education(text: str) -> list[Education]:
    section = extract_section(text, SECTION_KEYWORDS["education"])
    if not section:
        return []
    entries = []
    for line in section.splitlines():
        if not DEGREE_RE.search(line):
            continue
        year = YEAR_RE.search(line)
        entries.append(Education(degree=line.strip(), year=year.group(0) if year else ""))
    return entries


def extract_certifications(text: str) -> list[Certification]:
    section = extract_section(text, SECTION_KEYWORDS["certifications"])
    if not section:
        return []
    entries = []
    for line in section.splitlines():
        lowered = line.lower()
        for keyword in CERTIFICATION_KEYWORDS:
            if keyword.lower() in lowered:
                entries.append(Certification(name=line.strip(), issuer=keyword))
    return entries


def extract_projects(text: str) -> list[Project]:
    section = extract_section(text, SECTION_KEYWORDS["projects"])
    if not section:
        return []
    projects = []
    for line in section.splitlines():
        if len(line.strip()) <= 10 or len(line) <= 20:
            continue
        projects.append(
            Project(
                name=line[:PROJECT_NAME_LENGTH].strip() + "...",
                description=line.strip(),
            )
        )
    return projects[:PROJECT_LIMIT]


def extract_languages(text: str) -> list[str]:
    section = extract_section(text, SECTION_KEYWORDS["languages"])
    if not section:
        return []
    return find_keywords(section.lower(), LANGUAGES)


def extract_summary(text: str) -> str:
    section = extract_section(text, SECTION_KEYWORDS["summary"])
    if section:
        return section[:SUMMARY_LIMIT].strip()
    lines = [line for line in text.splitlines() if len(line.strip()) > 20]
    return " ".join(lines[:3])[:SUMMARY_LIMIT].strip()


def find_keywords(lowered: str, keywords: Iterable[str]) -> list[str]:
    found = []
    seen = set()
    for keyword in keywords:
        key = keyword.lower()
        if key in seen or key not in lowered:
            continue
        seen.add(key)
        found.append(keyword)
    return found
