from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class PersonalInfo:
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "phone": self.phone,
            "linkedinUrl": self.linkedin_url,
            "githubUrl": self.github_url,
        }


@dataclasses.dataclass(frozen=True)
class WorkExperience:
    job_title: str
    company_name: str
    duration: str
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "jobTitle": self.job_title,
            "companyName": self.company_name,
            "duration": self.duration,
            "description": self.description,
        }


@dataclasses.dataclass(frozen=True)
class Education:
    degree: str
    # never filled in by the extractor
    institution: str = ""
    year: str = ""

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class Certification:
    name: str
    issuer: str

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class Project:
    name: str
    description: str

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclasses.dataclass
class ParsedResume:
    personal_info: PersonalInfo = dataclasses.field(default_factory=PersonalInfo)
    skills: list[str] = dataclasses.field(default_factory=list)
    work_experience: list[WorkExperience] = dataclasses.field(default_factory=list)
    education: list[Education] = dataclasses.field(default_factory=list)
    certifications: list[Certification] = dataclasses.field(default_factory=list)
    projects: list[Project] = dataclasses.field(default_factory=list)
    languages: list[str] = dataclasses.field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "personalInfo": self.personal_info.to_dict(),
            "skills": list(self.skills),
            "workExperience": [entry.to_dict() for entry in self.work_experience],
            "education": [entry.to_dict() for entry in self.education],
            "certifications": [entry.to_dict() for entry in self.certifications],
            "projects": [entry.to_dict() for entry in self.projects],
            "languages": list(self.languages),
            "summary": self.summary,
        }
