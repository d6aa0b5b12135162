import logging

import pytest

from resume_text_parser.models import (
    Certification,
    Education,
    ParsedResume,
    Project,
    WorkExperience,
)
from resume_text_parser.parser import (
    ParseFailure,
    extract_certifications,
    extract_education,
    extract_languages,
    extract_personal_info,
    extract_projects,
    extract_section,
    extract_skills,
    extract_summary,
    extract_work_experience,
    parse_text,
)
from resume_text_parser.vocabulary import SECTION_KEYWORDS

SAMPLE = """Jane Doe
jane.doe@example.com | +1 (555) 123-4567
linkedin.com/in/jane-doe | github.com/janedoe

Summary
Backend engineer focused on Python services.

Experience
Senior Engineer - Acme Corp - 2018 - 2020
Software Developer | Globex | 2015 - 2018

Education
Master of Science, 2019

Certifications
AWS Certified Developer

Projects
Built an inventory tracking service in Django

Languages
English, German
"""


def test_parse_sample_resume():
    resume = parse_text(SAMPLE)

    assert resume.personal_info.email == "jane.doe@example.com"
    assert resume.personal_info.phone == "+1 (555) 123-4567"
    assert resume.personal_info.linkedin_url == "https://linkedin.com/in/jane-doe"
    assert resume.personal_info.github_url == "https://github.com/janedoe"
    assert {"Python", "Django", "AWS"} <= set(resume.skills)
    assert resume.work_experience == [
        WorkExperience("Senior Engineer", "Acme Corp", "2018 - 2020"),
        WorkExperience("Software Developer", "Globex", "2015 - 2018"),
    ]
    assert resume.education == [Education(degree="Master of Science, 2019", year="2019")]
    assert resume.certifications == [
        Certification(name="AWS Certified Developer", issuer="AWS")
    ]
    assert resume.projects == [
        Project(
            name="Built an inventory tracking service in Django...",
            description="Built an inventory tracking service in Django",
        )
    ]
    assert resume.languages == ["English", "German"]
    assert resume.summary == "Summary\nBackend engineer focused on Python services."


def test_parse_is_deterministic():
    assert parse_text(SAMPLE) == parse_text(SAMPLE)
    assert parse_text(SAMPLE).to_dict() == parse_text(SAMPLE).to_dict()


def test_structureless_text_gives_empty_result():
    resume = parse_text("xyzzy 12345 qqq\nzzz\n")

    assert resume == ParsedResume()
    assert resume.to_dict()["personalInfo"] == {
        "email": None,
        "phone": None,
        "linkedinUrl": None,
        "githubUrl": None,
    }


def test_reparsing_summary_does_not_fail():
    summary = parse_text(SAMPLE).summary
    assert isinstance(parse_text(summary), ParsedResume)
    assert isinstance(parse_text(""), ParsedResume)


def test_unexpected_error_becomes_parse_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="resume_text_parser.parser"):
        with pytest.raises(ParseFailure) as excinfo:
            parse_text(None)
    assert excinfo.value.__cause__ is not None
    assert "Error parsing resume" in caplog.text


def test_contact_email_and_phone():
    info = extract_personal_info("Contact: jane.doe@example.com, +1 (555) 123-4567")
    assert info.email == "jane.doe@example.com"
    assert info.phone == "+1 (555) 123-4567"
    assert info.linkedin_url is None
    assert info.github_url is None


def test_profile_urls_are_normalized_to_https():
    info = extract_personal_info(
        "https://www.linkedin.com/in/jane-doe\nGitHub: GitHub.com/jane_doe/repo"
    )
    assert info.linkedin_url == "https://linkedin.com/in/jane-doe"
    assert info.github_url == "https://GitHub.com/jane_doe"


def test_skills_match_substrings_without_word_boundaries():
    # "Java" is found inside "JavaScript" and "R" inside "Proficient"
    skills = extract_skills("Proficient in JavaScript and Python")
    assert skills == ["JavaScript", "Python", "Java", "R"]


def test_skills_have_no_duplicates():
    skills = extract_skills("swift and kotlin with gitlab")
    assert skills == ["Kotlin", "Swift", "GitLab", "Git"]


def test_section_missing_returns_none():
    assert extract_section("Jane Doe\nPython developer", ["education"]) is None


def test_section_keeps_heading_and_stops_at_next_major_heading():
    text = "Summary\nLine one\nEducation\nBSc"
    assert extract_section(text, ["summary"]) == "Summary\nLine one"


def test_section_own_keyword_does_not_end_it():
    text = "Experience\nAcme\nMore experience here\nSkills\nPython"
    section = extract_section(text, SECTION_KEYWORDS["experience"])
    assert section == "Experience\nAcme\nMore experience here"


def test_section_runs_to_end_of_document():
    text = "Portfolio\nfirst\nsecond"
    assert extract_section(text, SECTION_KEYWORDS["projects"]) == text


def test_project_section_ends_at_plural_heading_word():
    # "projects" is a major heading but not one of the project keywords
    text = "Projects\nBuilt a search tool\nLed two projects at once"
    section = extract_section(text, SECTION_KEYWORDS["projects"])
    assert section == "Projects\nBuilt a search tool"


def test_work_experience_without_section():
    assert extract_work_experience("Senior Engineer - Acme - 2020") == []


def test_work_experience_present_duration():
    text = "Work History\nData Analyst - Initech - 2021 - present"
    assert extract_work_experience(text) == [
        WorkExperience("Data Analyst", "Initech", "2021 - present")
    ]


def test_education_is_scoped_to_its_section():
    text = (
        "Experience\n"
        "Marketing Lead - Initech - 2020\n"
        "Wrote copy for a Bachelor of Arts in Marketing campaign\n"
        "\n"
        "Education\n"
        "Master of Science, 2019\n"
    )
    assert extract_education(text) == [
        Education(degree="Master of Science, 2019", institution="", year="2019")
    ]


def test_education_year_is_optional():
    text = "Education\nB.Tech in Electronics\nMBA 2012"
    assert extract_education(text) == [
        Education(degree="B.Tech in Electronics", year=""),
        Education(degree="MBA 2012", year="2012"),
    ]


def test_certification_line_can_yield_several_entries():
    text = (
        "Certifications\n"
        "AWS Certified Solutions Architect\n"
        "Certified Kubernetes Administrator and Docker Associate\n"
    )
    line = "Certified Kubernetes Administrator and Docker Associate"
    assert extract_certifications(text) == [
        Certification(name="AWS Certified Solutions Architect", issuer="AWS"),
        Certification(name=line, issuer="Kubernetes"),
        Certification(name=line, issuer="Docker"),
    ]


def test_projects_are_capped_at_five():
    lines = [f"Built an inventory tracking service number {i}" for i in range(8)]
    projects = extract_projects("Projects\n" + "\n".join(lines))
    assert len(projects) == 5
    assert projects[0] == Project(name=lines[0] + "...", description=lines[0])


def test_project_name_is_truncated_and_short_lines_skipped():
    long_line = "Realtime dashboard for warehouse robots written in Go and Vue"
    projects = extract_projects(f"Projects\nCLI tool\n{long_line}")
    assert projects == [
        Project(name=long_line[:50].strip() + "...", description=long_line)
    ]


def test_languages_from_language_section():
    text = "Languages\nEnglish (native), Spanish, french"
    assert extract_languages(text) == ["English", "Spanish", "French"]


def test_languages_need_a_section():
    assert extract_languages("Fluent in English and Spanish") == []


def test_summary_section_is_truncated():
    summary = extract_summary("Summary\n" + "a" * 600)
    assert len(summary) == 500
    assert summary.startswith("Summary\naaa")


def test_summary_falls_back_to_first_long_lines():
    text = (
        "Jane Doe\n"
        "Senior backend engineer at Initech\n"
        "Loves building distributed systems\n"
        "Short line\n"
        "Mentors junior developers regularly\n"
        "Fourth long line that is ignored here\n"
    )
    assert extract_summary(text) == (
        "Senior backend engineer at Initech "
        "Loves building distributed systems "
        "Mentors junior developers regularly"
    )


def test_to_dict_has_every_field():
    data = ParsedResume().to_dict()
    assert data == {
        "personalInfo": {
            "email": None,
            "phone": None,
            "linkedinUrl": None,
            "githubUrl": None,
        },
        "skills": [],
        "workExperience": [],
        "education": [],
        "certifications": [],
        "projects": [],
        "languages": [],
        "summary": "",
    }
