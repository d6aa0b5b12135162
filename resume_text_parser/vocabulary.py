from __future__ import annotations

SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "languages": (
        "JavaScript",
        "Python",
        "Java",
        "C++",
        "C#",
        "TypeScript",
        "PHP",
        "Ruby",
        "Go",
        "Rust",
        "Kotlin",
        "Swift",
        "HTML",
        "CSS",
        "SQL",
        # single letter; matches nearly any text containing an "r"
        "R",
        "MATLAB",
        "Scala",
        "Perl",
        "Dart",
        "Objective-C",
    ),
    "frameworks": (
        "React",
        "Angular",
        "Vue.js",
        "Node.js",
        "Express",
        "Django",
        "Flask",
        "Spring",
        "Laravel",
        "Rails",
        "Bootstrap",
        "Tailwind",
        "jQuery",
        "Next.js",
        "Nuxt.js",
        "Svelte",
        "Gatsby",
    ),
    "databases": (
        "MySQL",
        "PostgreSQL",
        "MongoDB",
        "Redis",
        "SQLite",
        "Oracle",
        "Cassandra",
        "DynamoDB",
        "Firebase",
    ),
    "cloud_devops": (
        "AWS",
        "Azure",
        "Google Cloud",
        "Docker",
        "Kubernetes",
        "Jenkins",
        "GitLab",
        "CircleCI",
        "Terraform",
        "Ansible",
        "Chef",
        "Puppet",
        "Vagrant",
        "Nginx",
        "Apache",
    ),
    "tools": (
        "Git",
        "GitHub",
        "GitLab",
        "Bitbucket",
        "Jira",
        "Slack",
        "Teams",
        "Figma",
        "Sketch",
        "Adobe XD",
        "Photoshop",
        "Illustrator",
        "InDesign",
        "Tableau",
        "Power BI",
        "Excel",
        "Google Analytics",
    ),
    "mobile": (
        "React Native",
        "Flutter",
        "Ionic",
        "Xamarin",
        "Android",
        "iOS",
        "Swift",
        "Kotlin",
    ),
    "data_science": (
        "Machine Learning",
        "Deep Learning",
        "TensorFlow",
        "PyTorch",
        "Pandas",
        "NumPy",
        "Scikit-learn",
        "Jupyter",
        "Keras",
        "OpenCV",
        "NLP",
        "Computer Vision",
        "Data Analysis",
        "Statistics",
    ),
    "testing": (
        "Jest",
        "Mocha",
        "Cypress",
        "Selenium",
        "JUnit",
        "PyTest",
        "PHPUnit",
        "Karma",
        "Jasmine",
    ),
    "process": (
        "Agile",
        "Scrum",
        "Kanban",
        "Waterfall",
        "Project Management",
        "Team Leadership",
        "Stakeholder Management",
    ),
    "soft_skills": (
        "Communication",
        "Leadership",
        "Problem Solving",
        "Team Collaboration",
        "Critical Thinking",
        "Time Management",
        "Adaptability",
        "Creativity",
        "Analytical Thinking",
    ),
}


def _unique(values) -> tuple[str, ...]:
    seen = set()
    ordered = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        ordered.append(value)
    return tuple(ordered)


SKILLS: tuple[str, ...] = _unique(
    skill for skills in SKILL_CATEGORIES.values() for skill in skills
)

CERTIFICATION_KEYWORDS: tuple[str, ...] = (
    "AWS",
    "Azure",
    "Google Cloud",
    "PMP",
    "Scrum Master",
    "Six Sigma",
    "CISSP",
    "CISA",
    "CompTIA",
    "Oracle",
    "Microsoft",
    "Cisco",
    "VMware",
    "Red Hat",
    "Kubernetes",
    "Docker",
)

LANGUAGES: tuple[str, ...] = (
    "English",
    "Spanish",
    "French",
    "German",
    "Chinese",
    "Japanese",
    "Korean",
    "Arabic",
    "Hindi",
    "Bengali",
    "Portuguese",
    "Russian",
    "Italian",
    "Dutch",
    "Swedish",
    "Norwegian",
)

SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "experience": (
        "experience",
        "work history",
        "employment",
        "professional experience",
    ),
    "education": ("education", "academic background", "qualification"),
    "certifications": ("certification", "certificates", "licensed", "credentials"),
    "projects": ("project", "portfolio", "work samples"),
    "languages": ("language", "linguistic"),
    "summary": ("summary", "objective", "profile", "about"),
}

MAJOR_HEADINGS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "awards",
    "references",
)

DEGREE_KEYWORDS: tuple[str, ...] = (
    "bachelor",
    "master",
    "phd",
    "diploma",
    "certificate",
    r"b\.?tech",
    r"m\.?tech",
    "mba",
    "bba",
    "bca",
    "mca",
    "be",
    "me",
    "ms",
    "bs",
    "ba",
    "ma",
)
