# Fixed vocabularies for the deterministic analysis path.
# Matching is plain case-insensitive substring containment.

from typing import Iterable, List

COMMON_SKILLS = (
    # --- Languages ---
    "JavaScript", "Python", "Java", "C++", "C#", "PHP", "Ruby", "Go", "Rust",
    # --- Frameworks ---
    "React", "Angular", "Vue", "Node.js", "Express", "Django", "Flask", "Spring",
    # --- Tools / platforms ---
    "Git", "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Jenkins", "Jira",
    # --- Data stores ---
    "PostgreSQL", "MongoDB", "Redis", "MySQL", "SQLite",
    # --- Web ---
    "TypeScript", "HTML", "CSS", "SASS", "LESS", "Bootstrap", "jQuery", "Laravel", "ASP.NET",
    # --- Soft skills ---
    "Leadership", "Communication", "Teamwork", "Problem Solving", "Project Management",
)

EXPERIENCE_KEYWORDS = (
    "experience",
    "worked",
    "developed",
    "managed",
    "led",
    "created",
    "implemented",
    "achieved",
    "increased",
    "reduced",
)

EDUCATION_KEYWORDS = (
    "university",
    "college",
    "degree",
    "bachelor",
    "master",
    "phd",
    "education",
    "graduated",
    "gpa",
)


def count_keywords(text: str, keywords) -> int:
    """Number of distinct keywords contained in text, ignoring case."""
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def dedupe_labels(labels: Iterable[str], limit: int) -> List[str]:
    """
    Strip, drop blanks and case-insensitive duplicates (first wins), then cap.
    """
    seen = set()
    unique: List[str] = []
    for label in labels:
        label = label.strip()
        key = label.lower()
        if not label or key in seen:
            continue
        seen.add(key)
        unique.append(label)
        if len(unique) >= limit:
            break
    return unique
