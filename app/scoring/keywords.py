from __future__ import annotations

import re

MAX_KEYWORDS = 50

# Word edges are lookarounds rather than \b so names ending in a symbol (C++, C#) still match.
_TECH_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?<![\w.+#])(?:JavaScript|TypeScript|Python|Java|C\+\+|C#|PHP)(?![\w+#])",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?<![\w.])(?:React|Vue|Angular|Node\.js|Next\.js|Django|Flask|FastAPI)(?![\w])",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?<![\w.])(?:SQL|MySQL|MongoDB|PostgreSQL|Redis|AWS|Azure|GCP|Docker|Kubernetes|Terraform|Git|Linux)(?![\w])",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?<![\w.])(?:API|REST|GraphQL|HTML|CSS|SASS|SCSS)(?![\w])",
        re.IGNORECASE,
    ),
)

# "experience with Machine Learning", "strong in Python": the lead words match in any case,
# the named skill must be capitalised.
_QUALIFIED_SKILL_RE = re.compile(
    r"\b(?i:years?|experience|proficient|expert|knowledge|familiar|strong)\s+(?i:in|with)\s+"
    r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b"
)

# Capitalised word runs are treated as likely product, company or technology names.
_CAPITALIZED_RE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
_MIN_CAPITALIZED_LEN = 4
_MAX_CAPITALIZED_LEN = 29


def extract_keywords(text: str) -> list[str]:
    if not text:
        return []

    candidates: list[str] = []
    for pattern in _TECH_PATTERNS:
        candidates.extend(match.group(0) for match in pattern.finditer(text))
    candidates.extend(match.group(0) for match in _QUALIFIED_SKILL_RE.finditer(text))

    for match in _CAPITALIZED_RE.finditer(text):
        token = match.group(0)
        if _MIN_CAPITALIZED_LEN <= len(token) <= _MAX_CAPITALIZED_LEN:
            candidates.append(token)

    keywords: list[str] = []
    seen: set[str] = set()
    for candidate in candidates:
        keyword = candidate.lower().strip()
        if not keyword or keyword in seen:
            continue
        seen.add(keyword)
        keywords.append(keyword)
    return keywords[:MAX_KEYWORDS]
