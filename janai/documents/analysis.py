"""
Deterministic document analysis for the civic companion.

Turns extracted document text into a markdown brief that seeds the
assistant: classification, key topics, a short summary, guidance and
next steps. Text extraction itself happens upstream.
"""
import re
from datetime import datetime, timezone
from typing import List, Optional, Set

from janai.routing.mappings import map_all_matches

SENTENCE_SPLIT = re.compile(r"[.!?]+")

MAX_TOPICS = 10
MAX_SENTENCE_TOPICS = 5

DOCUMENT_CATEGORY_TABLE = (
    (("government", "ministry", "department", "act", "scheme"), "government"),
    (("scheme", "subsidy", "grant", "benefit"), "scheme"),
    (("how to", "procedure", "process", "application"), "service_guide"),
    (("policy", "regulation", "rule"), "policy"),
)

CATEGORY_LABELS = (
    ("government", "- **Type:** Government Document"),
    ("scheme", "- **Category:** Government Scheme/Benefit"),
    ("service_guide", "- **Category:** Service/Procedure Guide"),
    ("policy", "- **Category:** Policy/Regulation"),
)

TOPIC_KEYWORDS = (
    "aadhaar", "pan", "ration card", "passport", "driving license",
    "voter id", "aadhar", "income certificate", "caste certificate",
    "domicile", "birth certificate", "death certificate", "marriage certificate",
    "property", "land", "electricity", "water", "gas", "pension",
    "scholarship", "loan", "subsidy", "grant", "benefit", "scheme",
    "application", "registration", "renewal", "update", "correction",
    "complaint", "grievance", "appeal", "verification", "approval",
)

GUIDANCE_TABLE = (
    (("aadhaar", "aadhar"),
     "**Aadhaar Services:** This document relates to Aadhaar. You can update your "
     "Aadhaar at any Aadhaar Seva Kendra. Visit [UIDAI Portal](https://uidai.gov.in/) "
     "for more information."),
    (("ration", "food"),
     "**Ration Card:** For ration card services, visit your State Food & Civil "
     "Supplies website or local Fair Price Shop."),
    (("passport",),
     "**Passport Services:** Apply for passport at your nearest Passport Seva Kendra. "
     "Visit [Passport India](https://www.passportindia.gov.in/) for appointments."),
    (("pan",),
     "**PAN Card:** Update or apply for PAN at "
     "[NSDL Portal](https://www.onlineservices.nsdl.com/). Processing takes 15-20 days."),
    (("scheme", "benefit", "subsidy"),
     "**Government Schemes:** Check your eligibility for various government schemes "
     "at [PM Schemes Portal](https://www.pib.gov.in/)."),
    (("complaint", "grievance"),
     "**File Complaint:** You can file complaints through this app or visit your "
     "local municipal office."),
)

GENERAL_GUIDANCE = (
    "**General Civic Services:** This document relates to government services. "
    "Please refer to the relevant department or visit the official government "
    "portal for more information."
)

ACTION_PLANS = (
    (("application", "apply"), (
        "Prepare required documents as mentioned in the document",
        "Visit the appropriate government office or portal",
        "Fill out the application form completely",
        "Submit and keep the reference number for tracking",
    )),
    (("renewal", "update"), (
        "Check the expiry date of your document",
        "Gather required documents for renewal/update",
        "Visit the relevant office or use online portal",
        "Complete the renewal/update process",
    )),
    (("scheme", "benefit"), (
        "Verify your eligibility for the scheme",
        "Collect required documents",
        "Submit application through official channel",
        "Track application status regularly",
    )),
)

DEFAULT_ACTIONS = (
    "Review the document carefully",
    "Identify relevant sections for your needs",
    "Contact the appropriate government department",
    "Follow the prescribed procedure",
)


def classify_document(content: str) -> Set[str]:
    return map_all_matches(content, DOCUMENT_CATEGORY_TABLE)


def extract_key_topics(content: str) -> List[str]:
    """
    Keyword topics first, then leading sentence fragments.
    Insertion order is kept; at most MAX_TOPICS entries.
    """
    content = content or ""
    lowered = content.lower()
    topics: List[str] = []

    def add(topic: str) -> None:
        if topic not in topics:
            topics.append(topic)

    for keyword in TOPIC_KEYWORDS:
        if keyword in lowered:
            add(keyword[0].upper() + keyword[1:])

    for sentence in SENTENCE_SPLIT.split(content)[:MAX_SENTENCE_TOPICS]:
        trimmed = sentence.strip()
        if 20 < len(trimmed) < 150:
            add(trimmed[:100] + "...")

    return topics[:MAX_TOPICS]


def extract_document_summary(content: str) -> str:
    sentences = [s for s in SENTENCE_SPLIT.split(content or "") if s.strip()]
    summary = ". ".join(sentences[:3]).strip()
    return summary + "." if summary else ""


def generate_civic_guidance(content: str) -> str:
    lowered = (content or "").lower()
    sections = [
        text for keywords, text in GUIDANCE_TABLE
        if any(k in lowered for k in keywords)
    ]
    if not sections:
        sections = [GENERAL_GUIDANCE]
    return "".join(f"{s}\n\n" for s in sections)


def generate_action_items(content: str) -> str:
    lowered = (content or "").lower()
    steps = DEFAULT_ACTIONS
    for keywords, plan in ACTION_PLANS:
        if any(k in lowered for k in keywords):
            steps = plan
            break
    return "".join(f"{i}. {step}\n" for i, step in enumerate(steps, start=1))


def generate_system_instructions(
    content: str,
    file_name: str,
    now: Optional[datetime] = None,
) -> str:
    now = now or datetime.now(timezone.utc)
    categories = classify_document(content)

    lines = [
        "# Civic Life Companion - System Instructions",
        "",
        f"**Document:** {file_name}",
        f"**Analysis Date:** {now.isoformat()}",
        "",
        "## Document Classification",
    ]
    lines.extend(label for key, label in CATEGORY_LABELS if key in categories)

    lines.extend(["", "## Key Topics Identified"])
    lines.extend(f"- {topic}" for topic in extract_key_topics(content))

    summary = extract_document_summary(content)
    if summary:
        lines.extend(["", "## Document Summary", summary])

    instructions = "\n".join(lines) + "\n"
    instructions += "\n## Civic Life Companion Guidance\n"
    instructions += generate_civic_guidance(content)
    instructions += "\n## Recommended Actions\n"
    instructions += generate_action_items(content)
    return instructions
