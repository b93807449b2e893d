from datetime import datetime, timezone
from janai.documents.analysis import (
    classify_document,
    extract_key_topics,
    extract_document_summary,
    generate_civic_guidance,
    generate_action_items,
    generate_system_instructions,
    GENERAL_GUIDANCE,
    MAX_TOPICS,
)

NOTICE = (
    "The Ministry of Food announces a new ration card scheme. "
    "Citizens can apply online through the portal. "
    "Bring your Aadhaar for verification."
)


def test_classify_document():
    assert classify_document(NOTICE) == {"government", "scheme"}
    assert "policy" in classify_document("New regulation on waste disposal")
    assert classify_document("") == set()


def test_key_topics_keywords_then_sentences():
    topics = extract_key_topics(NOTICE)

    assert topics[:4] == ["Aadhaar", "Ration card", "Scheme", "Verification"]
    assert topics[4] == "The Ministry of Food announces a new ration card scheme..."
    assert len(topics) == 7
    assert all(t.endswith("...") for t in topics[4:])


def test_key_topics_are_capped():
    content = " ".join([
        "aadhaar passport voter id domicile property land electricity",
        "water pension scholarship loan subsidy grant",
    ])
    assert len(extract_key_topics(content)) == MAX_TOPICS


def test_summary_uses_first_three_sentences():
    summary = extract_document_summary("One. Two! Three? Four.")

    assert summary == "One.  Two.  Three."
    assert extract_document_summary("") == ""


def test_guidance_sections_and_fallback():
    guidance = generate_civic_guidance(NOTICE)

    assert "**Aadhaar Services:**" in guidance
    assert "**Ration Card:**" in guidance
    assert "**Government Schemes:**" in guidance
    assert "**Passport Services:**" not in guidance
    assert generate_civic_guidance("Meeting minutes for the local club") == f"{GENERAL_GUIDANCE}\n\n"


def test_action_items_pick_first_plan():
    assert generate_action_items(NOTICE).startswith("1. Prepare required documents")
    assert generate_action_items("Please renew before expiry, update your address").startswith(
        "1. Check the expiry date"
    )
    assert generate_action_items("Meeting minutes").startswith("1. Review the document carefully")
    assert generate_action_items("anything").count("\n") == 4


def test_system_instructions_are_deterministic_with_fixed_clock():
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)

    first = generate_system_instructions(NOTICE, "notice.pdf", now=now)
    second = generate_system_instructions(NOTICE, "notice.pdf", now=now)

    assert first == second
    assert first.startswith("# Civic Life Companion - System Instructions\n")
    assert "**Document:** notice.pdf" in first
    assert "**Analysis Date:** 2025-01-01T00:00:00+00:00" in first
    assert "- **Type:** Government Document" in first
    assert "- **Category:** Government Scheme/Benefit" in first
    assert "Policy/Regulation" not in first
    assert "## Document Summary\n" in first
    assert "## Recommended Actions\n1. Prepare required documents" in first
