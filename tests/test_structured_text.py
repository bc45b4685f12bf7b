"""Tests for the structured-text decoder used on extraction responses."""

from paste2resume.services.extraction_service import ENTRY_FIELDS, KNOWN_FIELDS
from paste2resume.utils.structured_text import parse_item, parse_structured_text


def test_scalar_fields_and_numbered_lists():
    text = (
        "name: Jane Doe\n"
        "location: Berlin, Germany\n"
        "links:\n"
        "1. https://github.com/jane\n"
        "2. https://linkedin.com/in/jane\n"
    )
    data = parse_structured_text(text)

    assert data["name"] == "Jane Doe"
    assert data["location"] == "Berlin, Germany"
    assert data["links"] == ["https://github.com/jane", "https://linkedin.com/in/jane"]


def test_inline_item_pairs_keep_commas_in_values():
    text = (
        "work_experience:\n"
        "1. company: Acme, position: Engineer, description: Built things, shipped stuff\n"
    )
    data = parse_structured_text(text)

    assert data["work_experience"] == [{
        "company": "Acme",
        "position": "Engineer",
        "description": "Built things, shipped stuff",
    }]


def test_indented_pairs_merge_into_current_item():
    text = (
        "education:\n"
        "1. school: MIT\n"
        "   degree: BSc\n"
        "   graduation_year: 2012\n"
        "2. school: ETH\n"
    )
    data = parse_structured_text(text)

    assert data["education"] == [
        {"school": "MIT", "degree": "BSc", "graduation_year": "2012"},
        {"school": "ETH"},
    ]


def test_unknown_unindented_key_continues_item_when_fields_known():
    text = (
        "work_experience:\n"
        "1. company: Acme\n"
        "position: Engineer\n"
        "email: jane@example.com\n"
    )
    data = parse_structured_text(text, KNOWN_FIELDS)

    assert data["work_experience"] == [{"company": "Acme", "position": "Engineer"}]
    assert data["email"] == "jane@example.com"


def test_markdown_headings_bold_and_bullets():
    text = (
        "**Name:** Jane Doe\n"
        "## Work Experience\n"
        "- **Company:** Acme, **Position:** Engineer\n"
    )
    data = parse_structured_text(text)

    assert data["name"] == "Jane Doe"
    assert data["work_experience"] == [{"Company": "Acme", "Position": "Engineer"}]


def test_items_after_scalar_turn_field_into_list():
    data = parse_structured_text("interests: Hiking\n- Chess\n")
    assert data["interests"] == ["Hiking", "Chess"]


def test_indented_bullet_extends_description():
    text = (
        "work_experience:\n"
        "1. company: Acme, position: Engineer\n"
        "   - Built the billing system\n"
        "   - Mentored two juniors\n"
    )
    data = parse_structured_text(text)

    assert data["work_experience"][0]["description"] == (
        "Built the billing system\nMentored two juniors"
    )


def test_wrapped_scalar_line_is_appended():
    data = parse_structured_text("resume_style_notes: Modern\nand minimal\n")
    assert data["resume_style_notes"] == "Modern and minimal"


def test_code_fences_and_empty_input():
    assert parse_structured_text("```\nname: Jane\n```") == {"name": "Jane"}
    assert parse_structured_text("") == {}
    assert parse_structured_text(None) == {}


def test_parse_item():
    assert parse_item("Chess - weekend tournaments") == "Chess - weekend tournaments"
    assert parse_item("https://example.com") == "https://example.com"
    assert parse_item("Portfolio: https://jane.dev") == {"Portfolio": "https://jane.dev"}


def test_full_model_response(extraction_response):
    data = parse_structured_text(extraction_response, KNOWN_FIELDS)

    assert data["name"] == "Jane Doe"
    assert data["links"][1] == {"LinkedIn": "https://linkedin.com/in/janedoe"}
    assert len(data["work_experience"]) == 2
    assert data["work_experience"][0]["description"] == "Led the payments team, cut latency by 40%"
    assert data["work_experience"][1] == {
        "company": "Initech",
        "position": "Engineer",
        "start_date": "2015",
        "end_date": "2019",
    }
    assert data["resume_style_notes"] == "Modern, minimal, tech industry"


def test_item_keys_shared_with_top_level_fields_stay_in_item():
    text = (
        "location: Berlin\n"
        "work_experience:\n"
        "1. Company: Acme\n"
        "Position: Engineer\n"
        "Location: Remote\n"
        "Start Date: 2020\n"
        "End Date: 2022\n"
        "2. Company: Initech\n"
    )
    data = parse_structured_text(text, KNOWN_FIELDS, ENTRY_FIELDS)

    assert data["location"] == "Berlin"
    assert data["work_experience"] == [
        {
            "Company": "Acme",
            "Position": "Engineer",
            "Location": "Remote",
            "Start Date": "2020",
            "End Date": "2022",
        },
        {"Company": "Initech"},
    ]


def test_top_level_key_closes_list_when_not_an_item_key():
    text = (
        "certifications:\n"
        "1. Organization: Amazon\n"
        "Name: AWS SA\n"
        "resume_style_notes: Minimal\n"
    )
    data = parse_structured_text(text, KNOWN_FIELDS, ENTRY_FIELDS)

    assert data["certifications"] == [{"Organization": "Amazon", "Name": "AWS SA"}]
    assert data["resume_style_notes"] == "Minimal"


def test_empty_list_header_yields_empty_list():
    data = parse_structured_text("links:\nemail: jane@example.com\n")

    assert data["links"] == []
    assert data["email"] == "jane@example.com"


def test_repeated_list_header_keeps_appending():
    data = parse_structured_text("links:\n- a\nname: Jane\nlinks:\n- b\n")

    assert data["links"] == ["a", "b"]
    assert data["name"] == "Jane"


def test_repeated_scalar_overwrites():
    assert parse_structured_text("name: Jane\nname: Janet\n") == {"name": "Janet"}


def test_single_pair_items_merge_until_key_repeats():
    text = (
        "work_experience:\n"
        "- Company: Acme\n"
        "- Position: Engineer\n"
        "- Company: Initech\n"
    )
    data = parse_structured_text(text)

    assert data["work_experience"] == [
        {"Company": "Acme", "Position": "Engineer"},
        {"Company": "Initech"},
    ]


def test_item_before_any_field_is_dropped():
    assert parse_structured_text("- stray\n1. also stray\nname: Jane\n") == {"name": "Jane"}
