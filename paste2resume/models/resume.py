"""Resume record data models."""

import re
from typing import Any, ClassVar, Dict, List, Optional, Set

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from paste2resume.utils.logger import get_logger

logger = get_logger(__name__)


# Values models write when they have nothing to say
PLACEHOLDER_VALUES = {
    "", "-", "--", "n/a", "na", "none", "null", "nil", "unknown",
    "not provided", "not specified", "not available", "not mentioned",
}

INTEGER_PATTERN = re.compile(r"\d+")
YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")
INTEREST_SEPARATOR = re.compile(r"\s+[-–—]\s+|:\s+")


def normalize_key(key: str) -> str:
    """Lower-case a field name and turn spaces/hyphens into underscores."""
    return re.sub(r"[\s\-]+", "_", str(key).strip().lower()).strip("_")


def clean_scalar(value: Any) -> Optional[str]:
    """
    Turn a decoded value into a trimmed string, or None for placeholders.

    Lists and mappings are flattened so a misplaced nested value still
    reaches the resume instead of failing validation.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        value = ", ".join(f"{k}: {v}" for k, v in value.items() if v not in (None, ""))
    elif isinstance(value, (list, tuple)):
        value = ", ".join(text for text in (clean_scalar(v) for v in value) if text)
    text = str(value).strip().strip('"\'').strip()
    if text.lower() in PLACEHOLDER_VALUES:
        return None
    return text


def parse_int(value: Any, year: bool = False) -> Optional[int]:
    """
    Pull an integer out of free text ("34 years old", "Class of 2019").

    Args:
        value: Raw value
        year: Prefer a four digit year when the text contains one

    Returns:
        Parsed integer or None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = clean_scalar(value)
    if not text:
        return None
    if year:
        match = YEAR_PATTERN.search(text)
        if match:
            return int(match.group(0))
    match = INTEGER_PATTERN.search(text)
    return int(match.group(0)) if match else None


class ResumeEntry(BaseModel):
    """Base for list entries; maps loose model output onto known fields."""

    ALIASES: ClassVar[Dict[str, str]] = {}
    PRIMARY_FIELD: ClassVar[str] = ""
    NUMERIC_FIELDS: ClassVar[tuple] = ()

    @classmethod
    def field_for(cls, key: str) -> Optional[str]:
        """Resolve a decoded key to a field name, or None if unknown."""
        key = normalize_key(key)
        key = cls.ALIASES.get(key, key)
        return key if key in cls.model_fields else None

    @classmethod
    def known_keys(cls) -> Set[str]:
        """Field names and aliases an item of this type may carry."""
        return set(cls.model_fields) | set(cls.ALIASES)

    @classmethod
    def from_text(cls, text: str) -> Dict[str, Any]:
        """Map a plain string item onto the entry's primary field."""
        return {cls.PRIMARY_FIELD: text}

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, str):
            data = cls.from_text(data.strip())
        if not isinstance(data, dict):
            return data

        coerced: Dict[str, Any] = {}
        for key, value in data.items():
            field = cls.field_for(key)
            if field is None:
                logger.debug(f"Ignoring unknown {cls.__name__} key: {key}")
                continue
            # First occurrence wins when a model repeats a key under an alias
            if coerced.get(field) is None:
                coerced[field] = value
        return coerced

    @field_validator("*", mode="before")
    @classmethod
    def _clean_values(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name in cls.NUMERIC_FIELDS:
            return value
        return clean_scalar(value)

    def is_empty(self) -> bool:
        """True when every field is missing."""
        return all(value is None for value in self.model_dump().values())


class Interest(ResumeEntry):
    """An interest with a short description."""
    interest: Optional[str] = None
    description: Optional[str] = None

    ALIASES: ClassVar[Dict[str, str]] = {
        "name": "interest",
        "hobby": "interest",
        "topic": "interest",
        "details": "description",
        "desc": "description",
    }
    PRIMARY_FIELD: ClassVar[str] = "interest"

    @classmethod
    def from_text(cls, text: str) -> Dict[str, Any]:
        parts = INTEREST_SEPARATOR.split(text, maxsplit=1)
        if len(parts) == 2:
            return {"interest": parts[0], "description": parts[1]}
        return {"interest": text}


class WorkExperience(ResumeEntry):
    """Represents a work experience entry."""
    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None

    ALIASES: ClassVar[Dict[str, str]] = {
        "employer": "company",
        "organization": "company",
        "company_name": "company",
        "title": "position",
        "role": "position",
        "job_title": "position",
        "city": "location",
        "based_in": "location",
        "start": "start_date",
        "from": "start_date",
        "end": "end_date",
        "to": "end_date",
        "responsibilities": "description",
        "summary": "description",
        "details": "description",
    }
    PRIMARY_FIELD: ClassVar[str] = "company"


class Education(ResumeEntry):
    """Education entry."""
    school: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    graduation_year: Optional[int] = None

    ALIASES: ClassVar[Dict[str, str]] = {
        "university": "school",
        "institution": "school",
        "college": "school",
        "field": "field_of_study",
        "major": "field_of_study",
        "study": "field_of_study",
        "year": "graduation_year",
        "graduated": "graduation_year",
        "graduation": "graduation_year",
        "graduation_date": "graduation_year",
        "end_date": "graduation_year",
    }
    PRIMARY_FIELD: ClassVar[str] = "school"
    NUMERIC_FIELDS: ClassVar[tuple] = ("graduation_year",)

    @field_validator("graduation_year", mode="before")
    @classmethod
    def _parse_year(cls, value: Any) -> Optional[int]:
        return parse_int(value, year=True)


class Certification(ResumeEntry):
    """Certification entry."""
    name: Optional[str] = None
    organization: Optional[str] = None
    date_earned: Optional[str] = None

    ALIASES: ClassVar[Dict[str, str]] = {
        "certification": "name",
        "title": "name",
        "issuer": "organization",
        "issued_by": "organization",
        "issuing_organization": "organization",
        "authority": "organization",
        "date": "date_earned",
        "issued": "date_earned",
        "earned": "date_earned",
        "year": "date_earned",
    }
    PRIMARY_FIELD: ClassVar[str] = "name"


class ResumeRecord(BaseModel):
    """
    Structured resume data for a single request.

    Every field is optional. Construction accepts the loose output of the
    structured-text decoder (synonym keys, placeholder values, scalars where
    lists belong) as well as the clean JSON posted back by the edit form.
    """
    name: Optional[str] = None
    age: Optional[int] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    links: List[str] = Field(default_factory=list)
    interests: List[Interest] = Field(default_factory=list)
    work_experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    resume_style_notes: Optional[str] = None

    ALIASES: ClassVar[Dict[str, str]] = {
        "full_name": "name",
        "city": "location",
        "address": "location",
        "email_address": "email",
        "phone_number": "phone",
        "telephone": "phone",
        "link": "links",
        "urls": "links",
        "websites": "links",
        "profiles": "links",
        "hobbies": "interests",
        "interest": "interests",
        "experience": "work_experience",
        "work_history": "work_experience",
        "employment": "work_experience",
        "employment_history": "work_experience",
        "professional_experience": "work_experience",
        "educations": "education",
        "certification": "certifications",
        "certificates": "certifications",
        "licenses_and_certifications": "certifications",
        "style_notes": "resume_style_notes",
        "resume_notes": "resume_style_notes",
        "notes": "resume_style_notes",
    }
    ENTRY_TYPES: ClassVar[Dict[str, type]] = {
        "interests": Interest,
        "work_experience": WorkExperience,
        "education": Education,
        "certifications": Certification,
    }

    @classmethod
    def from_structured(cls, data: Dict[str, Any]) -> "ResumeRecord":
        """
        Build a record from decoded structured text.

        Args:
            data: Mapping produced by the structured-text decoder

        Returns:
            ResumeRecord with whatever fields could be recognised
        """
        return cls.model_validate(data or {})

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        coerced: Dict[str, Any] = {}
        for key, value in data.items():
            field = normalize_key(key)
            field = cls.ALIASES.get(field, field)
            if field not in cls.model_fields:
                logger.debug(f"Ignoring unknown resume field: {key}")
                continue
            if field in coerced and coerced[field] not in (None, []):
                continue

            if field == "age":
                coerced[field] = parse_int(value)
            elif field == "links":
                coerced[field] = _coerce_links(value)
            elif field in cls.ENTRY_TYPES:
                coerced[field] = _coerce_entries(value, cls.ENTRY_TYPES[field])
            else:
                coerced[field] = clean_scalar(value)
        return coerced

    def to_prompt_json(self) -> str:
        """Serialize the record for the HTML generation prompt."""
        return self.model_dump_json(exclude_none=True)

    def is_empty(self) -> bool:
        """True when nothing at all was extracted."""
        return not any(self.model_dump(exclude_none=True).values())


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _coerce_links(value: Any) -> List[str]:
    """Links arrive as strings, "Label: url" mappings or one comma separated line."""
    if isinstance(value, str):
        value = value.split(",")

    links: List[str] = []
    for item in _as_list(value):
        if isinstance(item, dict):
            candidates = [f"{k}: {v}" for k, v in item.items() if clean_scalar(v)]
        else:
            candidates = [clean_scalar(item)]
        links.extend(link for link in candidates if link)
    return links


def _coerce_entries(value: Any, entry_type: type) -> List[Any]:
    """
    Normalise an entry list before validation.

    A mapping with no recognisable keys is treated as several "label: text"
    pairs (e.g. interests written as "Chess: weekend tournaments").
    """
    entries: List[Any] = []
    for item in _as_list(value):
        if isinstance(item, ResumeEntry):
            item = item.model_dump()
        if isinstance(item, dict) and item:
            known = [key for key in item if entry_type.field_for(key)]
            if not known:
                if entry_type is Interest:
                    entries.extend(
                        {"interest": key, "description": text}
                        for key, text in item.items()
                    )
                else:
                    logger.debug(f"Dropping unrecognised {entry_type.__name__} item: {item}")
                continue
        elif not isinstance(item, (dict, str)):
            item = clean_scalar(item)
        if isinstance(item, str) and not clean_scalar(item):
            continue
        entries.append(item)

    return [entry for entry in entries if not entry_type.model_validate(entry).is_empty()]
