"""
Schemas for raw verb source tables.

A source table is a named list of verb records in the authoring shape:

    {"id": ..., "lemma": ..., "type": "regular" | "irregular",
     "paradigms": [{"regionTags": [...],
                    "forms": [{"mood", "tense", "person", "value",
                               "accepts"?, "alt"?, "rules"?}]}]}

Tables keep their records as plain dicts: records are validated one at a
time by the store so that one broken verb is reported without discarding
the rest of its table.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, Dict, List, Optional

from conjugador.models.enums import Dialect, Mood, Person, Region, RegularityClass, RuleTag, Tense
from conjugador.schemas.utils import normalize_mood_tense, normalize_person, normalize_rule_tag


class RawForm(BaseModel):
    """One authored form."""
    mood: Mood
    tense: Tense
    person: Person
    value: str
    accepts: Dict[Dialect, str] = Field(default_factory=dict)
    alt: List[str] = Field(default_factory=list)
    rules: List[RuleTag] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def normalize_categories(cls, data: Any) -> Any:
        """Map tense/person aliases onto the enumerations before field validation."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        mood, tense = normalize_mood_tense(data.get('mood'), data.get('tense'))
        data['mood'] = mood
        data['tense'] = tense
        data['person'] = normalize_person(data.get('person'), mood)
        return data

    @field_validator('value')
    @classmethod
    def validate_value(cls, v):
        """Validate value field is not empty."""
        if not v or not v.strip():
            raise ValueError("value cannot be missing or empty")
        return v.strip()

    @field_validator('accepts', mode='before')
    @classmethod
    def validate_accepts(cls, v):
        """Only the tú/vos systems may appear as accepts keys."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"accepts must be an object. Got: {type(v).__name__}")
        valid = {d.value for d in Dialect}
        for key, surface in v.items():
            if key not in valid:
                raise ValueError(f"accepts keys must be one of: {', '.join(sorted(valid))}. Got: {key}")
            if not surface or not str(surface).strip():
                raise ValueError(f"accepts.{key} cannot be empty")
        return {key: str(surface).strip() for key, surface in v.items()}

    @field_validator('alt', mode='before')
    @classmethod
    def validate_alt(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"alt must be a list of strings. Got: {type(v).__name__}")
        if not all(isinstance(s, str) for s in v):
            raise ValueError(f"alt items must be strings. Got: {v!r}")
        return [s.strip() for s in v if s.strip()]

    @field_validator('rules', mode='before')
    @classmethod
    def validate_rules(cls, v):
        """Rule tags are a closed set; unknown tags are rejected."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [normalize_rule_tag(tag) for tag in v]


class RawParadigm(BaseModel):
    """One authored paradigm."""
    region_tags: List[Region] = Field(..., alias="regionTags")
    forms: List[RawForm] = Field(default_factory=list)

    @field_validator('region_tags')
    @classmethod
    def validate_region_tags(cls, v):
        if not v:
            raise ValueError("regionTags cannot be empty")
        return v

    class Config:
        populate_by_name = True  # Allow both 'regionTags' and 'region_tags'


class RawVerbRecord(BaseModel):
    """One authored verb record."""
    lemma: str
    id: Optional[str] = None
    regularity_class: RegularityClass = Field(default=RegularityClass.REGULAR, alias="type")
    paradigms: List[RawParadigm] = Field(default_factory=list)

    @field_validator('lemma')
    @classmethod
    def validate_lemma(cls, v):
        """Validate lemma field is not empty."""
        if not v or not v.strip():
            raise ValueError("lemma cannot be missing or empty")
        return v.strip()

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return None if v is None else str(v)

    class Config:
        populate_by_name = True  # Allow both 'type' and 'regularity_class'


class RawVerbTable(BaseModel):
    """A named source table of raw verb records."""
    name: str
    verbs: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("name cannot be missing or empty")
        return v.strip()

    def __len__(self) -> int:
        return len(self.verbs)


class CanonicalEntry(BaseModel):
    """The surviving record for one lemma after merge."""
    lemma: str  # Normalized lemma key
    source: str  # Name of the table the record came from
    record: Dict[str, Any]

    class Config:
        frozen = True


class CanonicalTable(BaseModel):
    """Merged table with exactly one record per lemma."""
    entries: List[CanonicalEntry] = Field(default_factory=list)
    replacements: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Lemma -> source names of every occurrence, in precedence order (only for repeated lemmas)",
    )

    class Config:
        frozen = True

    def __len__(self) -> int:
        return len(self.entries)

    def lemmas(self) -> List[str]:
        return [entry.lemma for entry in self.entries]

    def get(self, lemma: str) -> Optional[CanonicalEntry]:
        for entry in self.entries:
            if entry.lemma == lemma:
                return entry
        return None
