from pydantic import BaseModel, Field, field_serializer, field_validator
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union

from conjugador.models.enums import (
    Dialect,
    LemmaStatus,
    Mood,
    Person,
    Region,
    RegularityClass,
    ResolutionSource,
    RuleKind,
    RuleTag,
    Tense,
    UnattestedReason,
)
from conjugador.utils.text_utils import normalize_answer, strip_accents


class ResolvedForm(BaseModel):
    """A form resolved for a region."""
    status: Literal["resolved"] = "resolved"
    lemma: str
    mood: Mood
    tense: Tense
    person: Person = Field(..., description="Person slot answered (native slot of the region)")
    region: Optional[Region] = Field(None, description="Requested region, None for nonfinite forms")
    value: str = Field(..., description="Primary surface form")
    alternates: Tuple[str, ...] = Field((), description="Interchangeable variants (alt)")
    dialect_equivalents: Mapping[Dialect, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Equivalent form in the other 2nd-singular system, when known",
    )
    rules: Tuple[RuleTag, ...] = ()
    source: ResolutionSource

    class Config:
        frozen = True

    @field_validator('dialect_equivalents')
    @classmethod
    def freeze_equivalents(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer('dialect_equivalents')
    def serialize_equivalents(self, v) -> Dict[Dialect, str]:
        return dict(v)

    @property
    def is_attested(self) -> bool:
        return True

    @property
    def accepted_answers(self) -> Tuple[str, ...]:
        """Primary value followed by its alternates, without repeats."""
        seen = []
        for candidate in (self.value, *self.alternates):
            if candidate not in seen:
                seen.append(candidate)
        return tuple(seen)

    def matches(self, answer: str, accent_sensitive: bool = True) -> bool:
        """
        Check a learner answer against the accepted answers.

        Comparison ignores case and surrounding/duplicated whitespace. Accents
        are significant unless ``accent_sensitive`` is False.
        """
        candidate = normalize_answer(answer)
        if not candidate:
            return False
        targets = [normalize_answer(a) for a in self.accepted_answers]
        if not accent_sensitive:
            candidate = strip_accents(candidate)
            targets = [strip_accents(t) for t in targets]
        return candidate in targets


class Unattested(BaseModel):
    """Typed gap: the combination has no attested form."""
    status: Literal["unattested"] = "unattested"
    lemma: str
    mood: Mood
    tense: Tense
    person: Optional[Person] = None
    region: Optional[Region] = None
    reason: UnattestedReason

    class Config:
        frozen = True

    @property
    def is_attested(self) -> bool:
        return False


ResolutionResult = Union[ResolvedForm, Unattested]


class RuleTagResponse(BaseModel):
    """Rule tag with its category and Spanish description."""
    tag: RuleTag
    kind: RuleKind
    label: str


class ExplainResponse(BaseModel):
    """Rule annotations for one form."""
    lemma: str
    mood: Mood
    tense: Tense
    person: Person
    value: Optional[str] = None
    rules: List[RuleTagResponse] = Field(default_factory=list)


class RegionResponse(BaseModel):
    """Region response schema."""
    code: Region
    name: str
    native_dialect: Dialect


class RegionsResponse(BaseModel):
    """List of regions response schema."""
    regions: List[RegionResponse]


class VerbSummaryResponse(BaseModel):
    """Verb summary schema."""
    lemma: str
    id: Optional[str] = None
    regularity_class: RegularityClass
    status: LemmaStatus
    regions: List[Region]
    tenses: List[Tense]
    form_count: int
    source: Optional[str] = None


class VerbListResponse(BaseModel):
    """List of lemmas response schema."""
    lemmas: List[str]
    total: int


class TableCell(BaseModel):
    """One cell of a conjugation table."""
    person: Person
    person_label: str
    value: str
    alternates: List[str] = Field(default_factory=list)
    source: ResolutionSource


class TableSection(BaseModel):
    """All cells of one mood/tense."""
    mood: Mood
    tense: Tense
    label: str
    cells: List[TableCell]


class ConjugationTableResponse(BaseModel):
    """Resolved conjugation grid of a verb for a region."""
    lemma: str
    region: Region
    sections: List[TableSection]
