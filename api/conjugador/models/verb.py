"""
Verb, paradigm and form models.
"""
from pydantic import BaseModel, Field, field_serializer, field_validator
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Tuple

from conjugador.models.enums import (
    Dialect,
    Mood,
    Person,
    Region,
    RegularityClass,
    RuleTag,
    Tense,
)


class Form(BaseModel):
    """A single inflected surface form."""
    mood: Mood
    tense: Tense
    person: Person
    value: str
    accepts: Mapping[Dialect, str] = Field(default_factory=dict, validate_default=True)  # Equivalent form in the other 2nd-singular system
    alt: Tuple[str, ...] = ()  # Interchangeable variants (e.g. -ra/-se)
    rules: FrozenSet[RuleTag] = frozenset()  # Informational only

    class Config:
        frozen = True

    @field_validator('accepts')
    @classmethod
    def freeze_accepts(cls, v):
        """Read-only view so the accepts map cannot change after load."""
        return MappingProxyType(dict(v))

    @field_serializer('accepts')
    def serialize_accepts(self, v) -> Dict[Dialect, str]:
        return dict(v)

    @property
    def key(self) -> Tuple[Mood, Tense, Person]:
        return (self.mood, self.tense, self.person)

    def accepted_for(self, dialect: Dialect) -> Optional[str]:
        """Return the surface form usable by speakers of ``dialect``, if declared."""
        return self.accepts.get(dialect)


class Paradigm(BaseModel):
    """A conjugation table valid for a set of regions."""
    region_tags: FrozenSet[Region]
    forms: Tuple[Form, ...]

    class Config:
        frozen = True

    def covers(self, region: Region) -> bool:
        return region in self.region_tags

    def forms_for(self, mood: Mood, tense: Tense, person: Person) -> Iterator[Form]:
        key = (mood, tense, person)
        return (form for form in self.forms if form.key == key)


class Verb(BaseModel):
    """Verb record - identity plus its region-tagged paradigms."""
    lemma: str  # Unique after merge
    id: Optional[str] = None  # Pre-merge identifier, may collide across sources
    regularity_class: RegularityClass
    paradigms: Tuple[Paradigm, ...]
    source: Optional[str] = None  # Name of the table the record came from

    class Config:
        frozen = True

    @property
    def regions(self) -> FrozenSet[Region]:
        covered = set()
        for paradigm in self.paradigms:
            covered.update(paradigm.region_tags)
        return frozenset(covered)

    @property
    def form_count(self) -> int:
        return sum(len(paradigm.forms) for paradigm in self.paradigms)

    def iter_forms(self) -> Iterator[Tuple[Paradigm, Form]]:
        for paradigm in self.paradigms:
            for form in paradigm.forms:
                yield paradigm, form
