"""
Models package - enums and the immutable verb records.
"""
from conjugador.models.enums import (
    Dialect,
    LemmaStatus,
    Mood,
    Person,
    PersonFamily,
    Region,
    RegularityClass,
    ResolutionSource,
    RuleKind,
    RuleTag,
    Tense,
    UnattestedReason,
)
from conjugador.models.verb import Form, Paradigm, Verb

__all__ = [
    'Dialect',
    'LemmaStatus',
    'Mood',
    'Person',
    'PersonFamily',
    'Region',
    'RegularityClass',
    'ResolutionSource',
    'RuleKind',
    'RuleTag',
    'Tense',
    'UnattestedReason',
    'Form',
    'Paradigm',
    'Verb',
]
