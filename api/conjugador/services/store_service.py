"""
Paradigm store: the immutable lemma -> Verb mapping built at load time.

Loading merges the source tables, validates every surviving record and
converts it to frozen Verb/Paradigm/Form models. Records that cannot be
conjugated (no paradigms, an empty paradigm, or invalid forms) are never
dropped silently: each one produces a StructuralError that is logged and
either raised (strict) or kept on the store (non-strict).
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conjugador.core.exceptions import StoreLoadError
from conjugador.models.enums import LemmaStatus, StructuralErrorKind
from conjugador.models.verb import Form, Paradigm, Verb
from conjugador.schemas.source import CanonicalEntry, CanonicalTable, RawVerbRecord, RawVerbTable
from conjugador.services.integrity_service import find_accepts_violations
from conjugador.services.merge_service import merge_tables
from conjugador.utils.text_utils import normalize_lemma

logger = logging.getLogger(__name__)


class StructuralError(BaseModel):
    """A verb record that is not conjugatable."""
    lemma: str
    source: Optional[str] = None
    kind: StructuralErrorKind
    detail: str

    class Config:
        frozen = True

    def __str__(self) -> str:
        origin = f" (source '{self.source}')" if self.source else ""
        return f"{self.lemma}{origin}: {self.kind.value}: {self.detail}"


class ParadigmStore:
    """
    Read-only mapping from lemma to Verb.

    Instances are built by ``load_store``/``build_store`` and never mutated;
    a source change means building a new store.
    """

    def __init__(self, verbs: Dict[str, Verb], load_errors: Sequence[StructuralError] = ()):
        self._verbs: Mapping[str, Verb] = MappingProxyType(dict(verbs))
        self._load_errors: Tuple[StructuralError, ...] = tuple(load_errors)
        self._rejected = frozenset(error.lemma for error in self._load_errors) - set(self._verbs)

    @property
    def verbs(self) -> Mapping[str, Verb]:
        return self._verbs

    @property
    def load_errors(self) -> Tuple[StructuralError, ...]:
        return self._load_errors

    def get(self, lemma: str) -> Optional[Verb]:
        return self._verbs.get(normalize_lemma(lemma))

    def status(self, lemma: str) -> LemmaStatus:
        """Distinguish "no data" from "exists but could not be loaded"."""
        key = normalize_lemma(lemma)
        if key in self._verbs:
            return LemmaStatus.LOADED
        if key in self._rejected:
            return LemmaStatus.REJECTED
        return LemmaStatus.UNKNOWN

    def errors_for(self, lemma: str) -> List[StructuralError]:
        key = normalize_lemma(lemma)
        return [error for error in self._load_errors if error.lemma == key]

    def __contains__(self, lemma: object) -> bool:
        return isinstance(lemma, str) and normalize_lemma(lemma) in self._verbs

    def __len__(self) -> int:
        return len(self._verbs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._verbs)

    def __repr__(self) -> str:
        return f"ParadigmStore(verbs={len(self._verbs)}, load_errors={len(self._load_errors)})"


def _format_validation_error(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item.get('loc', ()))
        parts.append(f"{location}: {item.get('msg')}" if location else str(item.get('msg')))
    return '; '.join(parts)


def build_verb(entry: CanonicalEntry, strict_accepts_symmetry: bool = False) -> Tuple[Optional[Verb], List[StructuralError]]:
    """
    Validate one canonical record and convert it to a Verb.

    Returns:
        (verb, errors) - verb is None whenever errors is non-empty
    """
    try:
        raw = RawVerbRecord.model_validate(entry.record)
    except PydanticValidationError as e:
        return None, [StructuralError(
            lemma=entry.lemma,
            source=entry.source,
            kind=StructuralErrorKind.INVALID_RECORD,
            detail=_format_validation_error(e),
        )]

    errors: List[StructuralError] = []
    if not raw.paradigms:
        errors.append(StructuralError(
            lemma=entry.lemma,
            source=entry.source,
            kind=StructuralErrorKind.EMPTY_PARADIGMS,
            detail="verb has no paradigms",
        ))

    for position, paradigm in enumerate(raw.paradigms):
        if not paradigm.forms:
            regions = ', '.join(region.value for region in paradigm.region_tags)
            errors.append(StructuralError(
                lemma=entry.lemma,
                source=entry.source,
                kind=StructuralErrorKind.EMPTY_FORMS,
                detail=f"paradigm #{position} ({regions}) has no forms",
            ))

    if errors:
        return None, errors

    verb = Verb(
        lemma=entry.lemma,
        id=raw.id,
        regularity_class=raw.regularity_class,
        source=entry.source,
        paradigms=tuple(
            Paradigm(
                region_tags=frozenset(paradigm.region_tags),
                forms=tuple(
                    Form(
                        mood=form.mood,
                        tense=form.tense,
                        person=form.person,
                        value=form.value,
                        accepts=dict(form.accepts),
                        alt=tuple(form.alt),
                        rules=frozenset(form.rules),
                    )
                    for form in paradigm.forms
                ),
            )
            for paradigm in raw.paradigms
        ),
    )

    violations = find_accepts_violations(verb)
    if violations:
        for violation in violations:
            logger.warning(f"Accepts symmetry violation in '{verb.lemma}': {violation}")
        if strict_accepts_symmetry:
            return None, [
                StructuralError(
                    lemma=entry.lemma,
                    source=entry.source,
                    kind=StructuralErrorKind.ACCEPTS_ASYMMETRY,
                    detail=str(violation),
                )
                for violation in violations
            ]

    return verb, []


def build_store(
    table: CanonicalTable,
    strict: bool = True,
    strict_accepts_symmetry: bool = False,
) -> ParadigmStore:
    """
    Build a ParadigmStore from an already merged table.

    Args:
        table: Canonical (merged) table
        strict: Raise StoreLoadError when any record fails
        strict_accepts_symmetry: Treat tú/vos accepts mismatches as structural errors

    Returns:
        ParadigmStore

    Raises:
        StoreLoadError: In strict mode, if any record failed. The partially
            built store of clean verbs is attached to the exception.
    """
    verbs: Dict[str, Verb] = {}
    load_errors: List[StructuralError] = []

    for entry in table.entries:
        verb, errors = build_verb(entry, strict_accepts_symmetry=strict_accepts_symmetry)
        if errors:
            for error in errors:
                logger.error(f"Cannot load verb {error}")
            load_errors.extend(errors)
            continue
        verbs[entry.lemma] = verb

    store = ParadigmStore(verbs, load_errors)
    logger.info(
        f"Paradigm store built: {len(store)} verb(s) loaded, "
        f"{len({e.lemma for e in load_errors})} rejected"
    )

    if load_errors and strict:
        raise StoreLoadError(load_errors, store=store)
    return store


def load_store(
    sources: Sequence[RawVerbTable],
    strict: bool = True,
    strict_accepts_symmetry: bool = False,
) -> ParadigmStore:
    """
    Merge source tables and build the paradigm store.

    Args:
        sources: Source tables, lowest precedence first
        strict: Raise StoreLoadError when any record fails
        strict_accepts_symmetry: Treat tú/vos accepts mismatches as structural errors

    Returns:
        ParadigmStore
    """
    return build_store(
        merge_tables(sources),
        strict=strict,
        strict_accepts_symmetry=strict_accepts_symmetry,
    )
