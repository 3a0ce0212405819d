"""
Integrity service for data-quality checks over loaded verbs.

Checks:
- tú/vos accepts symmetry inside each paradigm
- duplicate (mood, tense, person) entries inside a paradigm
- region coverage and mood/tense combinations present

None of these checks change what the engine returns; they exist so that
authoring defects are visible to operators.
"""
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from conjugador.models.enums import Dialect, Mood, Person, Region, Tense
from conjugador.models.verb import Form, Verb
from conjugador.services.index_service import choose_preferred

if TYPE_CHECKING:
    from conjugador.services.store_service import ParadigmStore

logger = logging.getLogger(__name__)


class AcceptsViolation(BaseModel):
    """A tú/vos pair that does not reference each other."""
    lemma: str
    paradigm_index: int
    mood: Mood
    tense: Tense
    tu_value: str
    vos_value: str
    tu_accepts_vos: Optional[str] = None
    vos_accepts_tu: Optional[str] = None

    def __str__(self) -> str:
        return (
            f"paradigm #{self.paradigm_index} {self.mood.value}/{self.tense.value}: "
            f"2s_tu '{self.tu_value}' accepts vos={self.tu_accepts_vos!r}, "
            f"2s_vos '{self.vos_value}' accepts tu={self.vos_accepts_tu!r}"
        )


class DuplicateTuple(BaseModel):
    """Repeated (mood, tense, person) inside one paradigm."""
    lemma: str
    paradigm_index: int
    mood: Mood
    tense: Tense
    person: Person
    values: List[str]

    @property
    def conflicting(self) -> bool:
        """True when the repeated entries disagree on the surface form."""
        return len(set(self.values)) > 1

    def __str__(self) -> str:
        return (
            f"paradigm #{self.paradigm_index} {self.mood.value}/{self.tense.value}/{self.person.value} "
            f"x{len(self.values)}: {', '.join(self.values)}"
        )


class IntegrityReport(BaseModel):
    """Summary of data-quality findings for a store."""
    verb_count: int = 0
    form_count: int = 0
    region_coverage: Dict[Region, int] = Field(default_factory=dict)
    mood_tense_combinations: List[str] = Field(default_factory=list)
    accepts_violations: List[AcceptsViolation] = Field(default_factory=list)
    duplicates: List[DuplicateTuple] = Field(default_factory=list)
    load_errors: List[str] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.accepts_violations or self.duplicates or self.load_errors)


def find_accepts_violations(verb: Verb) -> List[AcceptsViolation]:
    """
    Check that every tú/vos pair in a paradigm references the other.

    The tú form's ``accepts.vos`` must equal the vos form's value and the
    vos form's ``accepts.tu`` must equal the tú form's value.
    """
    violations = []
    for index, paradigm in enumerate(verb.paradigms):
        by_slot: Dict[Tuple[Mood, Tense], Dict[Person, List[Form]]] = defaultdict(lambda: defaultdict(list))
        for form in paradigm.forms:
            if form.person in (Person.SECOND_SINGULAR_TU, Person.SECOND_SINGULAR_VOS):
                by_slot[(form.mood, form.tense)][form.person].append(form)

        for (mood, tense), persons in by_slot.items():
            tu_forms = persons.get(Person.SECOND_SINGULAR_TU)
            vos_forms = persons.get(Person.SECOND_SINGULAR_VOS)
            if not tu_forms or not vos_forms:
                continue

            tu_form = choose_preferred(tu_forms)
            vos_form = choose_preferred(vos_forms)
            tu_accepts_vos = tu_form.accepted_for(Dialect.VOSEO)
            vos_accepts_tu = vos_form.accepted_for(Dialect.TUTEO)
            if tu_accepts_vos != vos_form.value or vos_accepts_tu != tu_form.value:
                violations.append(AcceptsViolation(
                    lemma=verb.lemma,
                    paradigm_index=index,
                    mood=mood,
                    tense=tense,
                    tu_value=tu_form.value,
                    vos_value=vos_form.value,
                    tu_accepts_vos=tu_accepts_vos,
                    vos_accepts_tu=vos_accepts_tu,
                ))
    return violations


def find_duplicate_tuples(verb: Verb) -> List[DuplicateTuple]:
    """Find (mood, tense, person) tuples that occur more than once within a paradigm."""
    duplicates = []
    for index, paradigm in enumerate(verb.paradigms):
        grouped: Dict[Tuple[Mood, Tense, Person], List[str]] = {}
        for form in paradigm.forms:
            grouped.setdefault(form.key, []).append(form.value)
        for (mood, tense, person), values in grouped.items():
            if len(values) > 1:
                duplicates.append(DuplicateTuple(
                    lemma=verb.lemma,
                    paradigm_index=index,
                    mood=mood,
                    tense=tense,
                    person=person,
                    values=values,
                ))
    return duplicates


def audit_verb(verb: Verb) -> IntegrityReport:
    """Audit a single verb."""
    combinations = sorted({f"{form.mood.value}|{form.tense.value}" for _, form in verb.iter_forms()})
    return IntegrityReport(
        verb_count=1,
        form_count=verb.form_count,
        region_coverage={region: 1 for region in verb.regions},
        mood_tense_combinations=combinations,
        accepts_violations=find_accepts_violations(verb),
        duplicates=find_duplicate_tuples(verb),
    )


def audit_store(store: "ParadigmStore") -> IntegrityReport:
    """
    Audit every verb in a store.

    Args:
        store: Loaded ParadigmStore

    Returns:
        IntegrityReport aggregating all verbs plus the store's load errors
    """
    coverage: Dict[Region, int] = {region: 0 for region in Region}
    combinations = set()
    violations: List[AcceptsViolation] = []
    duplicates: List[DuplicateTuple] = []
    form_count = 0

    for lemma in store:
        verb = store.verbs[lemma]
        form_count += verb.form_count
        for region in verb.regions:
            coverage[region] += 1
        for _, form in verb.iter_forms():
            combinations.add(f"{form.mood.value}|{form.tense.value}")
        violations.extend(find_accepts_violations(verb))
        duplicates.extend(find_duplicate_tuples(verb))

    report = IntegrityReport(
        verb_count=len(store),
        form_count=form_count,
        region_coverage=coverage,
        mood_tense_combinations=sorted(combinations),
        accepts_violations=violations,
        duplicates=duplicates,
        load_errors=[str(error) for error in store.load_errors],
    )

    logger.info(
        f"Integrity audit: {report.verb_count} verbs, {report.form_count} forms, "
        f"{len(violations)} accepts violation(s), {len(duplicates)} duplicate tuple(s), "
        f"{len(report.load_errors)} load error(s)"
    )
    return report
