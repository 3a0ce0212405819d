"""
Region resolution: turn a (mood, tense, person family, region) request into
exactly one displayed form.

Second-person singular is the only family whose slot depends on the region:
rioplatense answers with the vos slot, la_general and peninsular with the tú
slot. When a verb only tabulates the sibling slot, the sibling form's
``accepts`` entry for the requester's dialect supplies the answer. Nonfinite
forms ignore the region altogether.

Gaps are returned as ``Unattested`` values, never raised.
"""
import logging
from typing import List, Optional

from conjugador.models.enums import (
    DIALECT_PERSON,
    FAMILY_PERSON,
    REGION_NATIVE_DIALECT,
    Dialect,
    Mood,
    Person,
    PersonFamily,
    Region,
    ResolutionSource,
    Tense,
    UnattestedReason,
    other_dialect,
)
from conjugador.models.verb import Form, Verb
from conjugador.schemas.conjugation import ResolutionResult, ResolvedForm, Unattested
from conjugador.services.index_service import FormIndex, choose_preferred
from conjugador.services.rule_service import sort_rules

logger = logging.getLogger(__name__)


def native_person(family: PersonFamily, region: Region) -> Person:
    """
    Person slot a region uses for a person family.

    Args:
        family: Requested person family
        region: Requested region

    Returns:
        The region's native Person slot
    """
    if family == PersonFamily.SECOND_SINGULAR:
        return DIALECT_PERSON[REGION_NATIVE_DIALECT[region]]
    return FAMILY_PERSON[family]


def _pick(candidates: List[Form], verb: Verb, mood: Mood, tense: Tense, person: Person) -> Optional[Form]:
    if len(candidates) > 1:
        logger.debug(
            f"{len(candidates)} candidates for {verb.lemma} {mood.value}/{tense.value}/{person.value}; applying tie-break"
        )
    return choose_preferred(candidates)


class RegionResolver:
    """Resolves forms for a region over a FormIndex."""

    def __init__(self, index: FormIndex):
        self.index = index

    def resolve(
        self,
        verb: Verb,
        mood: Mood,
        tense: Tense,
        person_family: PersonFamily,
        region: Region,
    ) -> ResolutionResult:
        """
        Resolve the displayed form for a region.

        Args:
            verb: Verb to resolve
            mood: Requested mood
            tense: Requested tense
            person_family: Requested person family (tú/vos agnostic)
            region: Requested region

        Returns:
            ResolvedForm with the primary value and accepted alternates, or
            Unattested with the reason for the gap
        """
        if mood == Mood.NONFINITE:
            return self._resolve_nonfinite(verb, mood, tense)

        if person_family == PersonFamily.INVARIANT:
            # Finite moods have no invariant slot
            return Unattested(
                lemma=verb.lemma, mood=mood, tense=tense, person=Person.INVARIANT,
                region=region, reason=UnattestedReason.FORM_NOT_ATTESTED,
            )

        if region not in verb.regions:
            return Unattested(
                lemma=verb.lemma, mood=mood, tense=tense, person=native_person(person_family, region),
                region=region, reason=UnattestedReason.REGION_NOT_COVERED,
            )

        person = native_person(person_family, region)
        candidates = self.index.lookup_in_region(verb, mood, tense, person, region)
        form = _pick(candidates, verb, mood, tense, person)
        if form is not None:
            equivalents = {}
            if person_family == PersonFamily.SECOND_SINGULAR:
                sibling_dialect = other_dialect(REGION_NATIVE_DIALECT[region])
                sibling_value = form.accepted_for(sibling_dialect)
                if sibling_value:
                    equivalents[sibling_dialect] = sibling_value
            return ResolvedForm(
                lemma=verb.lemma,
                mood=mood,
                tense=tense,
                person=person,
                region=region,
                value=form.value,
                alternates=form.alt,
                dialect_equivalents=equivalents,
                rules=tuple(sort_rules(form.rules)),
                source=ResolutionSource.NATIVE,
            )

        if person_family == PersonFamily.SECOND_SINGULAR:
            fallback = self._resolve_through_accepts(verb, mood, tense, region)
            if fallback is not None:
                return fallback

        return Unattested(
            lemma=verb.lemma, mood=mood, tense=tense, person=person,
            region=region, reason=UnattestedReason.FORM_NOT_ATTESTED,
        )

    def _resolve_through_accepts(
        self,
        verb: Verb,
        mood: Mood,
        tense: Tense,
        region: Region,
    ) -> Optional[ResolvedForm]:
        """Answer the native 2nd-singular slot from the sibling slot's accepts map."""
        dialect: Dialect = REGION_NATIVE_DIALECT[region]
        sibling_dialect = other_dialect(dialect)
        sibling_person = DIALECT_PERSON[sibling_dialect]

        siblings = self.index.lookup_in_region(verb, mood, tense, sibling_person, region)
        usable = [form for form in siblings if form.accepted_for(dialect)]
        sibling = _pick(usable, verb, mood, tense, sibling_person)
        if sibling is None:
            if siblings:
                logger.debug(
                    f"{verb.lemma} {mood.value}/{tense.value}: {sibling_person.value} present "
                    f"but declares no accepts.{dialect.value}"
                )
            return None

        return ResolvedForm(
            lemma=verb.lemma,
            mood=mood,
            tense=tense,
            person=DIALECT_PERSON[dialect],
            region=region,
            value=sibling.accepted_for(dialect),
            dialect_equivalents={sibling_dialect: sibling.value},
            source=ResolutionSource.ACCEPTS,
        )

    def _resolve_nonfinite(self, verb: Verb, mood: Mood, tense: Tense) -> ResolutionResult:
        """Nonfinite forms are region independent: search every paradigm."""
        candidates = self.index.lookup(verb, mood, tense, Person.INVARIANT)
        form = _pick(candidates, verb, mood, tense, Person.INVARIANT)
        if form is None:
            return Unattested(
                lemma=verb.lemma, mood=mood, tense=tense, person=Person.INVARIANT,
                reason=UnattestedReason.FORM_NOT_ATTESTED,
            )
        return ResolvedForm(
            lemma=verb.lemma,
            mood=mood,
            tense=tense,
            person=Person.INVARIANT,
            value=form.value,
            alternates=form.alt,
            rules=tuple(sort_rules(form.rules)),
            source=ResolutionSource.NONFINITE,
        )
