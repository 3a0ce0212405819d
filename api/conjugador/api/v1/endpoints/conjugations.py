"""
Conjugation endpoints: region resolution, rule explanations and tables.
"""
from fastapi import APIRouter, Depends
from typing import Optional, Union
import logging
from conjugador.core.catalog import get_conjugator
from conjugador.schemas.conjugation import (
    ConjugationTableResponse,
    ExplainResponse,
    ResolvedForm,
    Unattested,
)
from conjugador.services.conjugation_service import Conjugator
from conjugador.api.v1.endpoints.utils import require_verb

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/verbs", tags=["conjugations"])


@router.get("/{lemma}/resolve", response_model=Union[ResolvedForm, Unattested])
async def resolve_form(
    lemma: str,
    mood: str,
    tense: str,
    person: Optional[str] = None,
    region: Optional[str] = None,
    conjugator: Conjugator = Depends(get_conjugator)
):
    """
    Resolve the form a region displays.

    Args:
        lemma: Verb infinitive
        mood: Mood (indicative, subjunctive, imperative, conditional, nonfinite)
        tense: Tense tag (e.g. pres, impAff, subjPres)
        person: Person family (1s, 2s, 3s, 1p, 2p, 3p); omitted for nonfinite forms
        region: rioplatense, la_general or peninsular; defaults to the configured region

    Returns:
        The resolved form, or an unattested marker with its reason
    """
    result = conjugator.resolve(lemma, mood, tense, person, region)
    logger.debug(f"Resolved {lemma} {mood}/{tense}/{person}@{region}: {result.status}")
    return result


@router.get("/{lemma}/explain", response_model=ExplainResponse)
async def explain_form(
    lemma: str,
    mood: str,
    tense: str,
    person: Optional[str] = None,
    conjugator: Conjugator = Depends(get_conjugator)
):
    """Get the morphological rule tags of a stored form."""
    require_verb(conjugator, lemma)
    return conjugator.explain_detail(lemma, mood, tense, person)


@router.get("/{lemma}/table", response_model=ConjugationTableResponse)
async def get_conjugation_table(
    lemma: str,
    region: Optional[str] = None,
    conjugator: Conjugator = Depends(get_conjugator)
):
    """Get the resolved conjugation table of a verb for a region."""
    require_verb(conjugator, lemma)
    return conjugator.conjugate(lemma, region)
