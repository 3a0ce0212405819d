"""
Verb catalog endpoints.
"""
from fastapi import APIRouter, Depends
from typing import Optional
import logging
from conjugador.core.catalog import get_conjugator
from conjugador.schemas.conjugation import VerbListResponse, VerbSummaryResponse
from conjugador.services.conjugation_service import Conjugator
from conjugador.api.v1.endpoints.utils import require_verb

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/verbs", tags=["verbs"])


@router.get("", response_model=VerbListResponse)
async def get_verbs(
    regularity: Optional[str] = None,
    conjugator: Conjugator = Depends(get_conjugator)
):
    """
    Get loaded lemmas.

    Args:
        regularity: Optional filter by regularity class (regular/irregular)

    Returns:
        Lemmas in source order
    """
    lemmas = conjugator.lemmas(regularity)
    return VerbListResponse(lemmas=lemmas, total=len(lemmas))


@router.get("/{lemma}", response_model=VerbSummaryResponse)
async def get_verb(
    lemma: str,
    conjugator: Conjugator = Depends(get_conjugator)
):
    """Get a verb summary: regularity, regions, tenses and form count."""
    require_verb(conjugator, lemma)
    return conjugator.summary(lemma)
