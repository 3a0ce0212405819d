"""
Utility functions for endpoint operations.
"""
from conjugador.core.exceptions import NotFoundError
from conjugador.models.enums import LemmaStatus
from conjugador.models.verb import Verb
from conjugador.services.conjugation_service import Conjugator


def require_verb(conjugator: Conjugator, lemma: str) -> Verb:
    """
    Return a loaded verb or raise NotFoundError.

    The message tells a rejected lemma (present in the sources but not
    conjugatable) apart from one there is no data for.

    Args:
        conjugator: Current snapshot
        lemma: Requested lemma

    Returns:
        The loaded Verb

    Raises:
        NotFoundError: If the lemma is not loaded
    """
    verb = conjugator.verb(lemma)
    if verb is not None:
        return verb
    if conjugator.status(lemma) == LemmaStatus.REJECTED:
        reasons = "; ".join(error.detail for error in conjugator.store.errors_for(lemma))
        raise NotFoundError(f"Verb '{lemma}' could not be loaded: {reasons}")
    raise NotFoundError(f"Verb '{lemma}' not found")
