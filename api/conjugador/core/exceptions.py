"""
Custom exceptions for the conjugation engine.
"""
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from conjugador.services.store_service import ParadigmStore, StructuralError


class ConjugadorException(Exception):
    """Base exception for all conjugador exceptions."""
    pass


class ValidationError(ConjugadorException):
    """Raised when validation fails."""
    pass


class NotFoundError(ConjugadorException):
    """Raised when a requested resource is not found."""
    pass


class SourceNotFoundError(NotFoundError):
    """Raised when a configured source table file does not exist."""
    pass


class StoreLoadError(ConjugadorException):
    """
    Raised when one or more verb records are not conjugatable.

    The verbs that did load cleanly are still available on ``store`` so the
    caller can decide to continue with them.
    """

    def __init__(self, errors: List["StructuralError"], store: Optional["ParadigmStore"] = None):
        self.errors = list(errors)
        self.store = store
        lemmas = ", ".join(sorted({e.lemma for e in self.errors}))
        super().__init__(f"{len(self.errors)} structural error(s) while loading verbs: {lemmas}")
