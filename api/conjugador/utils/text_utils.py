"""
Text utility functions.
"""
import unicodedata


def normalize_lemma(term: str) -> str:
    """
    Normalize a lemma for use as a lookup key.

    Trims whitespace and trailing dots, lowercases, and composes accents to
    NFC so that "Pensar", " pensar." and a decomposed "pensar" are one key.

    Args:
        term: The lemma to normalize

    Returns:
        Normalized lemma
    """
    if not term:
        return term

    normalized = term.strip()

    # Strip leading and trailing dots
    normalized = normalized.strip('.')
    normalized = normalized.strip()

    return unicodedata.normalize('NFC', normalized.lower())


def normalize_answer(text: str) -> str:
    """Lowercase, collapse whitespace and compose accents. Accents are kept."""
    if not text:
        return ''
    collapsed = ' '.join(text.split())
    return unicodedata.normalize('NFC', collapsed.lower())


def strip_accents(text: str) -> str:
    """Remove diacritics except the tilde of ñ."""
    if not text:
        return text
    decomposed = unicodedata.normalize('NFD', text)
    kept = []
    for i, char in enumerate(decomposed):
        if unicodedata.combining(char):
            # n + combining tilde stays ñ
            if char == '\u0303' and i > 0 and decomposed[i - 1] in 'nN':
                kept.append(char)
            continue
        kept.append(char)
    return unicodedata.normalize('NFC', ''.join(kept))
