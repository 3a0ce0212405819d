"""
Merge service combining independently authored verb tables.

Tables are concatenated in the caller's precedence order and grouped by
lemma. When a lemma occurs more than once, the last occurrence replaces all
earlier ones wholesale: no field-level merging and no union of paradigms,
even when an earlier occurrence is more complete.
"""
import copy
import logging
from typing import Dict, List, Sequence, Tuple

from conjugador.core.exceptions import ValidationError
from conjugador.schemas.source import CanonicalEntry, CanonicalTable, RawVerbTable
from conjugador.utils.text_utils import normalize_lemma

logger = logging.getLogger(__name__)


def merge_tables(tables: Sequence[RawVerbTable]) -> CanonicalTable:
    """
    Merge source tables into one canonical table keyed by lemma.

    Output order is the first-appearance order of each lemma; the record kept
    for a lemma is its last occurrence. The inputs are not modified and the
    same inputs always give the same output.

    Args:
        tables: Source tables, lowest precedence first

    Returns:
        CanonicalTable with exactly one entry per lemma

    Raises:
        ValidationError: If a record has no lemma
    """
    survivors: Dict[str, Tuple[str, dict]] = {}
    occurrences: Dict[str, List[str]] = {}

    for table in tables:
        for position, record in enumerate(table.verbs):
            raw_lemma = record.get('lemma')
            if not isinstance(raw_lemma, str) or not raw_lemma.strip():
                raise ValidationError(
                    f"Verb record #{position} in source '{table.name}' has no lemma (id={record.get('id')!r})"
                )

            lemma = normalize_lemma(raw_lemma)
            # dict assignment keeps the first insertion position
            survivors[lemma] = (table.name, record)
            occurrences.setdefault(lemma, []).append(table.name)

    replacements = {lemma: names for lemma, names in occurrences.items() if len(names) > 1}
    for lemma, names in replacements.items():
        logger.info(
            f"Lemma '{lemma}' appears {len(names)} times ({' -> '.join(names)}); keeping the record from '{names[-1]}'"
        )

    entries = [
        CanonicalEntry(lemma=lemma, source=source, record=copy.deepcopy(record))
        for lemma, (source, record) in survivors.items()
    ]

    logger.info(
        f"Merged {sum(len(t) for t in tables)} record(s) from {len(tables)} source(s) into {len(entries)} lemma(s)"
    )
    return CanonicalTable(entries=entries, replacements=replacements)
