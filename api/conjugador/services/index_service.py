"""
Form index keyed by (lemma, mood, tense, person).

A lookup can return more than one form: a tuple may be tabulated in several
paradigms, and some raw paradigms repeat the same tuple. Callers that need a
single answer apply ``choose_preferred``.
"""
import logging
from typing import TYPE_CHECKING, Dict, FrozenSet, List, NamedTuple, Optional, Sequence, Tuple, Union

from conjugador.models.enums import MOOD_TENSES, Mood, Person, Region, Tense
from conjugador.models.verb import Form, Verb
from conjugador.utils.text_utils import normalize_lemma

if TYPE_CHECKING:
    from conjugador.services.store_service import ParadigmStore

logger = logging.getLogger(__name__)

IndexKey = Tuple[str, Mood, Tense, Person]


class IndexedForm(NamedTuple):
    form: Form
    paradigm_index: int
    region_tags: FrozenSet[Region]


def choose_preferred(candidates: Sequence[Form]) -> Optional[Form]:
    """
    Pick one form out of several candidates for the same tuple.

    Prefers the first candidate carrying ``rules`` metadata; otherwise the
    first one encountered. Returns None for an empty sequence.
    """
    if not candidates:
        return None
    for form in candidates:
        if form.rules:
            return form
    return candidates[0]


class FormIndex:
    """Read-only index over the forms of a ParadigmStore."""

    def __init__(self, store: "ParadigmStore"):
        entries: Dict[IndexKey, List[IndexedForm]] = {}
        tenses: Dict[str, set] = {}
        duplicate_count = 0

        for lemma in store:
            verb = store.verbs[lemma]
            for paradigm_index, paradigm in enumerate(verb.paradigms):
                seen_in_paradigm: Dict[Tuple[Mood, Tense, Person], int] = {}
                for form in paradigm.forms:
                    key = (lemma, form.mood, form.tense, form.person)
                    entries.setdefault(key, []).append(
                        IndexedForm(form, paradigm_index, paradigm.region_tags)
                    )
                    tenses.setdefault(lemma, set()).add((form.mood, form.tense))
                    seen_in_paradigm[form.key] = seen_in_paradigm.get(form.key, 0) + 1

                for (mood, tense, person), count in seen_in_paradigm.items():
                    if count > 1:
                        duplicate_count += 1
                        logger.warning(
                            f"Data quality: '{lemma}' paradigm #{paradigm_index} lists "
                            f"{mood.value}/{tense.value}/{person.value} {count} times; "
                            f"lookups will apply the tie-break"
                        )

        self._entries: Dict[IndexKey, Tuple[IndexedForm, ...]] = {
            key: tuple(values) for key, values in entries.items()
        }
        self._tenses: Dict[str, FrozenSet[Tuple[Mood, Tense]]] = {
            lemma: frozenset(pairs) for lemma, pairs in tenses.items()
        }
        logger.info(
            f"Form index built: {len(self._entries)} key(s) over {len(self._tenses)} verb(s), "
            f"{duplicate_count} duplicated tuple(s)"
        )

    @staticmethod
    def _lemma_key(verb: Union[Verb, str]) -> str:
        return verb.lemma if isinstance(verb, Verb) else normalize_lemma(verb)

    def entries(self, verb: Union[Verb, str], mood: Mood, tense: Tense, person: Person) -> Tuple[IndexedForm, ...]:
        return self._entries.get((self._lemma_key(verb), mood, tense, person), ())

    def lookup(self, verb: Union[Verb, str], mood: Mood, tense: Tense, person: Person) -> List[Form]:
        """
        Return every form matching the tuple across all of the verb's paradigms.

        Forms come back in paradigm order, then authoring order. The list is
        empty when nothing matches.
        """
        return [entry.form for entry in self.entries(verb, mood, tense, person)]

    def lookup_in_region(
        self,
        verb: Union[Verb, str],
        mood: Mood,
        tense: Tense,
        person: Person,
        region: Region,
    ) -> List[Form]:
        """Like ``lookup`` but restricted to paradigms tagged with ``region``."""
        return [
            entry.form
            for entry in self.entries(verb, mood, tense, person)
            if region in entry.region_tags
        ]

    def tenses_for(self, verb: Union[Verb, str]) -> List[Tuple[Mood, Tense]]:
        """(mood, tense) pairs present for a verb, in canonical display order."""
        present = self._tenses.get(self._lemma_key(verb), frozenset())
        return [
            (mood, tense)
            for mood, tenses in MOOD_TENSES.items()
            for tense in tenses
            if (mood, tense) in present
        ]

    def __len__(self) -> int:
        return len(self._entries)
