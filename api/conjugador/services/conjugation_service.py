"""
Conjugator: the public query surface over one immutable snapshot.

A Conjugator bundles a ParadigmStore, its FormIndex and a RegionResolver.
It is never mutated; picking up new source data means building a new
instance and swapping the reference (see core/catalog.py).
"""
import logging
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Sequence, Tuple, Union

from conjugador.core.exceptions import ValidationError
from conjugador.models.enums import (
    PERSON_DIALECT,
    LemmaStatus,
    Mood,
    Person,
    PersonFamily,
    Region,
    RegularityClass,
    RuleTag,
    Tense,
    UnattestedReason,
)
from conjugador.models.verb import Form, Verb
from conjugador.schemas.conjugation import (
    ConjugationTableResponse,
    ExplainResponse,
    ResolutionResult,
    ResolvedForm,
    TableCell,
    TableSection,
    Unattested,
    VerbSummaryResponse,
)
from conjugador.schemas.source import RawVerbTable
from conjugador.schemas.utils import normalize_mood_tense, normalize_person
from conjugador.services import rule_service
from conjugador.services.index_service import FormIndex, choose_preferred
from conjugador.services.integrity_service import IntegrityReport, audit_store
from conjugador.services.resolution_service import RegionResolver, native_person
from conjugador.services.source_service import load_source_dir
from conjugador.services.store_service import ParadigmStore, load_store
from conjugador.utils.labels import get_mood_label, get_person_label, get_tense_label
from conjugador.utils.text_utils import normalize_lemma

if TYPE_CHECKING:
    from conjugador.core.config import Settings

logger = logging.getLogger(__name__)

# Person families in table order; 2s expands to the region's native slot
TABLE_FAMILIES: Tuple[PersonFamily, ...] = (
    PersonFamily.FIRST_SINGULAR,
    PersonFamily.SECOND_SINGULAR,
    PersonFamily.THIRD_SINGULAR,
    PersonFamily.FIRST_PLURAL,
    PersonFamily.SECOND_PLURAL,
    PersonFamily.THIRD_PLURAL,
)

MoodArg = Union[Mood, str]
TenseArg = Union[Tense, str]
PersonArg = Union[Person, str]
FamilyArg = Union[PersonFamily, str]
RegionArg = Union[Region, str]


def _raw(value: Union[str, Mood, Tense, Person, PersonFamily, Region, None]) -> Optional[str]:
    if value is None:
        return None
    return value.value if hasattr(value, "value") else str(value)


def coerce_mood_tense(mood: MoodArg, tense: TenseArg) -> Tuple[Mood, Tense]:
    """Coerce a (mood, tense) pair, accepting the same aliases as source tables."""
    try:
        return normalize_mood_tense(_raw(mood), _raw(tense))
    except ValueError as e:
        raise ValidationError(str(e)) from e


def coerce_person(person: Optional[PersonArg], mood: Mood) -> Person:
    try:
        return normalize_person(_raw(person), mood)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def coerce_person_family(person_family: Optional[FamilyArg], mood: Mood) -> PersonFamily:
    """
    Coerce a person family.

    Concrete person slots are accepted too: '2s_tu' and '2s_vos' both mean
    the 2nd-singular family, '2p_vosotros' the 2nd-plural one.
    """
    if mood == Mood.NONFINITE:
        return PersonFamily.INVARIANT
    raw = (_raw(person_family) or "").strip()
    if not raw:
        raise ValidationError(f"person is required for {mood.value} forms")
    try:
        return PersonFamily(raw)
    except ValueError:
        pass
    person = coerce_person(raw, mood)
    if person in PERSON_DIALECT:
        return PersonFamily.SECOND_SINGULAR
    if person == Person.SECOND_PLURAL_VOSOTROS:
        return PersonFamily.SECOND_PLURAL
    return PersonFamily(person.value)


def coerce_region(region: RegionArg) -> Region:
    try:
        return Region(_raw(region).strip())
    except (AttributeError, ValueError):
        valid = ", ".join(r.value for r in Region)
        raise ValidationError(f"region must be one of: {valid}. Got: {region}") from None


class Conjugator:
    """Query surface over a loaded ParadigmStore."""

    def __init__(self, store: ParadigmStore, default_region: RegionArg = Region.LA_GENERAL):
        self.store = store
        self.index = FormIndex(store)
        self.resolver = RegionResolver(self.index)
        self.default_region = coerce_region(default_region)

    @classmethod
    def from_store(cls, store: ParadigmStore, default_region: RegionArg = Region.LA_GENERAL) -> "Conjugator":
        return cls(store, default_region=default_region)

    @classmethod
    def from_sources(
        cls,
        tables: Sequence[RawVerbTable],
        strict: bool = True,
        strict_accepts_symmetry: bool = False,
        default_region: RegionArg = Region.LA_GENERAL,
    ) -> "Conjugator":
        """
        Merge source tables, load the store and index it.

        Args:
            tables: Source tables, lowest precedence first
            strict: Raise StoreLoadError when any record fails
            strict_accepts_symmetry: Treat tú/vos accepts mismatches as structural errors
            default_region: Region used when a query omits one

        Raises:
            StoreLoadError: In strict mode, if any record is not conjugatable
        """
        store = load_store(tables, strict=strict, strict_accepts_symmetry=strict_accepts_symmetry)
        return cls(store, default_region=default_region)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Conjugator":
        """Load the configured source directory in the configured precedence order."""
        logger.info(f"Loading source tables {settings.source_order} from {settings.source_dir}")
        tables = load_source_dir(settings.source_dir, settings.source_order)
        return cls.from_sources(
            tables,
            strict=settings.strict_load,
            strict_accepts_symmetry=settings.strict_accepts_symmetry,
            default_region=settings.default_region,
        )

    # Lemmas

    def verb(self, lemma: str) -> Optional[Verb]:
        return self.store.get(lemma)

    def status(self, lemma: str) -> LemmaStatus:
        return self.store.status(lemma)

    def lemmas(self, regularity: Optional[Union[RegularityClass, str]] = None) -> List[str]:
        """Loaded lemmas in source order, optionally filtered by regularity class."""
        if regularity is None:
            return list(self.store)
        try:
            wanted = RegularityClass(_raw(regularity))
        except ValueError:
            valid = ", ".join(r.value for r in RegularityClass)
            raise ValidationError(f"regularity must be one of: {valid}. Got: {regularity}") from None
        return [lemma for lemma in self.store if self.store.verbs[lemma].regularity_class == wanted]

    def summary(self, lemma: str) -> Optional[VerbSummaryResponse]:
        verb = self.verb(lemma)
        if verb is None:
            return None
        return VerbSummaryResponse(
            lemma=verb.lemma,
            id=verb.id,
            regularity_class=verb.regularity_class,
            status=LemmaStatus.LOADED,
            regions=[region for region in Region if region in verb.regions],
            tenses=[tense for _, tense in self.index.tenses_for(verb)],
            form_count=verb.form_count,
            source=verb.source,
        )

    # Forms

    def lookup(self, lemma: str, mood: MoodArg, tense: TenseArg, person: PersonArg) -> List[Form]:
        """Every form stored for the exact tuple, across all paradigms."""
        parsed_mood, parsed_tense = coerce_mood_tense(mood, tense)
        parsed_person = coerce_person(person, parsed_mood)
        return self.index.lookup(lemma, parsed_mood, parsed_tense, parsed_person)

    def resolve(
        self,
        lemma: str,
        mood: MoodArg,
        tense: TenseArg,
        person_family: Optional[FamilyArg] = None,
        region: Optional[RegionArg] = None,
    ) -> ResolutionResult:
        """
        Resolve the form a region displays.

        Args:
            lemma: Infinitive, normalized before lookup
            mood: Mood or mood string
            tense: Tense or tense string (aliases such as subjunctive/pres accepted)
            person_family: Person family; ignored for nonfinite moods
            region: Region; defaults to the instance's default region

        Returns:
            ResolvedForm or Unattested

        Raises:
            ValidationError: If an argument is not a valid value
        """
        parsed_mood, parsed_tense = coerce_mood_tense(mood, tense)
        family = coerce_person_family(person_family, parsed_mood)
        parsed_region = self.default_region if region is None else coerce_region(region)

        verb = self.verb(lemma)
        if verb is None:
            logger.debug(f"Resolve for '{lemma}': lemma {self.status(lemma).value}")
            is_nonfinite = parsed_mood == Mood.NONFINITE
            return Unattested(
                lemma=normalize_lemma(lemma),
                mood=parsed_mood,
                tense=parsed_tense,
                person=Person.INVARIANT if is_nonfinite else native_person(family, parsed_region),
                region=None if is_nonfinite else parsed_region,
                reason=UnattestedReason.UNKNOWN_LEMMA,
            )

        return self.resolver.resolve(verb, parsed_mood, parsed_tense, family, parsed_region)

    def explain(self, lemma: str, mood: MoodArg, tense: TenseArg, person: PersonArg) -> FrozenSet[RuleTag]:
        """Rule tags of the preferred form for a tuple; empty when nothing is stored."""
        return rule_service.explain(choose_preferred(self.lookup(lemma, mood, tense, person)))

    def explain_detail(self, lemma: str, mood: MoodArg, tense: TenseArg, person: PersonArg) -> ExplainResponse:
        """Like ``explain`` but with the form value and labelled tags."""
        parsed_mood, parsed_tense = coerce_mood_tense(mood, tense)
        parsed_person = coerce_person(person, parsed_mood)
        form = choose_preferred(self.index.lookup(lemma, parsed_mood, parsed_tense, parsed_person))
        verb = self.verb(lemma)
        return ExplainResponse(
            lemma=verb.lemma if verb else lemma,
            mood=parsed_mood,
            tense=parsed_tense,
            person=parsed_person,
            value=form.value if form else None,
            rules=rule_service.describe_rules(rule_service.explain(form)),
        )

    def conjugate(self, lemma: str, region: Optional[RegionArg] = None) -> Optional[ConjugationTableResponse]:
        """
        Resolved grid of a verb for one region.

        Sections follow canonical mood/tense order and only cover tenses the
        verb has data for. Unattested cells are left out, so a section can
        be shorter than six persons. Returns None for a lemma that is not
        loaded.
        """
        verb = self.verb(lemma)
        if verb is None:
            return None
        parsed_region = self.default_region if region is None else coerce_region(region)

        sections = []
        for mood, tense in self.index.tenses_for(verb):
            families = (PersonFamily.INVARIANT,) if mood == Mood.NONFINITE else TABLE_FAMILIES
            cells = []
            for family in families:
                result = self.resolver.resolve(verb, mood, tense, family, parsed_region)
                if not isinstance(result, ResolvedForm):
                    continue
                cells.append(TableCell(
                    person=result.person,
                    person_label=get_person_label(result.person),
                    value=result.value,
                    alternates=list(result.alternates),
                    source=result.source,
                ))
            if cells:
                sections.append(TableSection(
                    mood=mood,
                    tense=tense,
                    label=f"{get_mood_label(mood)} - {get_tense_label(tense)}",
                    cells=cells,
                ))

        return ConjugationTableResponse(lemma=verb.lemma, region=parsed_region, sections=sections)

    def audit(self) -> IntegrityReport:
        return audit_store(self.store)

    def __repr__(self) -> str:
        return f"Conjugator({self.store!r}, default_region={self.default_region.value})"
