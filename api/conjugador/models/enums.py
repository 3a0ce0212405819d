"""
Model enums.
"""
from enum import Enum
from typing import Dict, Tuple


class RegularityClass(str, Enum):
    """Regularity class of a verb."""
    REGULAR = "regular"
    IRREGULAR = "irregular"


class Region(str, Enum):
    """Dialect region a paradigm is valid for."""
    RIOPLATENSE = "rioplatense"
    LA_GENERAL = "la_general"
    PENINSULAR = "peninsular"


class Dialect(str, Enum):
    """Second-person-singular system. Values match the raw ``accepts`` keys."""
    TUTEO = "tu"
    VOSEO = "vos"


class Mood(str, Enum):
    """Grammatical mood."""
    INDICATIVE = "indicative"
    SUBJUNCTIVE = "subjunctive"
    IMPERATIVE = "imperative"
    CONDITIONAL = "conditional"
    NONFINITE = "nonfinite"


class Tense(str, Enum):
    """Mood-specific tense tag."""
    # Indicative
    PRES = "pres"
    PRET_INDEF = "pretIndef"
    IMPF = "impf"
    FUT = "fut"
    PRET_PERF = "pretPerf"
    PLUSC = "plusc"
    FUT_PERF = "futPerf"
    IR_A_INF = "irAInf"
    PRES_FUTURATE = "presFuturate"
    # Subjunctive
    SUBJ_PRES = "subjPres"
    SUBJ_IMPF = "subjImpf"
    SUBJ_FUT = "subjFut"
    SUBJ_PERF = "subjPerf"
    SUBJ_PLUSC = "subjPlusc"
    # Imperative
    IMP_AFF = "impAff"
    IMP_NEG = "impNeg"
    # Conditional
    COND = "cond"
    COND_PERF = "condPerf"
    # Nonfinite
    INF = "inf"
    INF_PERF = "infPerf"
    PART = "part"
    GER = "ger"


class Person(str, Enum):
    """Person slot of a form."""
    FIRST_SINGULAR = "1s"
    SECOND_SINGULAR_TU = "2s_tu"
    SECOND_SINGULAR_VOS = "2s_vos"
    THIRD_SINGULAR = "3s"
    FIRST_PLURAL = "1p"
    SECOND_PLURAL_VOSOTROS = "2p_vosotros"
    THIRD_PLURAL = "3p"
    INVARIANT = "inv"


class PersonFamily(str, Enum):
    """Person requested by a caller without committing to tú or vos."""
    FIRST_SINGULAR = "1s"
    SECOND_SINGULAR = "2s"
    THIRD_SINGULAR = "3s"
    FIRST_PLURAL = "1p"
    SECOND_PLURAL = "2p"
    THIRD_PLURAL = "3p"
    INVARIANT = "inv"


class RuleKind(str, Enum):
    """Broad category of a morphological rule tag."""
    STEM_CHANGE = "stem_change"
    ORTHOGRAPHIC = "orthographic"
    HIATUS = "hiatus"


class RuleTag(str, Enum):
    """Closed set of morphological rule annotations."""
    # Stem changes
    E_IE = "E_IE"
    E_I = "E_I"
    O_UE = "O_UE"
    O_U = "O_U"
    U_UE = "U_UE"
    I_IE = "I_IE"
    # Spelling changes before front vowels
    C_QU = "C_QU"
    G_GU = "G_GU"
    Z_C = "Z_C"
    G_J = "G_J"
    GU_GUE = "GU_GUE"
    C_Z = "C_Z"
    C_ZC = "C_ZC"
    # Hiatus
    HIATUS_Y = "HIATUS_Y"
    UIR_Y = "UIR_Y"

    @property
    def kind(self) -> RuleKind:
        return RULE_KINDS[self]


class LemmaStatus(str, Enum):
    """Load outcome for a lemma."""
    LOADED = "loaded"
    REJECTED = "rejected"
    UNKNOWN = "unknown"


class StructuralErrorKind(str, Enum):
    """Why a verb record could not be loaded."""
    EMPTY_PARADIGMS = "empty_paradigms"
    EMPTY_FORMS = "empty_forms"
    INVALID_RECORD = "invalid_record"
    ACCEPTS_ASYMMETRY = "accepts_asymmetry"


class UnattestedReason(str, Enum):
    """Why a resolution produced no form."""
    UNKNOWN_LEMMA = "unknown_lemma"
    REGION_NOT_COVERED = "region_not_covered"
    FORM_NOT_ATTESTED = "form_not_attested"


class ResolutionSource(str, Enum):
    """How a resolved value was obtained."""
    NATIVE = "native"
    ACCEPTS = "accepts"
    NONFINITE = "nonfinite"


RULE_KINDS: Dict[RuleTag, RuleKind] = {
    RuleTag.E_IE: RuleKind.STEM_CHANGE,
    RuleTag.E_I: RuleKind.STEM_CHANGE,
    RuleTag.O_UE: RuleKind.STEM_CHANGE,
    RuleTag.O_U: RuleKind.STEM_CHANGE,
    RuleTag.U_UE: RuleKind.STEM_CHANGE,
    RuleTag.I_IE: RuleKind.STEM_CHANGE,
    RuleTag.C_QU: RuleKind.ORTHOGRAPHIC,
    RuleTag.G_GU: RuleKind.ORTHOGRAPHIC,
    RuleTag.Z_C: RuleKind.ORTHOGRAPHIC,
    RuleTag.G_J: RuleKind.ORTHOGRAPHIC,
    RuleTag.GU_GUE: RuleKind.ORTHOGRAPHIC,
    RuleTag.C_Z: RuleKind.ORTHOGRAPHIC,
    RuleTag.C_ZC: RuleKind.ORTHOGRAPHIC,
    RuleTag.HIATUS_Y: RuleKind.HIATUS,
    RuleTag.UIR_Y: RuleKind.HIATUS,
}

# Tenses available per mood, in display order
MOOD_TENSES: Dict[Mood, Tuple[Tense, ...]] = {
    Mood.INDICATIVE: (
        Tense.PRES, Tense.PRET_INDEF, Tense.IMPF, Tense.FUT,
        Tense.PRET_PERF, Tense.PLUSC, Tense.FUT_PERF,
        Tense.IR_A_INF, Tense.PRES_FUTURATE,
    ),
    Mood.SUBJUNCTIVE: (
        Tense.SUBJ_PRES, Tense.SUBJ_IMPF, Tense.SUBJ_FUT,
        Tense.SUBJ_PERF, Tense.SUBJ_PLUSC,
    ),
    Mood.IMPERATIVE: (Tense.IMP_AFF, Tense.IMP_NEG),
    Mood.CONDITIONAL: (Tense.COND, Tense.COND_PERF),
    Mood.NONFINITE: (Tense.INF, Tense.INF_PERF, Tense.PART, Tense.GER),
}

PERSON_ORDER: Tuple[Person, ...] = (
    Person.FIRST_SINGULAR,
    Person.SECOND_SINGULAR_TU,
    Person.SECOND_SINGULAR_VOS,
    Person.THIRD_SINGULAR,
    Person.FIRST_PLURAL,
    Person.SECOND_PLURAL_VOSOTROS,
    Person.THIRD_PLURAL,
    Person.INVARIANT,
)

# Rioplatense is voseo-native; the other regions use tú
REGION_NATIVE_DIALECT: Dict[Region, Dialect] = {
    Region.RIOPLATENSE: Dialect.VOSEO,
    Region.LA_GENERAL: Dialect.TUTEO,
    Region.PENINSULAR: Dialect.TUTEO,
}

DIALECT_PERSON: Dict[Dialect, Person] = {
    Dialect.TUTEO: Person.SECOND_SINGULAR_TU,
    Dialect.VOSEO: Person.SECOND_SINGULAR_VOS,
}

PERSON_DIALECT: Dict[Person, Dialect] = {person: dialect for dialect, person in DIALECT_PERSON.items()}

# Families that map one-to-one onto a person slot regardless of region
FAMILY_PERSON: Dict[PersonFamily, Person] = {
    PersonFamily.FIRST_SINGULAR: Person.FIRST_SINGULAR,
    PersonFamily.THIRD_SINGULAR: Person.THIRD_SINGULAR,
    PersonFamily.FIRST_PLURAL: Person.FIRST_PLURAL,
    PersonFamily.SECOND_PLURAL: Person.SECOND_PLURAL_VOSOTROS,
    PersonFamily.THIRD_PLURAL: Person.THIRD_PLURAL,
    PersonFamily.INVARIANT: Person.INVARIANT,
}


def other_dialect(dialect: Dialect) -> Dialect:
    """Return the sibling second-person-singular system."""
    return Dialect.VOSEO if dialect == Dialect.TUTEO else Dialect.TUTEO


def mood_for_tense(tense: Tense) -> Mood:
    """Return the mood a tense belongs to."""
    for mood, tenses in MOOD_TENSES.items():
        if tense in tenses:
            return mood
    raise ValueError(f"Tense {tense.value} does not belong to any mood")
