"""
Utility functions for schema validation.

Raw source tables were authored over time with a few spelling variants for
the same grammatical category. These helpers map them onto the closed
enumerations before pydantic validates them.
"""
import unicodedata
from typing import Optional, Tuple

from conjugador.models.enums import Mood, MOOD_TENSES, Person, RuleTag, Tense, mood_for_tense

# Tense aliases that only make sense together with a mood
_MOOD_TENSE_ALIASES = {
    ('subjunctive', 'pres'): 'subjPres',
    ('subjunctive', 'impf'): 'subjImpf',
    ('subjunctive', 'fut'): 'subjFut',
    ('subjunctive', 'pretPerf'): 'subjPerf',
    ('subjunctive', 'plusc'): 'subjPlusc',
}

# Tense aliases valid for any mood
_TENSE_ALIASES = {
    'subjPretPerf': 'subjPerf',
    'pp': 'part',
    'participle': 'part',
    'gerund': 'ger',
    'infinitive': 'inf',
}

_PERSON_ALIASES = {
    '': 'inv',
    'yo': '1s',
    'tu': '2s_tu',
    'tú': '2s_tu',
    'vos': '2s_vos',
    'el': '3s',
    'él': '3s',
    'nosotros': '1p',
    'vosotros': '2p_vosotros',
    'ellos': '3p',
}

_RULE_TAG_ALIASES = {
    'e_ie': RuleTag.E_IE,
    'diphthong_e_ie': RuleTag.E_IE,
    'e_i': RuleTag.E_I,
    'o_ue': RuleTag.O_UE,
    'diphthong_o_ue': RuleTag.O_UE,
    'o_u': RuleTag.O_U,
    'u_ue': RuleTag.U_UE,
    'i_ie': RuleTag.I_IE,
    'c_qu': RuleTag.C_QU,
    'g_gu': RuleTag.G_GU,
    'z_c': RuleTag.Z_C,
    'g_j': RuleTag.G_J,
    'gu_gü': RuleTag.GU_GUE,
    'gu_gue': RuleTag.GU_GUE,
    'c_z': RuleTag.C_Z,
    'c_zc': RuleTag.C_ZC,
    'zc': RuleTag.C_ZC,
    'hiatus_y': RuleTag.HIATUS_Y,
    'y_hiatus': RuleTag.HIATUS_Y,
    'uir_y': RuleTag.UIR_Y,
    'y_insertion': RuleTag.UIR_Y,
}


def normalize_mood_tense(mood: Optional[str], tense: Optional[str]) -> Tuple[Mood, Tense]:
    """
    Normalize a raw (mood, tense) pair and check the tense belongs to the mood.

    Args:
        mood: Raw mood string (e.g. 'subjunctive')
        tense: Raw tense string (e.g. 'pres' or 'subjPres')

    Returns:
        Tuple of (Mood, Tense)

    Raises:
        ValueError: If either value is unknown or the combination is invalid
    """
    if not mood or not tense:
        raise ValueError(f"mood and tense are required. Got: mood={mood!r}, tense={tense!r}")
    if not isinstance(mood, str) or not isinstance(tense, str):
        raise ValueError(f"mood and tense must be strings. Got: mood={mood!r}, tense={tense!r}")

    mood_str = mood.strip()
    tense_str = tense.strip()
    tense_str = _MOOD_TENSE_ALIASES.get((mood_str, tense_str), tense_str)
    tense_str = _TENSE_ALIASES.get(tense_str, tense_str)

    try:
        parsed_tense = Tense(tense_str)
    except ValueError:
        valid = ', '.join(t.value for t in Tense)
        raise ValueError(f"tense must be one of: {valid}. Got: {tense}") from None

    try:
        parsed_mood = Mood(mood_str)
    except ValueError:
        valid = ', '.join(m.value for m in Mood)
        raise ValueError(f"mood must be one of: {valid}. Got: {mood}") from None

    # Conditional tenses were sometimes filed under indicative
    if parsed_mood == Mood.INDICATIVE and parsed_tense in MOOD_TENSES[Mood.CONDITIONAL]:
        parsed_mood = Mood.CONDITIONAL

    if parsed_tense not in MOOD_TENSES[parsed_mood]:
        owner = mood_for_tense(parsed_tense)
        raise ValueError(
            f"tense {parsed_tense.value} belongs to mood {owner.value}, not {parsed_mood.value}"
        )
    return parsed_mood, parsed_tense


def normalize_person(person: Optional[str], mood: Mood) -> Person:
    """
    Normalize a raw person slot.

    Nonfinite forms are always ``inv``; an empty or missing person on a
    nonfinite form is accepted as ``inv``. Finite forms may not use ``inv``.
    """
    if person is not None and not isinstance(person, str):
        raise ValueError(f"person must be a string. Got: {person!r}")
    raw = (person or '').strip()
    raw = _PERSON_ALIASES.get(raw.lower(), raw)

    if mood == Mood.NONFINITE:
        if raw != Person.INVARIANT.value:
            raise ValueError(f"nonfinite forms must have person 'inv'. Got: {person}")
        return Person.INVARIANT

    try:
        parsed = Person(raw)
    except ValueError:
        valid = ', '.join(p.value for p in Person if p != Person.INVARIANT)
        raise ValueError(f"person must be one of: {valid}. Got: {person}") from None

    if parsed == Person.INVARIANT:
        raise ValueError(f"person 'inv' is only valid for nonfinite forms, not {mood.value}")
    return parsed


def normalize_rule_tag(tag: str) -> RuleTag:
    """
    Map a raw rule tag onto the RuleTag enumeration.

    Accepts the enum value itself ('E_IE'), arrow spellings ('e>ie', 'e→ie',
    'o->ue') and the snake_case aliases found in older tables.
    """
    if isinstance(tag, RuleTag):
        return tag
    if not tag or not str(tag).strip():
        raise ValueError("rule tag cannot be empty")

    raw = unicodedata.normalize('NFC', str(tag).strip())
    if raw in RuleTag.__members__:
        return RuleTag[raw]

    key = raw.lower()
    for arrow in ('->', '→', '>'):
        key = key.replace(arrow, '_')
    key = key.replace('-', '_').replace(' ', '_')

    if key in _RULE_TAG_ALIASES:
        return _RULE_TAG_ALIASES[key]

    valid = ', '.join(t.value for t in RuleTag)
    raise ValueError(f"rule tag must be one of: {valid}. Got: {tag}")
