"""
Spanish display labels for grammatical categories.
"""
from conjugador.models.enums import Mood, Person, Region, RuleTag, Tense

MOOD_LABELS = {
    Mood.INDICATIVE: 'Indicativo',
    Mood.SUBJUNCTIVE: 'Subjuntivo',
    Mood.IMPERATIVE: 'Imperativo',
    Mood.CONDITIONAL: 'Condicional',
    Mood.NONFINITE: 'Formas no conjugadas',
}

TENSE_LABELS = {
    Tense.PRES: 'Presente',
    Tense.PRET_INDEF: 'Pretérito indefinido',
    Tense.IMPF: 'Pretérito imperfecto',
    Tense.FUT: 'Futuro',
    Tense.PRET_PERF: 'Pretérito perfecto',
    Tense.PLUSC: 'Pluscuamperfecto',
    Tense.FUT_PERF: 'Futuro perfecto',
    Tense.IR_A_INF: 'Futuro perifrástico (ir a + infinitivo)',
    Tense.PRES_FUTURATE: 'Presente con valor de futuro',
    Tense.SUBJ_PRES: 'Presente de subjuntivo',
    Tense.SUBJ_IMPF: 'Imperfecto de subjuntivo',
    Tense.SUBJ_FUT: 'Futuro de subjuntivo',
    Tense.SUBJ_PERF: 'Pretérito perfecto de subjuntivo',
    Tense.SUBJ_PLUSC: 'Pluscuamperfecto de subjuntivo',
    Tense.IMP_AFF: 'Imperativo afirmativo',
    Tense.IMP_NEG: 'Imperativo negativo',
    Tense.COND: 'Condicional',
    Tense.COND_PERF: 'Condicional perfecto',
    Tense.INF: 'Infinitivo',
    Tense.INF_PERF: 'Infinitivo compuesto',
    Tense.PART: 'Participio',
    Tense.GER: 'Gerundio',
}

PERSON_LABELS = {
    Person.FIRST_SINGULAR: 'yo',
    Person.SECOND_SINGULAR_TU: 'tú',
    Person.SECOND_SINGULAR_VOS: 'vos',
    Person.THIRD_SINGULAR: 'él/ella/usted',
    Person.FIRST_PLURAL: 'nosotros',
    Person.SECOND_PLURAL_VOSOTROS: 'vosotros',
    Person.THIRD_PLURAL: 'ellos/ustedes',
    Person.INVARIANT: '-',
}

REGION_LABELS = {
    Region.RIOPLATENSE: 'Rioplatense',
    Region.LA_GENERAL: 'Latinoamérica (general)',
    Region.PENINSULAR: 'Peninsular',
}

RULE_TAG_LABELS = {
    RuleTag.E_IE: 'Diptongación de la raíz: e → ie (pensar → piensa)',
    RuleTag.E_I: 'Cierre vocálico de la raíz: e → i (pedir → pide)',
    RuleTag.O_UE: 'Diptongación de la raíz: o → ue (dormir → duerme)',
    RuleTag.O_U: 'Cierre vocálico de la raíz: o → u (dormir → durmió)',
    RuleTag.U_UE: 'Diptongación de la raíz: u → ue (jugar → juega)',
    RuleTag.I_IE: 'Diptongación de la raíz: i → ie (adquirir → adquiere)',
    RuleTag.C_QU: 'Cambio ortográfico c → qu ante e (sacar → saqué)',
    RuleTag.G_GU: 'Cambio ortográfico g → gu ante e (llegar → llegué)',
    RuleTag.Z_C: 'Cambio ortográfico z → c ante e (empezar → empecé)',
    RuleTag.G_J: 'Cambio ortográfico g → j ante a/o (proteger → protejo)',
    RuleTag.GU_GUE: 'Diéresis gu → gü ante e (averiguar → averigüé)',
    RuleTag.C_Z: 'Cambio ortográfico c → z ante a/o (vencer → venzo)',
    RuleTag.C_ZC: 'Incremento zc ante a/o (conocer → conozco)',
    RuleTag.HIATUS_Y: 'Y antihiática entre vocales (creer → creyó)',
    RuleTag.UIR_Y: 'Inserción de y en verbos en -uir (construir → construyo)',
}


def get_mood_label(mood: Mood) -> str:
    return MOOD_LABELS.get(mood, mood.value)


def get_tense_label(tense: Tense) -> str:
    return TENSE_LABELS.get(tense, tense.value)


def get_person_label(person: Person) -> str:
    return PERSON_LABELS.get(person, person.value)


def get_region_label(region: Region) -> str:
    return REGION_LABELS.get(region, region.value)


def get_rule_tag_label(tag: RuleTag) -> str:
    return RULE_TAG_LABELS.get(tag, tag.value)
