"""Tests for the form index and the duplicate tie-break."""

from conjugador.models.enums import Mood, Person, Region, RuleTag, Tense
from conjugador.models.verb import Form
from conjugador.services.index_service import FormIndex, choose_preferred
from conjugador.services.store_service import load_store

from conftest import ALL_REGIONS, make_form, make_paradigm, make_table, make_verb

PRES = (Mood.INDICATIVE, Tense.PRES)


def plain(value, **extra):
    return Form(mood=Mood.INDICATIVE, tense=Tense.PRES, person=Person.FIRST_SINGULAR, value=value, **extra)


class TestChoosePreferred:
    """Tie-break between forms for the same tuple."""

    def test_empty(self):
        assert choose_preferred([]) is None

    def test_first_when_no_rules(self):
        first, second = plain("a"), plain("b")
        assert choose_preferred([first, second]) is first

    def test_first_with_rules_wins(self):
        bare = plain("a")
        tagged = plain("b", rules=frozenset({RuleTag.E_IE}))
        later = plain("c", rules=frozenset({RuleTag.O_UE}))
        assert choose_preferred([bare, tagged, later]) is tagged


class TestLookup:
    """Exact-tuple lookups across paradigms."""

    def test_lookup_across_paradigms(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        assert [f.value for f in index.lookup("venir", Mood.IMPERATIVE, Tense.IMP_AFF, Person.SECOND_SINGULAR_TU)] == ["ven"]
        assert [f.value for f in index.lookup("venir", Mood.IMPERATIVE, Tense.IMP_AFF, Person.SECOND_SINGULAR_VOS)] == ["vení"]

    def test_lookup_in_region(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        tu = (Mood.IMPERATIVE, Tense.IMP_AFF, Person.SECOND_SINGULAR_TU)
        assert index.lookup_in_region("venir", *tu, Region.RIOPLATENSE) == []
        assert [f.value for f in index.lookup_in_region("venir", *tu, Region.PENINSULAR)] == ["ven"]

    def test_missing_tuple_and_lemma(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        assert index.lookup("venir", *PRES, Person.FIRST_SINGULAR) == []
        assert index.lookup("nada", *PRES, Person.FIRST_SINGULAR) == []

    def test_lemma_normalized(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        assert index.lookup(" Venir", Mood.NONFINITE, Tense.INF, Person.INVARIANT)[0].value == "venir"

    def test_entries_carry_paradigm_position(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        entry = index.entries("venir", Mood.IMPERATIVE, Tense.IMP_AFF, Person.SECOND_SINGULAR_VOS)[0]
        assert entry.paradigm_index == 1
        assert entry.region_tags == frozenset({Region.RIOPLATENSE})


class TestDuplicates:
    """Repeated tuples inside one paradigm."""

    def duplicated(self):
        return make_verb("trabajar", [
            make_paradigm(ALL_REGIONS, [
                make_form("indicative", "pres", "1s", "trabajo"),
                make_form("indicative", "pres", "1s", "trabajo"),
                make_form("indicative", "pres", "3s", "trabaja"),
            ]),
        ])

    def test_all_candidates_returned_in_order(self):
        index = FormIndex(load_store([make_table("t", self.duplicated())]))
        assert [f.value for f in index.lookup("trabajar", *PRES, Person.FIRST_SINGULAR)] == ["trabajo", "trabajo"]

    def test_duplicate_logged_once_at_build(self, caplog):
        store = load_store([make_table("t", self.duplicated())])
        caplog.clear()
        FormIndex(store)
        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert "trabajar" in warnings[0].getMessage()


class TestTensesFor:
    """(mood, tense) pairs present for a verb."""

    def test_canonical_order(self):
        record = make_verb("hablar", [
            make_paradigm(ALL_REGIONS, [
                make_form("nonfinite", "inf", "inv", "hablar"),
                make_form("subjunctive", "subjPres", "1s", "hable"),
                make_form("indicative", "pretIndef", "1s", "hablé"),
                make_form("indicative", "pres", "1s", "hablo"),
            ]),
        ])
        index = FormIndex(load_store([make_table("t", record)]))
        assert index.tenses_for("hablar") == [
            (Mood.INDICATIVE, Tense.PRES),
            (Mood.INDICATIVE, Tense.PRET_INDEF),
            (Mood.SUBJUNCTIVE, Tense.SUBJ_PRES),
            (Mood.NONFINITE, Tense.INF),
        ]

    def test_unknown_verb(self, venir_record):
        index = FormIndex(load_store([make_table("t", venir_record)]))
        assert index.tenses_for("nada") == []
