"""Tests for building the paradigm store and its load-time failures."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from conjugador.core.exceptions import StoreLoadError
from conjugador.models.enums import (
    Dialect,
    LemmaStatus,
    Mood,
    Person,
    Region,
    RegularityClass,
    RuleTag,
    StructuralErrorKind,
    Tense,
)
from conjugador.services.merge_service import merge_tables
from conjugador.services.store_service import build_store, load_store

from conftest import ALL_REGIONS, make_form, make_paradigm, make_table, make_verb


def good_verb(lemma="hablar"):
    return make_verb(lemma, [
        make_paradigm(ALL_REGIONS, [make_form("indicative", "pres", "1s", lemma[:-2] + "o")]),
    ])


class TestConversion:
    """Valid records become frozen Verb/Paradigm/Form models."""

    def test_loads_verb(self, pensar_record):
        store = load_store([make_table("t", pensar_record)])
        verb = store.get("pensar")
        assert verb.regularity_class == RegularityClass.IRREGULAR
        assert verb.source == "t"
        assert verb.regions == frozenset(Region)
        assert verb.form_count == 6

    def test_form_fields(self, pensar_record):
        verb = load_store([make_table("t", pensar_record)]).get("pensar")
        tu = next(f for _, f in verb.iter_forms() if f.person == Person.SECOND_SINGULAR_TU)
        assert tu.mood == Mood.INDICATIVE
        assert tu.tense == Tense.PRES
        assert tu.accepts == {Dialect.VOSEO: "pensás"}
        assert tu.rules == frozenset({RuleTag.E_IE})

    def test_raw_quirks_normalized(self):
        """Empty nonfinite person, subjunctive/pres, pp and indicative/cond are accepted."""
        record = make_verb("haber", [
            make_paradigm(ALL_REGIONS, [
                make_form("nonfinite", "inf", "", "haber"),
                make_form("nonfinite", "pp", "", "habido"),
                make_form("subjunctive", "pres", "1s", "haya"),
                make_form("indicative", "cond", "1s", "habría"),
            ]),
        ])
        verb = load_store([make_table("t", record)]).get("haber")
        keys = {form.key for _, form in verb.iter_forms()}
        assert (Mood.NONFINITE, Tense.INF, Person.INVARIANT) in keys
        assert (Mood.NONFINITE, Tense.PART, Person.INVARIANT) in keys
        assert (Mood.SUBJUNCTIVE, Tense.SUBJ_PRES, Person.FIRST_SINGULAR) in keys
        assert (Mood.CONDITIONAL, Tense.COND, Person.FIRST_SINGULAR) in keys

    def test_rule_aliases(self):
        record = make_verb("creer", [
            make_paradigm(ALL_REGIONS, [
                make_form("indicative", "pretIndef", "3s", "creyó", rules=["hiatus-y", "e→ie"]),
            ]),
        ])
        verb = load_store([make_table("t", record)]).get("creer")
        assert verb.paradigms[0].forms[0].rules == frozenset({RuleTag.HIATUS_Y, RuleTag.E_IE})

    def test_models_are_frozen(self, pensar_record):
        verb = load_store([make_table("t", pensar_record)]).get("pensar")
        with pytest.raises(PydanticValidationError):
            verb.lemma = "otro"

    def test_accepts_map_is_read_only(self, pensar_record):
        verb = load_store([make_table("t", pensar_record)]).get("pensar")
        tu = next(form for _, form in verb.iter_forms() if form.person == Person.SECOND_SINGULAR_TU)
        with pytest.raises(TypeError):
            tu.accepts[Dialect.VOSEO] = "otro"
        assert tu.accepted_for(Dialect.VOSEO) == "pensás"

    def test_verbs_mapping_is_read_only(self, pensar_record):
        store = load_store([make_table("t", pensar_record)])
        with pytest.raises(TypeError):
            store.verbs["otro"] = store.get("pensar")


class TestStructuralErrors:
    """Records that cannot be conjugated are reported, never dropped silently."""

    def test_empty_paradigms(self):
        store = load_store([make_table("t", make_verb("vacio", []))], strict=False)
        assert [e.kind for e in store.load_errors] == [StructuralErrorKind.EMPTY_PARADIGMS]

    def test_empty_forms(self):
        record = make_verb("vacio", [make_paradigm(ALL_REGIONS, [])])
        store = load_store([make_table("t", record)], strict=False)
        assert [e.kind for e in store.load_errors] == [StructuralErrorKind.EMPTY_FORMS]
        assert store.load_errors[0].source == "t"

    @pytest.mark.parametrize("form", [
        make_form("optative", "pres", "1s", "x"),
        make_form("indicative", "pres", "inv", "x"),
        make_form("indicative", "impAff", "1s", "x"),
        make_form("indicative", "pres", "1s", ""),
        make_form("indicative", "pres", "2s_tu", "x", accepts={"usted": "y"}),
        make_form("indicative", "pres", "1s", "x", rules=["NOT_A_RULE"]),
        make_form(3, "pres", "1s", "x"),
        make_form("indicative", 5, "1s", "x"),
        make_form("indicative", "pres", 1, "x"),
        make_form("indicative", "pres", "1s", "x", alt=[7]),
        make_form("indicative", "pres", "1s", "x", alt=7),
    ])
    def test_invalid_record(self, form):
        record = make_verb("roto", [make_paradigm(ALL_REGIONS, [form])])
        store = load_store([make_table("t", record)], strict=False)
        assert [e.kind for e in store.load_errors] == [StructuralErrorKind.INVALID_RECORD]

    @pytest.mark.parametrize("field,value", [("mood", 3), ("person", 1), ("alt", [7])])
    def test_non_string_field_keeps_other_verbs(self, field, value):
        """A wrongly typed field rejects only its own verb."""
        broken = make_form("indicative", "pres", "1s", "rompo")
        broken[field] = value
        tables = [make_table("t", good_verb("hablar"), make_verb("romper", [make_paradigm(ALL_REGIONS, [broken])]))]
        store = load_store(tables, strict=False)
        assert list(store) == ["hablar"]
        assert [(e.lemma, e.kind) for e in store.load_errors] == [("romper", StructuralErrorKind.INVALID_RECORD)]
        assert store.status("romper") == LemmaStatus.REJECTED

    def test_empty_region_tags(self):
        record = make_verb("roto", [make_paradigm([], [make_form("indicative", "pres", "1s", "x")])])
        store = load_store([make_table("t", record)], strict=False)
        assert store.load_errors[0].kind == StructuralErrorKind.INVALID_RECORD

    def test_strict_raises_with_partial_store(self):
        tables = [make_table("t", good_verb("hablar"), make_verb("vacio", []))]
        with pytest.raises(StoreLoadError) as exc_info:
            load_store(tables)
        error = exc_info.value
        assert [e.lemma for e in error.errors] == ["vacio"]
        assert "vacio" in str(error)
        assert "hablar" in error.store
        assert "vacio" not in error.store

    def test_non_strict_returns_store(self):
        tables = [make_table("t", good_verb("hablar"), make_verb("vacio", []))]
        store = load_store(tables, strict=False)
        assert len(store) == 1
        assert len(store.load_errors) == 1
        assert store.errors_for("vacio")[0].kind == StructuralErrorKind.EMPTY_PARADIGMS

    def test_build_store_from_merged_table(self):
        merged = merge_tables([make_table("t", good_verb("hablar"))])
        assert list(build_store(merged)) == ["hablar"]


class TestLemmaStatus:
    """LOADED, REJECTED and UNKNOWN are distinguishable."""

    def test_statuses(self):
        store = load_store([make_table("t", good_verb("hablar"), make_verb("vacio", []))], strict=False)
        assert store.status("hablar") == LemmaStatus.LOADED
        assert store.status("vacio") == LemmaStatus.REJECTED
        assert store.status("inexistente") == LemmaStatus.UNKNOWN

    def test_lookup_normalizes_lemma(self):
        store = load_store([make_table("t", good_verb("hablar"))])
        assert "  Hablar " in store
        assert store.get("HABLAR").lemma == "hablar"
        assert store.status("Hablar.") == LemmaStatus.LOADED


class TestAcceptsSymmetry:
    """tú/vos pairs that do not reference each other."""

    def asymmetric(self):
        return make_verb("pensar", [
            make_paradigm(ALL_REGIONS, [
                make_form("indicative", "pres", "2s_tu", "piensas", accepts={"vos": "pensás"}),
                make_form("indicative", "pres", "2s_vos", "pensás"),
            ]),
        ])

    def test_warns_but_loads_by_default(self, caplog):
        store = load_store([make_table("t", self.asymmetric())])
        assert "pensar" in store
        assert "symmetry" in caplog.text

    def test_fatal_in_strict_symmetry_mode(self):
        store = load_store([make_table("t", self.asymmetric())], strict=False, strict_accepts_symmetry=True)
        assert "pensar" not in store
        assert store.load_errors[0].kind == StructuralErrorKind.ACCEPTS_ASYMMETRY
        assert store.status("pensar") == LemmaStatus.REJECTED

    def test_symmetric_pair_is_clean(self, pensar_record):
        store = load_store([make_table("t", pensar_record)], strict_accepts_symmetry=True)
        assert "pensar" in store
