"""Tests against the source tables shipped with the package."""

import pytest

from conjugador.models.enums import (
    Dialect,
    Mood,
    Person,
    Region,
    ResolutionSource,
    RuleTag,
    Tense,
    UnattestedReason,
)
from conjugador.services.merge_service import merge_tables
from conjugador.services.store_service import load_store


class TestBundledLoad:
    """The shipped tables load cleanly in strict mode."""

    def test_no_load_errors(self, bundled):
        assert bundled.store.load_errors == ()

    def test_no_accepts_violations(self, bundled):
        assert bundled.audit().accepts_violations == []

    def test_replacements(self, bundled_tables):
        merged = merge_tables(bundled_tables)
        assert merged.replacements["trabajar"] == ["common_verbs", "verbs"]
        assert merged.replacements["comprar"] == ["verbs", "additional_verbs"]
        assert merged.replacements["vivir"] == ["common_verbs", "additional_verbs"]

    def test_later_tables_win(self, bundled):
        assert bundled.verb("comprar").source == "additional_verbs"
        assert bundled.verb("comprar").id == "comprar"
        assert bundled.verb("trabajar").source == "verbs"
        assert bundled.verb("comer").source == "common_verbs"

    def test_strict_symmetry_mode(self, bundled_tables):
        store = load_store(bundled_tables, strict_accepts_symmetry=True)
        assert len(store) == len(merge_tables(bundled_tables))


class TestAcceptsSymmetry:
    """pensar 2s_tu and 2s_vos reference each other."""

    def test_pensar_pair(self, bundled):
        tu = bundled.lookup("pensar", "indicative", "pres", "2s_tu")[0]
        vos = bundled.lookup("pensar", "indicative", "pres", "2s_vos")[0]
        assert tu.value == "piensas"
        assert tu.accepts[Dialect.VOSEO] == "pensás"
        assert vos.value == "pensás"
        assert vos.accepts[Dialect.TUTEO] == "piensas"


class TestRegionResolution:
    """Documented resolution examples."""

    @pytest.mark.parametrize("region,value", [
        ("rioplatense", "vení"),
        ("peninsular", "ven"),
        ("la_general", "ven"),
    ])
    def test_venir_imperative(self, bundled, region, value):
        assert bundled.resolve("venir", "imperative", "impAff", "2s", region).value == value

    def test_sacar_voseo_through_accepts(self, bundled):
        result = bundled.resolve("sacar", "indicative", "pres", "2s", "rioplatense")
        assert result.value == "sacás"
        assert result.source == ResolutionSource.ACCEPTS
        assert bundled.resolve("sacar", "indicative", "pres", "2s", "la_general").value == "sacas"

    def test_sacar_subjunctive_alias(self, bundled):
        result = bundled.resolve("sacar", "subjunctive", "subjPres", "1s", "peninsular")
        assert result.value == "saque"
        assert result.rules == (RuleTag.C_QU,)

    def test_legacy_voseo(self, bundled):
        result = bundled.resolve("comer", "indicative", "pres", "2s", "rioplatense")
        assert result.value == "comés"
        assert result.dialect_equivalents == {Dialect.TUTEO: "comes"}

    def test_coger_region_not_covered(self, bundled):
        result = bundled.resolve("coger", "indicative", "pres", "1s", "rioplatense")
        assert result.reason == UnattestedReason.REGION_NOT_COVERED
        assert bundled.resolve("coger", "indicative", "pres", "1s", "peninsular").value == "cojo"

    def test_vosotros_only_where_tabulated(self, bundled):
        assert bundled.resolve("venir", "indicative", "pres", "2p", "peninsular").value == "venís"
        assert not bundled.resolve("venir", "indicative", "pres", "2p", "rioplatense").is_attested

    def test_conditional_filed_under_indicative(self, bundled):
        assert bundled.resolve("hablar", "conditional", "cond", "1s", "la_general").value == "hablaría"
        assert bundled.resolve("hablar", "indicative", "cond", "1s", "la_general").value == "hablaría"


class TestNonfiniteInvariance:
    """hablar nonfinite forms are the same in every region."""

    @pytest.mark.parametrize("tense,value", [("inf", "hablar"), ("part", "hablado"), ("ger", "hablando")])
    def test_hablar(self, bundled, tense, value):
        for region in Region:
            result = bundled.resolve("hablar", "nonfinite", tense, region=region)
            assert result.value == value
            assert result.person == Person.INVARIANT

    def test_empty_person_normalized(self, bundled):
        assert bundled.resolve("haber", "nonfinite", "part", region="peninsular").value == "habido"


class TestDuplicates:
    """trabajar lists some tuples twice; resolution returns one value."""

    def test_single_primary(self, bundled):
        result = bundled.resolve("trabajar", "indicative", "pres", "1s", "la_general")
        assert result.value == "trabajo"
        assert result.alternates == ()

    def test_duplicates_reported(self, bundled):
        duplicates = [d for d in bundled.audit().duplicates if d.lemma == "trabajar"]
        assert {d.person for d in duplicates} == {
            Person.FIRST_SINGULAR, Person.SECOND_SINGULAR_VOS, Person.THIRD_PLURAL,
        }
        assert not any(d.conflicting for d in duplicates)

    def test_table_has_no_repeats(self, bundled):
        table = bundled.conjugate("trabajar", "rioplatense")
        pres = next(s for s in table.sections if (s.mood, s.tense) == (Mood.INDICATIVE, Tense.PRES))
        persons = [c.person for c in pres.cells]
        assert len(persons) == len(set(persons))


class TestRuleAnnotations:
    """Shipped rule tags."""

    @pytest.mark.parametrize("lemma,mood,tense,person,tag", [
        ("pensar", "indicative", "pres", "3s", RuleTag.E_IE),
        ("dormir", "indicative", "pretIndef", "3s", RuleTag.O_U),
        ("pedir", "indicative", "pres", "1s", RuleTag.E_I),
        ("creer", "indicative", "pretIndef", "3p", RuleTag.HIATUS_Y),
        ("construir", "indicative", "pres", "1s", RuleTag.UIR_Y),
        ("proteger", "indicative", "pres", "1s", RuleTag.G_J),
        ("caer", "nonfinite", "ger", "inv", RuleTag.HIATUS_Y),
    ])
    def test_tags(self, bundled, lemma, mood, tense, person, tag):
        assert tag in bundled.explain(lemma, mood, tense, person)
