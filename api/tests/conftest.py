"""Shared fixtures: small inline source tables and the bundled catalog."""

import pytest

from conjugador.core.config import DEFAULT_SOURCE_DIR, DEFAULT_SOURCE_ORDER
from conjugador.services.conjugation_service import Conjugator
from conjugador.services.source_service import load_source_dir, table_from_records

ALL_REGIONS = ["rioplatense", "la_general", "peninsular"]


def make_form(mood, tense, person, value, **extra):
    form = {"mood": mood, "tense": tense, "person": person, "value": value}
    form.update(extra)
    return form


def make_verb(lemma, paradigms, verb_type="regular", verb_id=None):
    return {"id": verb_id or lemma, "lemma": lemma, "type": verb_type, "paradigms": paradigms}


def make_paradigm(region_tags, forms):
    return {"regionTags": list(region_tags), "forms": list(forms)}


def make_table(name, *records):
    return table_from_records(name, list(records))


@pytest.fixture
def pensar_record():
    return make_verb("pensar", [
        make_paradigm(ALL_REGIONS, [
            make_form("indicative", "pres", "1s", "pienso", rules=["E_IE"]),
            make_form("indicative", "pres", "2s_tu", "piensas", accepts={"vos": "pensás"}, rules=["E_IE"]),
            make_form("indicative", "pres", "2s_vos", "pensás", accepts={"tu": "piensas"}),
            make_form("indicative", "pres", "3s", "piensa", rules=["E_IE"]),
            make_form("indicative", "pres", "2p_vosotros", "pensáis"),
            make_form("nonfinite", "inf", "inv", "pensar"),
        ]),
    ], verb_type="irregular")


@pytest.fixture
def venir_record():
    return make_verb("venir", [
        make_paradigm(["la_general", "peninsular"], [
            make_form("indicative", "pres", "2s_tu", "vienes", accepts={"vos": "venís"}),
            make_form("indicative", "pres", "2p_vosotros", "venís"),
            make_form("imperative", "impAff", "2s_tu", "ven", accepts={"vos": "vení"}),
            make_form("nonfinite", "inf", "inv", "venir"),
            make_form("nonfinite", "part", "inv", "venido"),
        ]),
        make_paradigm(["rioplatense"], [
            make_form("indicative", "pres", "2s_vos", "venís", accepts={"tu": "vienes"}),
            make_form("imperative", "impAff", "2s_vos", "vení", accepts={"tu": "ven"}),
        ]),
    ], verb_type="irregular")


@pytest.fixture
def sacar_record():
    """Only the tú slot is tabulated; voseo is reachable through accepts."""
    return make_verb("sacar", [
        make_paradigm(ALL_REGIONS, [
            make_form("indicative", "pres", "2s_tu", "sacas", accepts={"vos": "sacás"}),
            make_form("indicative", "pretIndef", "1s", "saqué", rules=["C_QU"]),
            make_form("indicative", "pretIndef", "2s_tu", "sacaste"),
        ]),
    ], verb_type="irregular")


@pytest.fixture
def hablar_record():
    return make_verb("hablar", [
        make_paradigm(ALL_REGIONS, [
            make_form("indicative", "pres", "1s", "hablo"),
            make_form("subjunctive", "subjImpf", "1s", "hablara", alt=["hablase"]),
            make_form("nonfinite", "inf", "inv", "hablar"),
            make_form("nonfinite", "part", "inv", "hablado"),
            make_form("nonfinite", "ger", "inv", "hablando"),
        ]),
    ])


@pytest.fixture
def sample_tables(pensar_record, venir_record, sacar_record, hablar_record):
    return [make_table("sample", pensar_record, venir_record, sacar_record, hablar_record)]


@pytest.fixture
def conjugator(sample_tables):
    return Conjugator.from_sources(sample_tables)


@pytest.fixture(scope="session")
def bundled_tables():
    return load_source_dir(DEFAULT_SOURCE_DIR, DEFAULT_SOURCE_ORDER)


@pytest.fixture(scope="session")
def bundled(bundled_tables):
    return Conjugator.from_sources(bundled_tables)
