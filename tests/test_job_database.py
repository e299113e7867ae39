"""Tests for the job catalog, stat classification and descent."""

import pytest

from job_database import (
    JOBS,
    get_all_job_abbreviations,
    get_all_jobs,
    get_base_job,
    get_job,
    get_jobs_by_category,
    get_jobs_by_family,
    get_jobs_with_armor,
    relevant_stats,
    validate_catalog,
    with_descendants,
)
from models import (
    CRAFTING_STATS,
    GATHERING_STATS,
    ArmorCapability,
    Job,
    JobCategory,
    JobFamily,
    Stat,
    StatAffinity,
)


class TestCatalog:
    def test_job_count(self):
        assert len(get_all_jobs()) == 31

    def test_abbreviations_sorted(self):
        abbrs = get_all_job_abbreviations()
        assert abbrs == sorted(abbrs)
        assert len(abbrs) == len(set(abbrs))

    def test_lookup_is_left_inverse(self):
        for job in get_all_jobs():
            assert get_job(job.abbreviation) is job

    def test_lookup_miss(self):
        assert get_job("XYZ") is None
        assert get_job("") is None

    def test_lookup_case_sensitive(self):
        assert get_job("pld") is None
        assert get_job("PLD").name == "Paladin"

    def test_jobs_hashable_and_immutable(self):
        pld = get_job("PLD")
        assert {pld, get_job("PLD")} == {pld}
        with pytest.raises(AttributeError):
            pld.abbreviation = "XXX"


class TestRelevantStats:
    def test_union_and_nonempty(self):
        for job in get_all_jobs():
            stats = relevant_stats(job)
            assert stats == job.main_stats | job.supporting_stats
            assert stats

    def test_combat_jobs_have_vitality(self):
        for job in get_jobs_by_category(JobCategory.ADVENTURING):
            assert Stat.VITALITY in job.main_stats
            assert len(job.main_stats) == 2

    def test_healer(self):
        whm = get_job("WHM")
        assert whm.main_stats == {Stat.MIND, Stat.VITALITY}
        assert whm.supporting_stats == {Stat.PIETY}
        assert whm.affinity == StatAffinity.MIND

    def test_tank(self):
        gla = get_job("GLA")
        assert gla.main_stats == {Stat.STRENGTH, Stat.VITALITY}
        assert gla.supporting_stats == {Stat.TENACITY, Stat.DEFENSE}

    def test_damage_dealers_have_no_supporting(self):
        for abbr in ["PGL", "SAM", "LNC", "ARC", "NIN", "THM", "RDM", "SMN"]:
            assert get_job(abbr).supporting_stats == frozenset()

    def test_caster(self):
        assert get_job("THM").main_stats == {Stat.INTELLIGENCE, Stat.VITALITY}

    def test_dexterity(self):
        assert get_job("MCH").main_stats == {Stat.DEXTERITY, Stat.VITALITY}

    def test_crafting(self):
        for job in get_jobs_by_category(JobCategory.CRAFTING):
            assert job.main_stats == frozenset()
            assert job.supporting_stats == CRAFTING_STATS
            assert job.is_production
        assert len(get_jobs_by_category(JobCategory.CRAFTING)) == 8

    def test_gathering(self):
        gathering = get_jobs_by_category(JobCategory.GATHERING)
        assert {j.abbreviation for j in gathering} == {"BTN", "FSH", "MIN"}
        for job in gathering:
            assert job.main_stats == frozenset()
            assert relevant_stats(job) == GATHERING_STATS


class TestArmor:
    def test_closure_ordering(self):
        leather = get_jobs_with_armor(ArmorCapability.LEATHER)
        mail = get_jobs_with_armor(ArmorCapability.MAIL)
        plate = get_jobs_with_armor(ArmorCapability.PLATE)
        assert plate <= mail <= leather

    def test_none_is_everyone(self):
        assert get_jobs_with_armor(ArmorCapability.NONE) == get_all_jobs()

    def test_plate_is_tanks(self):
        plate = get_jobs_with_armor(ArmorCapability.PLATE)
        assert plate == get_jobs_by_family(JobFamily.TANKING)

    def test_mail_is_tanks_and_lancer(self):
        mail = {j.abbreviation for j in get_jobs_with_armor(ArmorCapability.MAIL)}
        assert mail == {"DRK", "GLA", "MRD", "PLD", "LNC"}

    def test_magic_and_production_wear_no_armor(self):
        for abbr in ["WHM", "CNJ", "THM", "ACN", "ALC", "MIN"]:
            assert get_job(abbr).armor == ArmorCapability.NONE
            assert not get_job(abbr).can_wear(ArmorCapability.LEATHER)

    def test_can_wear(self):
        lnc = get_job("LNC")
        assert lnc.can_wear(ArmorCapability.LEATHER)
        assert lnc.can_wear(ArmorCapability.MAIL)
        assert not lnc.can_wear(ArmorCapability.PLATE)


class TestDescendants:
    def test_contains_self(self):
        for job in get_all_jobs():
            assert job in with_descendants(job)

    def test_paladin(self):
        pld = get_job("PLD")
        assert with_descendants(pld) == {pld}

    def test_gladiator(self):
        assert with_descendants(get_job("GLA")) == {get_job("GLA"), get_job("PLD")}

    def test_arcanist(self):
        expanded = {j.abbreviation for j in with_descendants(get_job("ACN"))}
        assert expanded == {"ACN", "SCH", "SMN"}

    def test_one_level(self):
        for job in get_all_jobs():
            for desc in with_descendants(job):
                if desc != job:
                    assert with_descendants(desc) == {desc}

    def test_union_is_catalog(self):
        union = set()
        for job in get_all_jobs():
            union |= with_descendants(job)
        assert union == get_all_jobs()

    def test_base_jobs(self):
        bases = {j.abbreviation for j in get_all_jobs() if j.is_base_job}
        assert bases == {"ACN", "CNJ", "GLA", "ROG"}

    def test_get_base_job(self):
        assert get_base_job(get_job("NIN")) is get_job("ROG")
        assert get_base_job(get_job("WHM")) is get_job("CNJ")
        assert get_base_job(get_job("GLA")) is None
        assert get_base_job(get_job("DRK")) is None


class TestValidateCatalog:
    def _job(self, abbr, descendants=()):
        return Job(abbr, abbr, JobFamily.STRENGTH, ArmorCapability.LEATHER, tuple(descendants))

    def test_real_catalog_valid(self):
        assert validate_catalog(JOBS.values()) == JOBS

    def test_duplicate(self):
        with pytest.raises(ValueError, match="Duplicate"):
            validate_catalog([self._job("AAA"), self._job("AAA")])

    def test_unknown_descendant(self):
        with pytest.raises(ValueError, match="Unknown descendant"):
            validate_catalog([self._job("AAA", ["BBB"])])

    def test_self_descendant(self):
        with pytest.raises(ValueError, match="itself"):
            validate_catalog([self._job("AAA", ["AAA"])])

    def test_multi_level(self):
        with pytest.raises(ValueError, match="descendants of its own"):
            validate_catalog([
                self._job("AAA", ["BBB"]),
                self._job("BBB", ["CCC"]),
                self._job("CCC"),
            ])

    def test_two_bases(self):
        with pytest.raises(ValueError, match="descends from both"):
            validate_catalog([
                self._job("AAA", ["CCC"]),
                self._job("BBB", ["CCC"]),
                self._job("CCC"),
            ])
