"""
Job Database

Contains every job in the game with its family, armor capability and
base-job -> advanced-job descent.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional

from models import FAMILY_PROFILES, ArmorCapability, Job, JobCategory, JobFamily, Stat


def _job(abbreviation: str, name: str, family: JobFamily,
         armor: Optional[ArmorCapability] = None,
         descendants: Iterable[str] = ()) -> Job:
    """Build a job record, taking the family's armor weight unless overridden."""
    if armor is None:
        armor = FAMILY_PROFILES[family].armor
    return Job(abbreviation, name, family, armor, tuple(descendants))


_JOB_LIST: List[Job] = [
    # Crafting
    _job("ALC", "Alchemist", JobFamily.CRAFTING),
    _job("ARM", "Armorer", JobFamily.CRAFTING),
    _job("BSM", "Blacksmith", JobFamily.CRAFTING),
    _job("CRP", "Carpenter", JobFamily.CRAFTING),
    _job("CUL", "Culinarian", JobFamily.CRAFTING),
    _job("GSM", "Goldsmith", JobFamily.CRAFTING),
    _job("LTW", "Leatherworker", JobFamily.CRAFTING),
    _job("WVR", "Weaver", JobFamily.CRAFTING),

    # Gathering
    _job("BTN", "Botanist", JobFamily.GATHERING),
    _job("FSH", "Fisher", JobFamily.GATHERING),
    _job("MIN", "Miner", JobFamily.GATHERING),

    # Healers
    _job("AST", "Astrologian", JobFamily.HEALING),
    _job("SCH", "Scholar", JobFamily.HEALING),
    _job("WHM", "White Mage", JobFamily.HEALING),
    _job("CNJ", "Conjurer", JobFamily.HEALING, descendants=["WHM"]),

    # Casters
    _job("RDM", "Red Mage", JobFamily.CASTING),
    _job("SMN", "Summoner", JobFamily.CASTING),
    _job("THM", "Thaumaturge", JobFamily.CASTING),
    # Arcanist is a caster whose advanced forms include a healer
    _job("ACN", "Arcanist", JobFamily.CASTING, descendants=["SCH", "SMN"]),

    # Tanks
    _job("DRK", "Dark Knight", JobFamily.TANKING),
    _job("MRD", "Marauder", JobFamily.TANKING),
    _job("PLD", "Paladin", JobFamily.TANKING),
    _job("GLA", "Gladiator", JobFamily.TANKING, descendants=["PLD"]),

    # Strength melee
    _job("LNC", "Lancer", JobFamily.STRENGTH, armor=ArmorCapability.MAIL),
    _job("PGL", "Pugilist", JobFamily.STRENGTH),
    _job("SAM", "Samurai", JobFamily.STRENGTH),

    # Dexterity
    _job("ARC", "Archer", JobFamily.DEXTERITY),
    _job("DNC", "Dancer", JobFamily.DEXTERITY),
    _job("MCH", "Machinist", JobFamily.DEXTERITY),
    _job("NIN", "Ninja", JobFamily.DEXTERITY),
    _job("ROG", "Rogue", JobFamily.DEXTERITY, descendants=["NIN"]),
]


def validate_catalog(jobs: Iterable[Job]) -> Dict[str, Job]:
    """
    Index jobs by abbreviation and check the descent relation.

    Raises ValueError on duplicate abbreviations, unknown descendants,
    multi-level descent, or a descendant claimed by more than one base job.
    """
    catalog: Dict[str, Job] = {}
    for job in jobs:
        if job.abbreviation in catalog:
            raise ValueError(f"Duplicate job abbreviation: {job.abbreviation}")
        catalog[job.abbreviation] = job

    claimed_by: Dict[str, str] = {}
    for job in catalog.values():
        for abbr in job.descendants:
            if abbr == job.abbreviation:
                raise ValueError(f"Job {abbr} lists itself as a descendant")
            if abbr not in catalog:
                raise ValueError(f"Unknown descendant {abbr} of {job.abbreviation}")
            if catalog[abbr].descendants:
                raise ValueError(
                    f"Descendant {abbr} of {job.abbreviation} has descendants of its own"
                )
            if abbr in claimed_by:
                raise ValueError(
                    f"Job {abbr} descends from both {claimed_by[abbr]} and {job.abbreviation}"
                )
            claimed_by[abbr] = job.abbreviation

    return catalog


# Built once at import; never mutated afterwards
JOBS: Dict[str, Job] = validate_catalog(_JOB_LIST)

_ALL_JOBS: FrozenSet[Job] = frozenset(JOBS.values())

# advanced abbreviation -> base job
_BASE_JOBS: Dict[str, Job] = {
    abbr: job for job in JOBS.values() for abbr in job.descendants
}


def get_job(abbreviation: str) -> Optional[Job]:
    """Get job by abbreviation (exact, case-sensitive)."""
    return JOBS.get(abbreviation)


def get_all_jobs() -> FrozenSet[Job]:
    """Get every job in the catalog."""
    return _ALL_JOBS


def get_all_job_abbreviations() -> List[str]:
    return sorted(JOBS.keys())


def relevant_stats(job: Job) -> FrozenSet[Stat]:
    """Stats that matter when choosing gear for this job."""
    return job.main_stats | job.supporting_stats


def with_descendants(job: Job) -> FrozenSet[Job]:
    """
    Get the job together with its advanced forms.

    Gear suitable for a base job is also suitable for its advanced jobs,
    so GLA expands to {GLA, PLD}. Descent is one level deep; jobs without
    declared descendants expand to just themselves.
    """
    return frozenset([job] + [JOBS[abbr] for abbr in job.descendants])


def get_base_job(job: Job) -> Optional[Job]:
    """Get the base job this job specializes, if any."""
    return _BASE_JOBS.get(job.abbreviation)


def get_jobs_by_family(family: JobFamily) -> FrozenSet[Job]:
    return frozenset(job for job in _ALL_JOBS if job.family == family)


def get_jobs_by_category(category: JobCategory) -> FrozenSet[Job]:
    return frozenset(job for job in _ALL_JOBS if job.category == category)


def get_jobs_with_armor(capability: ArmorCapability) -> FrozenSet[Job]:
    """Get all jobs able to wear armor of at least the given weight."""
    return frozenset(job for job in _ALL_JOBS if job.can_wear(capability))
