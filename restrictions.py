"""
Gear Restriction Resolver

Maps the single-letter restriction code printed on a piece of gear to the
set of jobs allowed to equip it. Every job's own abbreviation is also a
valid code. All entries are expanded through job descent, so gear marked
for a base job also fits its advanced jobs.
"""

import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from job_database import (
    JOBS,
    get_job,
    get_jobs_with_armor,
    with_descendants,
)
from models import ArmorCapability, Job


# =============================================================================
# GROUP CODES
# =============================================================================

# code -> (description, explicit job abbreviations or minimum armor weight)
# Every job can wear ArmorCapability.NONE, so "N" selects the whole catalog.
RESTRICTION_GROUPS: Dict[str, Tuple[str, Union[List[str], ArmorCapability]]] = {
    "A": ("Aiming", ["ARC", "DNC", "MCH"]),
    "B": ("Black (shield-capable casters and swordsmen)", ["GLA", "THM"]),
    "L": ("Leather", ArmorCapability.LEATHER),
    "M": ("Mail", ArmorCapability.MAIL),
    "N": ("None - any job", ArmorCapability.NONE),
    "P": ("Plate", ArmorCapability.PLATE),
    "S": ("Shield", ["GLA", "CNJ", "THM"]),
    "T": ("Striking", ["PGL", "SAM"]),
    "W": ("White (shield-capable healers and swordsmen)", ["GLA", "CNJ"]),
}


def _group_jobs(code: str) -> FrozenSet[Job]:
    """Get the unexpanded job set for a group code."""
    _, selector = RESTRICTION_GROUPS[code]
    if isinstance(selector, ArmorCapability):
        return get_jobs_with_armor(selector)
    return frozenset(JOBS[abbr] for abbr in selector)


def expand_descendants(jobs: FrozenSet[Job]) -> FrozenSet[Job]:
    """Union of with_descendants() over every job in the set."""
    expanded = set()
    for job in jobs:
        expanded |= with_descendants(job)
    return frozenset(expanded)


def build_restriction_table() -> Mapping[str, FrozenSet[Job]]:
    """
    Build the restriction code table.

    1. Seed one entry per job keyed by its abbreviation.
    2. Overlay the group codes (these win over a seed with the same key).
    3. Expand every entry through job descent.
    """
    table: Dict[str, FrozenSet[Job]] = {
        abbr: frozenset([job]) for abbr, job in JOBS.items()
    }
    for code in RESTRICTION_GROUPS:
        table[code] = _group_jobs(code)

    return MappingProxyType({
        code: expand_descendants(jobs) for code, jobs in table.items()
    })


# =============================================================================
# GLOBAL TABLE
# =============================================================================

_table: Optional[Mapping[str, FrozenSet[Job]]] = None
_table_lock = threading.Lock()


def get_restriction_table() -> Mapping[str, FrozenSet[Job]]:
    """
    Get the global restriction table.

    Built on first access; the lock keeps concurrent first callers from
    building it twice.
    """
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = build_restriction_table()
    return _table


def resolve_restriction(code: str) -> Optional[FrozenSet[Job]]:
    """Get the jobs eligible for a restriction code, or None if unknown."""
    return get_restriction_table().get(code)


def get_restriction_codes() -> List[str]:
    """Get all restriction codes - group codes first, then job abbreviations."""
    table = get_restriction_table()
    groups = list(RESTRICTION_GROUPS)
    return groups + sorted(code for code in table if code not in RESTRICTION_GROUPS)


def can_equip(job: Job, code: str) -> bool:
    """Check if the job may equip gear marked with the restriction code."""
    jobs = resolve_restriction(code)
    if jobs is None:
        return False
    return job in jobs


def describe_restriction(code: str) -> Optional[str]:
    """Human-readable label for a restriction code."""
    if code in RESTRICTION_GROUPS:
        return RESTRICTION_GROUPS[code][0]
    job = get_job(code)
    if job is None:
        return None
    return job.name
