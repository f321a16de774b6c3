"""
Rank Table

Maps cumulative XP to a rank letter.

Ranks (lowest to highest):
- E: 0 XP
- D: 500 XP
- C: 1500 XP
- B: 3000 XP
- A: 5000 XP
- S: 7500 XP
"""

from typing import Any, Dict, Optional

RANKS = [
    {"rank": "E", "min_xp": 0},
    {"rank": "D", "min_xp": 500},
    {"rank": "C", "min_xp": 1500},
    {"rank": "B", "min_xp": 3000},
    {"rank": "A", "min_xp": 5000},
    {"rank": "S", "min_xp": 7500},
]

RANK_ORDER = [r["rank"] for r in RANKS]
LOWEST_RANK = RANKS[0]["rank"]


def rank_for(xp: int) -> str:
    """Return the highest rank whose threshold is at or below xp"""
    current = LOWEST_RANK
    for r in RANKS:
        if xp >= r["min_xp"]:
            current = r["rank"]
        else:
            break
    return current


def next_rank(current: str) -> Optional[Dict[str, Any]]:
    """
    Return the tier after current

    Returns:
        {'rank': str, 'min_xp': int}, or None at the top tier or for an
        unknown rank letter
    """
    if current not in RANK_ORDER:
        return None
    idx = RANK_ORDER.index(current)
    if idx == len(RANKS) - 1:
        return None
    return dict(RANKS[idx + 1])


def xp_for_rank(rank: str) -> int:
    """Minimum XP for rank (0 for unknown letters)"""
    for r in RANKS:
        if r["rank"] == rank:
            return r["min_xp"]
    return 0


def rank_at_least(rank: str, minimum: str) -> bool:
    """True when rank is the same tier as minimum or higher"""
    if minimum not in RANK_ORDER:
        return True
    if rank not in RANK_ORDER:
        return False
    return RANK_ORDER.index(rank) >= RANK_ORDER.index(minimum)


def rank_progress(xp: int) -> Dict[str, Any]:
    """
    Progress towards the next rank, for dashboards

    Returns:
        {
            'rank': str,
            'next_rank': Optional[str],
            'xp': int,
            'xp_into_rank': int,
            'xp_to_next_rank': int  (0 at the top tier)
        }
    """
    rank = rank_for(xp)
    upcoming = next_rank(rank)
    return {
        "rank": rank,
        "next_rank": upcoming["rank"] if upcoming else None,
        "xp": xp,
        "xp_into_rank": xp - xp_for_rank(rank),
        "xp_to_next_rank": max(0, upcoming["min_xp"] - xp) if upcoming else 0,
    }
