# Data Models
from .champion import (
    Champion,
    ChampionStats,
    Ability,
    AbilityStat,
    Offense,
    Defense,
)

__all__ = [
    "Champion",
    "ChampionStats",
    "Ability",
    "AbilityStat",
    "Offense",
    "Defense",
]
