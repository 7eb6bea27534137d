"""Hardcoded sample champions served by the API."""

from .models.champion import (
    Ability,
    AbilityStat,
    Champion,
    ChampionStats,
    Defense,
    Offense,
)


def make_aatrox() -> Champion:
    """Build the Aatrox sample. A new instance is returned on every call."""
    return Champion(
        key="Aatrox",
        name="Aatrox",
        origin=["Demon", "Pirate"],
        class_=["Blademaster", "Gunslinger"],
        cost=3,
        ability=Ability(
            name="The Darkin Blade",
            description="Aatrox cleaves the area in front of him, dealing damage to enemies inside it.",
            type="Active",
            mana_cost=100,
            mana_start=0,
            stats=[
                AbilityStat(type="Damage", value="350 / 575 / 850"),
                AbilityStat(type="Storm Duration", value="8s"),
            ],
        ),
        stats=ChampionStats(
            offense=Offense(damage=65, attack_speed=0.65, dps=42, range=1),
            defense=Defense(health=750, armor=25, magic_resist=20),
        ),
        items=["titanichydra", "phantomdancer", "dragonsclaw"],
    )
