"""Champion data model for the TFT champion API.

Field names follow the camelCase JSON tags used on the wire (``manaCost``,
``attackSpeed``, ``magicResist``); Python attributes use snake_case and are
mapped through aliases. Every field has a zero value, so a payload with
missing keys or ``null`` values still builds a complete model.
"""

from typing import Any, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator


class _Schema(BaseModel):
    """Shared config: strict types, no coercion from strings, finite floats, extra keys ignored."""

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any, info: ValidationInfo) -> Any:
        # JSON keys match aliases case-insensitively; the last matching key wins.
        # A JSON null leaves the zero value in place.
        from_json = info.mode == "json"
        if data is None and from_json:
            return {}
        if not isinstance(data, dict):
            return data
        aliases = {}
        names = set()
        annotations = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias
            names.add(name)
            annotations[alias] = field.annotation

        folded = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            if not from_json and key in names:
                folded[key] = value
                continue
            target = aliases.get(key.lower())
            if target is None:
                continue
            if from_json:
                if value is None:
                    continue
                if isinstance(value, list) and get_args(annotations[target]) == (str,):
                    value = ["" if item is None else item for item in value]
            folded[target] = value
        return folded


class AbilityStat(_Schema):
    """A single display statistic of an ability (e.g. Damage: 350 / 575 / 850)."""

    type: str = Field(default="", description="Kind of statistic, e.g. Damage or Storm Duration")
    value: str = Field(default="", description="Display value, e.g. 500, 5%, 3s")


class Ability(_Schema):
    """Champion ability details."""

    name: str = ""
    description: str = ""
    type: str = Field(default="", description="Active or Passive")
    mana_cost: int = Field(default=0, alias="manaCost")
    mana_start: int = Field(default=0, alias="manaStart")
    stats: list[AbilityStat] = Field(default_factory=list)


class Offense(_Schema):
    """Base offensive statistics."""

    damage: int = 0
    attack_speed: float = Field(default=0.0, alias="attackSpeed", description="Attacks per second")
    # Stored as given, never recomputed from damage * attack_speed.
    dps: int = 0
    range: int = Field(default=0, description="Attack range in hexes")


class Defense(_Schema):
    """Base defensive statistics."""

    health: int = 0
    armor: int = 0
    magic_resist: int = Field(default=0, alias="magicResist")


class ChampionStats(_Schema):
    """Champion base statistics."""

    offense: Offense = Field(default_factory=Offense)
    defense: Defense = Field(default_factory=Defense)


class Champion(_Schema):
    """TFT Champion model."""

    key: str = Field(default="", description="Logical key for this champion")
    name: str = Field(default="", description="Display name")
    origin: list[str] = Field(default_factory=list)
    class_: list[str] = Field(default_factory=list, alias="class")
    cost: int = Field(default=0, description="Gold value")
    ability: Ability = Field(default_factory=Ability)
    stats: ChampionStats = Field(default_factory=ChampionStats)
    items: list[str] = Field(default_factory=list, description="Recommended item keys")
