# Data Loaders
from .champion_loader import (
    MalformedChampionError,
    encode_champion,
    decode_champion,
    decode_champion_lenient,
)

__all__ = [
    "MalformedChampionError",
    "encode_champion",
    "decode_champion",
    "decode_champion_lenient",
]
