"""
Player blueprints - seeded generation, override merging and prompt text.
"""
import random
from typing import Any, Dict, List, Optional

from loguru import logger

from .models import Blueprint


# ============================================
# ATTRIBUTE POOLS
# ============================================

POSITIONS = [
    "Goalkeeper", "Centre-Back", "Full-Back", "Defensive Midfielder",
    "Central Midfielder", "Attacking Midfielder", "Winger", "Striker",
]
DOMINANT_FEET = ["Left", "Right", "Both"]
NATIONALITIES = [
    "Brazilian", "Argentine", "French", "Spanish", "English", "German",
    "Portuguese", "Dutch", "Italian", "Nigerian", "Senegalese", "Japanese",
    "Korean", "Mexican", "American", "Moroccan", "Croatian", "Uruguayan",
]
PLAYING_STYLES = [
    "Box-to-box engine", "Deep-lying playmaker", "Inverted winger",
    "Target man", "Ball-playing defender", "Sweeper keeper",
    "Pressing forward", "Overlapping full-back", "Poacher",
]
CLUB_COLOR_SETS = [
    ["#D7263D", "#FFFFFF"],
    ["#1B998B", "#2E294E"],
    ["#0B3D91", "#FFD400"],
    ["#000000", "#F4F4F4"],
    ["#6A0DAD", "#FFC0CB"],
    ["#FF6B35", "#004E89"],
    ["#2D6A4F", "#D8F3DC"],
    ["#8B0000", "#87CEEB"],
]
HAIRSTYLES = [
    "buzz cut", "curly top", "man bun", "braids", "slicked back",
    "mohawk", "afro", "undercut", "shoulder-length waves",
]
FACIAL_HAIR = ["clean shaven", "stubble", "full beard", "goatee", "moustache"]
ACCESSORIES = ["headband", "captain armband", "wristband", "gloves", "snood", "tinted visor"]
KIT_PATTERNS = ["solid", "vertical stripes", "hoops", "sash", "halves", "gradient", "pinstripes"]
KIT_STYLES = ["classic collar", "modern v-neck", "retro crew neck", "long sleeve"]
BOOT_COLORS = ["black", "white", "neon yellow", "electric blue", "crimson", "gold"]
PERSONALITY_TRAITS = [
    "fearless", "composed", "charismatic", "relentless", "creative",
    "disciplined", "flamboyant", "humble", "vocal leader", "clutch",
]
FIRST_NAMES = [
    "Luca", "Mateo", "Kai", "Ousmane", "Rafael", "Theo", "Jonas", "Hiro",
    "Diego", "Emeka", "Milan", "Noah", "Santi", "Yusuf", "Bruno", "Leo",
]
LAST_NAMES = [
    "Moreau", "Silva", "Okafor", "Tanaka", "Varga", "Costa", "Becker",
    "Alvarez", "Diallo", "Romero", "Kim", "Jansen", "Rossi", "Haddad",
]

MIN_AGE = 17
MAX_AGE = 38

NEGATIVE_PROMPT = "distorted, low resolution, text artifacts, watermark, photo frame"
IMAGE_DIMENSIONS = "1024x1024"
PROMPT_SUFFIX = "cinematic lighting, 8k, high fidelity, sports photography, bokeh"

_SCALAR_FIELDS = ("id", "name", "position", "dominantFoot", "nationality", "age", "playingStyle")
_LIST_FIELDS = ("clubColors", "personality")


def make_player_blueprint(seed: int) -> Blueprint:
    """
    Build a blueprint deterministically from a seed.

    The same seed always yields the same blueprint.
    """
    rng = random.Random(seed)
    return Blueprint.from_dict({
        "id": f"player-{seed}",
        "name": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        "position": rng.choice(POSITIONS),
        "dominantFoot": rng.choice(DOMINANT_FEET),
        "nationality": rng.choice(NATIONALITIES),
        "age": rng.randint(MIN_AGE, MAX_AGE),
        "playingStyle": rng.choice(PLAYING_STYLES),
        "clubColors": list(rng.choice(CLUB_COLOR_SETS)),
        "appearance": {
            "hairstyle": rng.choice(HAIRSTYLES),
            "facialHair": rng.choice(FACIAL_HAIR),
            "accessories": rng.sample(ACCESSORIES, rng.randint(0, 2)),
        },
        "attire": {
            "pattern": rng.choice(KIT_PATTERNS),
            "kitStyle": rng.choice(KIT_STYLES),
            "bootColor": rng.choice(BOOT_COLORS),
        },
        "personality": rng.sample(PERSONALITY_TRAITS, 3),
    })


def _as_list(value: Any) -> Optional[List[str]]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return None


def merge_blueprint(base: Blueprint, overrides: Optional[Dict[str, Any]] = None) -> Blueprint:
    """
    Deep-merge caller overrides (camelCase keys) into a base blueprint.

    - Scalar and list fields are replaced when present and not None
    - A bare string for a list field counts as a one-item list
    - appearance and attire are merged field by field
    - accessories only replaced by a non-empty list
    - Values of the wrong type are logged and ignored

    Args:
        base: Seed-derived blueprint
        overrides: Partial blueprint dict; None or {} leaves base unchanged

    Returns:
        New Blueprint (base is not modified)
    """
    merged = base.to_dict()
    if not overrides:
        return Blueprint.from_dict(merged)

    for key in _SCALAR_FIELDS:
        value = overrides.get(key)
        if value is None:
            continue
        if key == "age":
            try:
                value = int(value)
            except (TypeError, ValueError):
                logger.warning(f"Ignoring invalid blueprint age: {value!r}")
                continue
        elif not isinstance(value, str):
            logger.warning(f"Ignoring non-string blueprint field {key}: {value!r}")
            continue
        merged[key] = value

    for key in _LIST_FIELDS:
        value = overrides.get(key)
        if value is None:
            continue
        values = _as_list(value)
        if values is None:
            logger.warning(f"Ignoring non-list blueprint field {key}: {value!r}")
            continue
        merged[key] = values

    for section in ("appearance", "attire"):
        nested = overrides.get(section)
        if nested is None:
            continue
        if not isinstance(nested, dict):
            logger.warning(f"Ignoring non-object blueprint field {section}: {nested!r}")
            continue
        for key, value in nested.items():
            if key not in merged[section] or key == "accessories" or value is None:
                continue
            if not isinstance(value, str):
                logger.warning(f"Ignoring non-string blueprint field {section}.{key}: {value!r}")
                continue
            merged[section][key] = value

    appearance = overrides.get("appearance")
    if isinstance(appearance, dict) and appearance.get("accessories"):
        accessories = _as_list(appearance["accessories"])
        if accessories:
            merged["appearance"]["accessories"] = accessories
        else:
            logger.warning(f"Ignoring non-list accessories: {appearance['accessories']!r}")

    unknown = set(overrides) - set(merged)
    if unknown:
        logger.debug(f"Ignoring unknown blueprint fields: {sorted(unknown)}")

    return Blueprint.from_dict(merged)


def build_prompt(blueprint: Blueprint) -> str:
    """Descriptive prompt for the primary provider, in a fixed order."""
    accessories = ", ".join(blueprint.appearance.accessories) or "none"
    return ", ".join([
        f"ultra detailed portrait of a fictional {blueprint.nationality} {blueprint.position}",
        f"age {blueprint.age}, {blueprint.dominant_foot.lower()} footed player",
        f"wearing {blueprint.attire.pattern} kit in {' and '.join(blueprint.club_colors)}",
        f"hairstyle: {blueprint.appearance.hairstyle}, facial hair: {blueprint.appearance.facial_hair}",
        f"accessories: {accessories}",
        f"personality: {', '.join(blueprint.personality)}",
        f"playing style: {blueprint.playing_style}",
        PROMPT_SUFFIX,
    ])
