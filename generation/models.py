"""
Data models for player image generation.

Blueprints travel over the API in camelCase, so to_dict/from_dict use
the wire names (dominantFoot, clubColors, facialHair, ...).
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


MIN_IMAGES = 1
MAX_IMAGES = 6
DEFAULT_IMAGES = 3
MAX_SEED = 1_000_000


class ProviderTag(str, Enum):
    """Which path produced a generation result."""
    PRIMARY = "replicate"                 # primary provider succeeded
    FALLBACK_DEFAULT = "dicebear-fallback"   # no primary credential configured
    FALLBACK_DEGRADED = "dicebear-degraded"  # primary provider failed


class PredictionStatus(str, Enum):
    """Lifecycle of a provider prediction job."""
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (PredictionStatus.SUCCEEDED, PredictionStatus.FAILED, PredictionStatus.CANCELED)


@dataclass
class Appearance:
    """Physical look of the player."""
    hairstyle: str
    facial_hair: str
    accessories: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hairstyle": self.hairstyle,
            "facialHair": self.facial_hair,
            "accessories": list(self.accessories),
        }


@dataclass
class Attire:
    """Kit details."""
    pattern: str
    kit_style: str
    boot_color: str

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern,
            "kitStyle": self.kit_style,
            "bootColor": self.boot_color,
        }


@dataclass
class Blueprint:
    """Full creative description of a player for an image batch."""
    id: str
    name: str
    position: str
    dominant_foot: str
    nationality: str
    age: int
    playing_style: str
    club_colors: List[str]
    appearance: Appearance
    attire: Attire
    personality: List[str]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "dominantFoot": self.dominant_foot,
            "nationality": self.nationality,
            "age": self.age,
            "playingStyle": self.playing_style,
            "clubColors": list(self.club_colors),
            "appearance": self.appearance.to_dict(),
            "attire": self.attire.to_dict(),
            "personality": list(self.personality),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Blueprint":
        appearance = data["appearance"]
        attire = data["attire"]
        return cls(
            id=str(data["id"]),
            name=data["name"],
            position=data["position"],
            dominant_foot=data["dominantFoot"],
            nationality=data["nationality"],
            age=int(data["age"]),
            playing_style=data["playingStyle"],
            club_colors=list(data["clubColors"]),
            appearance=Appearance(
                hairstyle=appearance["hairstyle"],
                facial_hair=appearance["facialHair"],
                accessories=list(appearance.get("accessories") or []),
            ),
            attire=Attire(
                pattern=attire["pattern"],
                kit_style=attire["kitStyle"],
                boot_color=attire["bootColor"],
            ),
            personality=list(data["personality"]),
        )


@dataclass
class GenerationRequest:
    """
    One call to the generation operation.

    A missing seed is drawn at random; image_count is clamped to [1, 6].
    """
    seed: Optional[int] = None
    attribute_overrides: Dict[str, Any] = field(default_factory=dict)
    image_count: Optional[int] = DEFAULT_IMAGES

    def __post_init__(self):
        if self.seed is None:
            self.seed = random.randrange(MAX_SEED)
        self.seed = int(self.seed)
        count = DEFAULT_IMAGES if self.image_count is None else int(self.image_count)
        self.image_count = min(max(count, MIN_IMAGES), MAX_IMAGES)
        self.attribute_overrides = self.attribute_overrides or {}


@dataclass
class GenerationResult:
    """Uniform result of the generation operation."""
    blueprint: Blueprint
    images: List[str]
    provider: ProviderTag
    seed: int
    prediction_id: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "blueprint": self.blueprint.to_dict(),
            "images": list(self.images),
            "provider": self.provider.value,
            "seed": self.seed,
        }
        if self.prediction_id:
            result["predictionId"] = self.prediction_id
        return result


@dataclass
class PredictionJob:
    """Provider-side job as last observed. Transient."""
    id: str
    status: PredictionStatus
    output: Optional[List[str]] = None
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PredictionJob":
        """
        Build from a provider JSON payload.

        Unknown status strings are treated as still processing; a single
        string output is wrapped in a list. Any other output shape counts
        as no images.
        """
        try:
            status = PredictionStatus(payload.get("status"))
        except ValueError:
            status = PredictionStatus.PROCESSING

        output = payload.get("output")
        if isinstance(output, str):
            output = [output]
        elif isinstance(output, list):
            output = [item for item in output if isinstance(item, str) and item]
        elif output is not None:
            output = []

        error = payload.get("error")
        return cls(
            id=str(payload.get("id", "")),
            status=status,
            output=output,
            error=str(error) if error else None,
        )
