"""
DiceBear fallback - deterministic avatar URLs, no network call involved.
"""
import re

import httpx

from .models import Blueprint


DICEBEAR_ENDPOINT = "https://api.dicebear.com/7.x/adventurer/png"
ACCESSORIES_PROBABILITY = 80

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def background_color_param(club_colors: list[str]) -> str:
    """Club colors as a comma separated list of bare hex values."""
    colors = (_NON_HEX.sub("", color) for color in club_colors)
    return ",".join(c for c in colors if c)


def build_fallback_urls(blueprint: Blueprint, count: int, seed: int) -> list[str]:
    """
    One avatar URL per image, seeded with seed, seed + 1, ...

    Args:
        blueprint: Effective blueprint (supplies the background colors)
        count: Number of URLs
        seed: Base seed of the request

    Returns:
        Exactly `count` URLs
    """
    background = background_color_param(blueprint.club_colors)
    urls = []
    for index in range(count):
        params = {
            "seed": str(seed + index),
            "backgroundColor": background,
            "accessoriesProbability": str(ACCESSORIES_PROBABILITY),
        }
        urls.append(str(httpx.URL(DICEBEAR_ENDPOINT, params=params)))
    return urls
