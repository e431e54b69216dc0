# -*- coding: utf-8 -*-
"""
Centralized preset catalogs for Prompt Studio.

STYLE_PRESETS are copied by value into a Project, so editing this table
never changes projects that were already saved.
CHARACTER_PRESETS only prefill the characters & setting overview (CAP).
"""
from typing import Dict, Tuple

from core.data_models import StylePreset

STYLE_PRESETS: Tuple[StylePreset, ...] = (
    StylePreset(name="Cinematic 8K", prompt="hyper-realistic, cinematic 8K, professional color grading, clean, sharp focus, epic"),
    StylePreset(name="Anime Key Visual", prompt="vibrant anime style, key visual, detailed characters, dynamic composition, Makoto Shinkai inspired"),
    StylePreset(name="Cyberpunk Noir", prompt="cyberpunk aesthetic, neon-drenched, rainy night, high-tech low-life, Blade Runner influence, noir"),
    StylePreset(name="Fantasy Painting", prompt="epic fantasy, digital painting, high detail, matte painting, concept art, Lord of the Rings style"),
    StylePreset(name="80s Retro Film", prompt="80s retro film look, grain, analog style, vibrant synthwave colors, nostalgic"),
    StylePreset(name="Minimal Vector", prompt="clean vector art, minimalist, flat design, bold colors, graphic illustration"),
    StylePreset(name="Documentary Still", prompt="realistic documentary photo, natural lighting, candid shot, National Geographic style, 35mm film"),
    StylePreset(name="Pixel Art", prompt="8-bit pixel art, retro game style, limited color palette, chunky pixels"),
)

STYLE_PRESETS_BY_NAME: Dict[str, StylePreset] = {p.name: p for p in STYLE_PRESETS}

CHARACTER_PLACEHOLDER = "Choose a template..."

# Insertion order is the order shown in the picker.
CHARACTER_PRESETS: Dict[str, str] = {
    CHARACTER_PLACEHOLDER: "",
    "Femme Fatale": (
        "A strikingly beautiful woman of mixed Korean, Japanese and Taiwanese heritage, porcelain skin, "
        "in a fitted flame-red dress that accentuates her curves, full lips, sharp eyes holding a mysterious glint"
    ),
    "Ancient Warrior": (
        "A young ancient warrior, heavily muscled, a battle scar across his face, "
        "wearing weathered leather armor from countless campaigns, eyes as sharp as a hawk's"
    ),
    "Cyberpunk Detective": (
        "A private detective in a cyberpunk world, wearing a long rain coat, a cybernetic eye that scans data, "
        "standing amid neon lights and drizzling rain in a megacity of the future"
    ),
    "Forest Witch": (
        "A young witch in an enchanted forest, long flowing silver hair, a dark green cloak embroidered with vines, "
        "casting a spell that wreathes her in a soft glow"
    ),
    "Lonely Astronaut": (
        "An astronaut drifting in the silence of space, gazing at colorful nebulae through the helmet visor, "
        "eyes reflecting the loneliness and vastness of the universe"
    ),
}


def find_style_preset(name: str) -> StylePreset:
    """Look up a style preset by display name; unknown names get the first entry."""
    return STYLE_PRESETS_BY_NAME.get(name, STYLE_PRESETS[0])


def character_preset_text(name: str) -> str:
    """Return the CAP text for a character preset, "" for the placeholder or unknown names."""
    return CHARACTER_PRESETS.get(name, "")
