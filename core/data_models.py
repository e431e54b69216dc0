import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Mode(str, Enum):
    IMAGE = "Image"
    VIDEO = "Video"
    STORY = "Story"


# JSON keys stay camelCase (characterSceneCap, isNsfw...); attributes are snake_case.
_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


class StylePreset(BaseModel):
    model_config = ConfigDict(**_MODEL_CONFIG, frozen=True)

    name: str
    prompt: str


class Scene(BaseModel):
    model_config = _MODEL_CONFIG

    description: str
    action: str
    mood: str
    cta: str
    camera_angle: str

    @classmethod
    def blank(cls) -> "Scene":
        return cls(description="", action="", mood="", cta="", camera_angle="")


class Project(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    name: str
    mode: Mode
    style_preset: StylePreset
    character_scene_cap: str
    is_nsfw: bool
    scenes: List[Scene] = Field(min_length=1)
    generated_prompt: Optional[str] = None


def new_project(name: str = "My Awesome Project") -> Project:
    """Starter project shown on first open: one example scene, first style preset."""
    from core.presets import STYLE_PRESETS

    return Project(
        id=uuid.uuid4().hex,
        name=name,
        mode=Mode.IMAGE,
        style_preset=STYLE_PRESETS[0],
        character_scene_cap="A lone wanderer in a futuristic city.",
        is_nsfw=False,
        scenes=[
            Scene(
                description="The wanderer stands on a rooftop overlooking the neon-lit city at night, rain pouring down.",
                action="Looking down at the streets below.",
                mood="Melancholic, contemplative",
                cta="",
                camera_angle="High-angle shot, looking down over the shoulder.",
            )
        ],
        generated_prompt="",
    )
