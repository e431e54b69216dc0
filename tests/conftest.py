from unittest.mock import MagicMock

import pytest

from core.data_models import Mode, Project, Scene, StylePreset


@pytest.fixture
def sample_scene():
    return Scene(
        description="A lone wanderer stands on a rooftop in the rain.",
        action="Looking down at the streets below.",
        mood="Melancholic, contemplative",
        cta="Find your way home",
        camera_angle="High-angle shot, looking down over the shoulder.",
    )


@pytest.fixture
def sample_project(sample_scene):
    return Project(
        id="proj-1",
        name="Rooftop",
        mode=Mode.IMAGE,
        style_preset=StylePreset(name="Cinematic 8K", prompt="hyper-realistic, cinematic 8K, epic"),
        character_scene_cap="A lone wanderer in a futuristic city.",
        is_nsfw=False,
        scenes=[sample_scene],
        generated_prompt="",
    )


@pytest.fixture
def mock_client():
    """A stand-in for google.genai.Client whose generate_content returns padded text."""
    client = MagicMock()
    response = MagicMock()
    response.text = "  Generated response \n"
    client.models.generate_content.return_value = response
    return client
