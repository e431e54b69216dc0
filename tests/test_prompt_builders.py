import pytest

from core.data_models import Mode, Project, Scene, StylePreset
from core.prompt_builders import (
    MODE_DESCRIPTIONS,
    NSFW_INSTRUCTION,
    PromptRequest,
    compose_character_completion_request,
    compose_enhance_request,
    compose_final_prompt_request,
)

HEADERS = [
    "- Style Preset:",
    "- Mood:",
    "- Camera:",
    "- Main Characters & Setting Overview (CAP):",
    "- Specific Scene Description:",
    "- Key Action in Scene:",
    "- Call to Action (if applicable, subtly integrate its theme):",
    "- Maturity Level:",
]


class TestEnhanceRequest:
    def test_brief_embedded_verbatim_in_quotes(self):
        req = compose_enhance_request("a cat on a neon roof")
        assert isinstance(req, PromptRequest)
        assert req.user_prompt == 'Enhance this scene idea: "a cat on a neon roof"'

    def test_instruction_asks_for_single_unlabelled_paragraph(self):
        instruction = compose_enhance_request("x").instruction
        assert "single, well-written paragraph" in instruction
        assert "Do not add any conversational text or labels" in instruction

    def test_empty_brief_is_allowed(self):
        assert compose_enhance_request("").user_prompt == 'Enhance this scene idea: ""'


class TestCharacterCompletionRequest:
    def test_current_text_embedded(self):
        req = compose_character_completion_request("A tired detective")
        assert '"A tired detective"' in req.user_prompt
        assert req.user_prompt.startswith("Based on this concept, continue and expand the description")

    def test_instruction_demands_continuation_not_repetition(self):
        instruction = compose_character_completion_request("x").instruction
        assert "Do NOT repeat the user's original text" in instruction
        assert "a great continuation would be" in instruction


class TestFinalPromptRequest:
    def test_scenario_image_mode_contains_literal_values(self):
        project = Project(
            id="1",
            name="Scenario",
            mode=Mode.IMAGE,
            style_preset=StylePreset(name="Cinematic 8K", prompt="hyper-realistic..."),
            character_scene_cap="",
            is_nsfw=False,
            scenes=[Scene(description="A lone wanderer...", action="", mood="", cta="", camera_angle="High-angle shot...")],
        )
        req = compose_final_prompt_request(project, project.scenes[0])
        assert "A lone wanderer..." in req.user_prompt
        assert "High-angle shot..." in req.user_prompt
        assert "hyper-realistic..." in req.user_prompt

    def test_every_field_value_present(self, sample_project, sample_scene):
        req = compose_final_prompt_request(sample_project, sample_scene)
        for value in [
            sample_scene.description, sample_scene.action, sample_scene.mood,
            sample_scene.cta, sample_scene.camera_angle,
            sample_project.character_scene_cap,
            sample_project.style_preset.name, sample_project.style_preset.prompt,
        ]:
            assert value in req.user_prompt

    @pytest.mark.parametrize("mode", list(Mode))
    def test_mode_phrase_in_instruction(self, sample_project, sample_scene, mode):
        project = sample_project.model_copy(update={"mode": mode})
        req = compose_final_prompt_request(project, sample_scene)
        assert MODE_DESCRIPTIONS[mode] in req.instruction
        others = [d for m, d in MODE_DESCRIPTIONS.items() if m is not mode]
        assert not any(d in req.instruction for d in others)

    def test_mode_table_is_closed(self):
        assert MODE_DESCRIPTIONS == {
            Mode.IMAGE: "still-image generation",
            Mode.VIDEO: "video generation",
            Mode.STORY: "narrative writing",
        }

    def test_maturity_clause_absent_when_not_nsfw(self, sample_project, sample_scene):
        req = compose_final_prompt_request(sample_project, sample_scene)
        assert "mature" not in req.user_prompt
        assert "adult audience" not in req.user_prompt

    def test_maturity_clause_whole_when_nsfw(self, sample_project, sample_scene):
        project = sample_project.model_copy(update={"is_nsfw": True})
        req = compose_final_prompt_request(project, sample_scene)
        assert f"- Maturity Level: {NSFW_INSTRUCTION}" in req.user_prompt

    def test_empty_fields_keep_their_headers(self, sample_project):
        blank = Scene.blank()
        project = sample_project.model_copy(update={"character_scene_cap": "", "scenes": [blank]})
        req = compose_final_prompt_request(project, blank)
        for header in HEADERS:
            assert header in req.user_prompt
        assert "- Specific Scene Description: \n" in req.user_prompt

    def test_pure_and_deterministic(self, sample_project, sample_scene):
        before = sample_project.model_dump()
        first = compose_final_prompt_request(sample_project, sample_scene)
        second = compose_final_prompt_request(sample_project, sample_scene)
        assert first == second
        assert sample_project.model_dump() == before
