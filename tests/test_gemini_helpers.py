import pytest

from core.errors import ServiceError
from core.gemini_helpers import (
    CHARACTER_ERROR,
    ENHANCE_ERROR,
    FINAL_PROMPT_ERROR,
    complete_character_description,
    enhance_scene_description,
    gemini_text,
    generate_final_prompt,
)
from core.prompt_builders import compose_final_prompt_request


def _call_kwargs(client):
    assert client.models.generate_content.call_count == 1
    return client.models.generate_content.call_args.kwargs


class TestGeminiText:
    def test_returns_stripped_text(self, mock_client):
        assert gemini_text(mock_client, "sys", "user", 0.5, "oops") == "Generated response"

    def test_sends_instruction_prompt_and_temperature(self, mock_client, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        gemini_text(mock_client, "be brief", "hello", 0.3, "oops")
        kwargs = _call_kwargs(mock_client)
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "hello"
        assert kwargs["config"].system_instruction == "be brief"
        assert kwargs["config"].temperature == 0.3

    def test_model_override_from_env(self, mock_client, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        gemini_text(mock_client, "sys", "user", 0.5, "oops")
        assert _call_kwargs(mock_client)["model"] == "gemini-2.5-pro"

    def test_transport_failure_becomes_service_error(self, mock_client):
        mock_client.models.generate_content.side_effect = ConnectionError("network down")
        with pytest.raises(ServiceError) as exc:
            gemini_text(mock_client, "sys", "user", 0.5, "stage failed")
        assert exc.value.message == "stage failed"
        assert isinstance(exc.value.__cause__, ConnectionError)

    def test_missing_text_becomes_service_error(self, mock_client):
        mock_client.models.generate_content.return_value.text = None
        with pytest.raises(ServiceError):
            gemini_text(mock_client, "sys", "user", 0.5, "stage failed")

    def test_no_client_becomes_service_error(self):
        with pytest.raises(ServiceError) as exc:
            gemini_text(None, "sys", "user", 0.5, "stage failed")
        assert exc.value.message == "stage failed"

    def test_one_call_no_retry(self, mock_client):
        mock_client.models.generate_content.side_effect = TimeoutError()
        with pytest.raises(ServiceError):
            gemini_text(mock_client, "sys", "user", 0.5, "stage failed")
        assert mock_client.models.generate_content.call_count == 1


class TestOperations:
    def test_enhance_uses_its_temperature(self, mock_client):
        assert enhance_scene_description(mock_client, "rainy roof") == "Generated response"
        kwargs = _call_kwargs(mock_client)
        assert kwargs["config"].temperature == 0.8
        assert '"rainy roof"' in kwargs["contents"]

    def test_character_completion_uses_its_temperature(self, mock_client):
        assert complete_character_description(mock_client, "A knight") == "Generated response"
        assert _call_kwargs(mock_client)["config"].temperature == 0.85

    def test_final_prompt_sends_composed_request(self, mock_client, sample_project, sample_scene):
        assert generate_final_prompt(mock_client, sample_project, sample_scene) == "Generated response"
        kwargs = _call_kwargs(mock_client)
        expected = compose_final_prompt_request(sample_project, sample_scene)
        assert kwargs["contents"] == expected.user_prompt
        assert kwargs["config"].system_instruction == expected.instruction
        assert kwargs["config"].temperature == 0.9

    @pytest.mark.parametrize("call, message", [
        (lambda c, p, s: enhance_scene_description(c, "x"), ENHANCE_ERROR),
        (lambda c, p, s: complete_character_description(c, "x"), CHARACTER_ERROR),
        (lambda c, p, s: generate_final_prompt(c, p, s), FINAL_PROMPT_ERROR),
    ])
    def test_each_stage_has_its_own_message(self, mock_client, sample_project, sample_scene, call, message):
        mock_client.models.generate_content.side_effect = PermissionError("401")
        with pytest.raises(ServiceError) as exc:
            call(mock_client, sample_project, sample_scene)
        assert exc.value.message == message

    def test_stage_messages_are_distinct(self):
        assert len({ENHANCE_ERROR, CHARACTER_ERROR, FINAL_PROMPT_ERROR}) == 3
