import logging

from core.data_models import Project, Scene
from core.env_loader import get_model_name
from core.errors import ServiceError
from core.prompt_builders import (
    compose_character_completion_request,
    compose_enhance_request,
    compose_final_prompt_request,
)

ENHANCE_TEMPERATURE = 0.8
CHARACTER_TEMPERATURE = 0.85
FINAL_PROMPT_TEMPERATURE = 0.9

ENHANCE_ERROR = "Failed to enhance scene description."
CHARACTER_ERROR = "Failed to complete character description."
FINAL_PROMPT_ERROR = "Failed to generate prompt. Please check your API key and connection."

logger = logging.getLogger(__name__)


def gemini_text(client, instruction: str, user_prompt: str, temperature: float, error_message: str) -> str:
    """
    One generate_content call; returns the stripped response text.
    Any failure (no client, transport, auth, empty response) becomes ServiceError(error_message).
    """
    if client is None:
        logger.error("%s Gemini client is not initialised (missing API key?)", error_message)
        raise ServiceError(error_message)
    from google.genai import types

    try:
        resp = client.models.generate_content(
            model=get_model_name(),
            contents=user_prompt,
            config=types.GenerateContentConfig(
                system_instruction=instruction,
                temperature=temperature,
            ),
        )
        text = resp.text
    except Exception as e:
        logger.exception("Gemini call failed: %s", error_message)
        raise ServiceError(error_message) from e

    if not isinstance(text, str):
        logger.error("Gemini response carried no text: %s", error_message)
        raise ServiceError(error_message)
    return text.strip()


def enhance_scene_description(client, brief: str) -> str:
    req = compose_enhance_request(brief)
    return gemini_text(client, req.instruction, req.user_prompt, ENHANCE_TEMPERATURE, ENHANCE_ERROR)


def complete_character_description(client, current_text: str) -> str:
    """Return only the continuation; the caller appends it with text_utils.append_completion."""
    req = compose_character_completion_request(current_text)
    return gemini_text(client, req.instruction, req.user_prompt, CHARACTER_TEMPERATURE, CHARACTER_ERROR)


def generate_final_prompt(client, project: Project, scene: Scene) -> str:
    req = compose_final_prompt_request(project, scene)
    return gemini_text(client, req.instruction, req.user_prompt, FINAL_PROMPT_TEMPERATURE, FINAL_PROMPT_ERROR)
