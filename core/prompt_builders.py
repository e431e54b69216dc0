# -*- coding: utf-8 -*-
"""
Request composers for the three Gemini operations.

Pure string assembly, no network access. Each builder returns a
PromptRequest whose instruction goes out as the system instruction
and whose user_prompt goes out as the user turn.
"""
from typing import NamedTuple

from core.data_models import Mode, Project, Scene

MODE_DESCRIPTIONS = {
    Mode.IMAGE: "still-image generation",
    Mode.VIDEO: "video generation",
    Mode.STORY: "narrative writing",
}

NSFW_INSTRUCTION = (
    "The theme is mature and intended for an adult audience. Incorporate elements that are "
    "suggestive, dark, or provocative as appropriate for the narrative, while respecting creative boundaries."
)

ENHANCE_INSTRUCTION = (
    "You are a world-class creative director and scriptwriter. Your task is to take a user's brief "
    "scene idea and expand it into a rich, vivid, and highly detailed cinematic description. Focus on "
    "sensory details, atmosphere, lighting, camera movement hints, and character emotion. The output "
    "should be a single, well-written paragraph that can be used directly in a professional script or "
    "as a foundation for an AI image generator prompt. Do not add any conversational text or labels. "
    "Only output the enhanced description."
)

CHARACTER_INSTRUCTION = (
    "You are a master character designer and creative writer for Hollywood films. A user will provide "
    "a character or setting concept. Your task is to expand upon it with vivid, evocative, and "
    "professional-level details. Focus on appearance, attire, posture, expression, and subtle hints "
    "about their personality or backstory that bring them to life. The output should seamlessly "
    "continue or enrich the user's input. Only provide the additional descriptive text that completes "
    "the idea. Do NOT repeat the user's original text. Do not add conversational fluff or labels like "
    "\"Here is the expanded description:\". If the user input is 'A stunning, seductive woman', a great "
    "continuation would be 'in a sleek jet-black bodycon dress that traces every curve, full lips "
    "glossed in vivid red, sharp eyes holding a mysterious, inviting glint'."
)


class PromptRequest(NamedTuple):
    instruction: str
    user_prompt: str


def compose_enhance_request(brief: str) -> PromptRequest:
    """
    Expand a brief scene idea into one cinematic paragraph.
    An empty brief is accepted here; the UI decides whether to send it.
    """
    return PromptRequest(ENHANCE_INSTRUCTION, f'Enhance this scene idea: "{brief}"')


def compose_character_completion_request(current_text: str) -> PromptRequest:
    """
    Ask for a continuation of the CAP text. The reply is appended to
    current_text (see text_utils.append_completion), never substituted.
    """
    return PromptRequest(
        CHARACTER_INSTRUCTION,
        f'Based on this concept, continue and expand the description: "{current_text}"',
    )


def compose_final_prompt_request(project: Project, scene: Scene) -> PromptRequest:
    """
    Build the final prompt request for the active scene.
    Every header is always rendered; empty fields stay as empty segments.
    """
    mode_description = MODE_DESCRIPTIONS[project.mode]
    nsfw_instruction = NSFW_INSTRUCTION if project.is_nsfw else ""
    preset = project.style_preset

    instruction = (
        "You are an expert Hollywood scriptwriter and AI prompt engineer. Your task is to generate a "
        f"single, highly detailed, and evocative prompt for AI {mode_description}. Combine all the "
        "provided elements into a cohesive, vivid, and long-form paragraph. The prompt should be a "
        "masterpiece of descriptive language, ready to produce a stunning visual or narrative. "
        "Do not output anything other than the final prompt."
    )

    user_prompt = f"""
**Style & Tone:**
- Style Preset: {preset.name} ({preset.prompt})
- Mood: {scene.mood}

**Cinematography:**
- Camera: {scene.camera_angle}

**Core Elements:**
- Main Characters & Setting Overview (CAP): {project.character_scene_cap}
- Specific Scene Description: {scene.description}
- Key Action in Scene: {scene.action}

**Additional Context:**
- Call to Action (if applicable, subtly integrate its theme): {scene.cta}
- Maturity Level: {nsfw_instruction}

**Task:**
Synthesize these details into one single, powerful, descriptive paragraph. Paint a picture with words. Focus on visual details, lighting, atmosphere, character emotion, and composition. The final output must be only the prompt itself.
""".strip()

    return PromptRequest(instruction, user_prompt)
