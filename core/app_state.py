# -*- coding: utf-8 -*-
"""
Explicit UI state and the reducers that update it.

Reducers are pure: they take an AppState and return a new one, leaving the
input (and the Project it holds) untouched. Projects and scenes are
replaced field by field with model_copy, never mutated in place.
"""
from concurrent.futures import Future, wait
from typing import Any, Callable, Optional

from pydantic import BaseModel

from core.data_models import Project, Scene, new_project
from core.presets import character_preset_text, find_style_preset
from core.text_utils import append_completion

STATUS_ROTATE_SEC = 2.5

LOADING_MESSAGES = (
    "Consulting with script doctors...",
    "Lighting the set...",
    "Rolling camera...",
    "Crafting the perfect shot...",
    "And... action!",
)

# Operations that talk to Gemini; at most one is in flight per UI instance.
OPERATIONS = ("generating", "enhancing", "completing_character")

PROJECT_FIELDS = ("name", "mode", "style_preset", "character_scene_cap", "is_nsfw", "generated_prompt")
SCENE_FIELDS = ("description", "action", "mood", "cta", "camera_angle")


class AppState(BaseModel):
    project: Project
    active_scene_index: int = 0
    generating: bool = False
    enhancing: bool = False
    completing_character: bool = False
    error: Optional[str] = None
    status_index: int = 0
    # Bumped whenever the project changes behind the widgets' back (load, AI results,
    # scene add/remove) so Streamlit builds fresh widgets from the new values.
    revision: int = 0

    @property
    def active_scene(self) -> Scene:
        return self.project.scenes[self.active_scene_index]

    @property
    def busy(self) -> bool:
        return self.generating or self.enhancing or self.completing_character

    @property
    def status_message(self) -> str:
        return LOADING_MESSAGES[self.status_index % len(LOADING_MESSAGES)]


def initial_state(project: Optional[Project] = None) -> AppState:
    return AppState(project=project or new_project())


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length - 1))


def _with_project(state: AppState, project: Project, **changes) -> AppState:
    index = _clamp(changes.pop("active_scene_index", state.active_scene_index), len(project.scenes))
    return state.model_copy(update={"project": project, "active_scene_index": index, **changes})


# ---- project / scene edits ----

def set_project_field(state: AppState, field: str, value: Any) -> AppState:
    if field not in PROJECT_FIELDS:
        raise KeyError(f"Unknown project field: {field}")
    return _with_project(state, state.project.model_copy(update={field: value}))


def select_style_preset(state: AppState, name: str) -> AppState:
    return set_project_field(state, "style_preset", find_style_preset(name))


def apply_character_preset(state: AppState, name: str) -> AppState:
    """Replace the CAP with a character preset; the placeholder entry changes nothing."""
    text = character_preset_text(name)
    if not text:
        return state
    new_state = set_project_field(state, "character_scene_cap", text)
    return new_state.model_copy(update={"revision": state.revision + 1})


def set_scene_field(state: AppState, index: int, field: str, value: str) -> AppState:
    if field not in SCENE_FIELDS:
        raise KeyError(f"Unknown scene field: {field}")
    scenes = list(state.project.scenes)
    scenes[index] = scenes[index].model_copy(update={field: value})
    return _with_project(state, state.project.model_copy(update={"scenes": scenes}))


def add_scene(state: AppState) -> AppState:
    """Append a blank scene and make it active."""
    scenes = [*state.project.scenes, Scene.blank()]
    return _with_project(
        state,
        state.project.model_copy(update={"scenes": scenes}),
        active_scene_index=len(scenes) - 1,
        revision=state.revision + 1,
    )


def remove_scene(state: AppState, index: int) -> AppState:
    """Drop a scene; a no-op when only one scene is left."""
    scenes = state.project.scenes
    if len(scenes) <= 1 or not 0 <= index < len(scenes):
        return state
    remaining = [s for i, s in enumerate(scenes) if i != index]
    active = state.active_scene_index
    if active >= index:
        active = max(0, active - 1)
    return _with_project(
        state,
        state.project.model_copy(update={"scenes": remaining}),
        active_scene_index=active,
        revision=state.revision + 1,
    )


def select_scene(state: AppState, index: int) -> AppState:
    return state.model_copy(update={"active_scene_index": _clamp(index, len(state.project.scenes))})


# ---- in-flight operations ----

def start_operation(state: AppState, operation: str) -> AppState:
    """Set the in-flight flag and clear the error banner for a new attempt."""
    if operation not in OPERATIONS:
        raise KeyError(f"Unknown operation: {operation}")
    return state.model_copy(update={operation: True, "error": None})


def finish_operation(state: AppState, operation: str) -> AppState:
    if operation not in OPERATIONS:
        raise KeyError(f"Unknown operation: {operation}")
    return state.model_copy(update={operation: False})


def next_status_message(state: AppState) -> AppState:
    return state.model_copy(update={"status_index": (state.status_index + 1) % len(LOADING_MESSAGES)})


def rotate_while_pending(
    future: Future, state: AppState, show: Callable[[str], Any], interval: float = STATUS_ROTATE_SEC
) -> AppState:
    """
    Show the current status line, then move to the next one every `interval`
    seconds until `future` settles. Returns the state with the last index shown.
    """
    while True:
        show(state.status_message)
        done, _ = wait([future], timeout=interval)
        if done:
            return state
        state = next_status_message(state)


def set_error(state: AppState, message: Optional[str]) -> AppState:
    return state.model_copy(update={"error": message})


# ---- results written back into the project ----

def apply_enhanced_description(state: AppState, index: int, text: str) -> AppState:
    new_state = set_scene_field(state, index, "description", text)
    return new_state.model_copy(update={"revision": state.revision + 1})


def apply_character_completion(state: AppState, completion: str) -> AppState:
    cap = append_completion(state.project.character_scene_cap, completion)
    new_state = set_project_field(state, "character_scene_cap", cap)
    return new_state.model_copy(update={"revision": state.revision + 1})


def apply_generated_prompt(state: AppState, text: str) -> AppState:
    return set_project_field(state, "generated_prompt", text)


def apply_loaded_project(state: AppState, project: Project) -> AppState:
    """Swap in a loaded project: first scene active, error banner cleared."""
    return _with_project(
        state,
        project,
        active_scene_index=0,
        error=None,
        revision=state.revision + 1,
    )
