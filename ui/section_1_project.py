import streamlit as st

from core.app_state import (
    apply_character_completion, apply_character_preset, finish_operation,
    select_style_preset, set_error, set_project_field, start_operation,
)
from core.data_models import Mode
from core.errors import ServiceError
from core.gemini_helpers import complete_character_description
from core.presets import STYLE_PRESETS, CHARACTER_PRESETS, CHARACTER_PLACEHOLDER
from ui.session import get_state, dispatch


def _on_character_preset():
    name = st.session_state.get("character_preset_pick", CHARACTER_PLACEHOLDER)
    dispatch(apply_character_preset, name)
    st.session_state.character_preset_pick = CHARACTER_PLACEHOLDER


def render_section_1(client):
    st.header("1) Project Settings")

    state = get_state()
    proj = state.project
    rev = state.revision

    name = st.text_input("Project Name", value=proj.name, key=f"proj_name_{rev}")
    if name != proj.name:
        dispatch(set_project_field, "name", name)

    modes = list(Mode)
    mode = st.radio(
        "Mode", modes, index=modes.index(proj.mode), horizontal=True,
        format_func=lambda m: m.value, key=f"proj_mode_{rev}",
    )
    if mode != proj.mode:
        dispatch(set_project_field, "mode", mode)

    # Loaded projects may carry a preset that is no longer in the catalog: show it as-is.
    preset_names = [p.name for p in STYLE_PRESETS]
    if proj.style_preset.name not in preset_names:
        preset_names.insert(0, proj.style_preset.name)
    style_name = st.selectbox(
        "Style Preset", preset_names,
        index=preset_names.index(proj.style_preset.name), key=f"proj_style_{rev}",
    )
    if style_name != proj.style_preset.name:
        dispatch(select_style_preset, style_name)

    is_nsfw = st.toggle("Mature theme (18+)", value=proj.is_nsfw, key=f"proj_nsfw_{rev}")
    if is_nsfw != proj.is_nsfw:
        dispatch(set_project_field, "is_nsfw", is_nsfw)

    st.selectbox(
        "Characters & Setting Overview",
        list(CHARACTER_PRESETS.keys()),
        key="character_preset_pick",
        on_change=_on_character_preset,
    )
    cap = st.text_area(
        "Characters & Setting Overview (CAP)",
        value=proj.character_scene_cap,
        height=110,
        placeholder="e.g., A grizzled space marine on a desolate alien planet.",
        key=f"proj_cap_{rev}",
        label_visibility="collapsed",
    )
    if cap != get_state().project.character_scene_cap:
        dispatch(set_project_field, "character_scene_cap", cap)

    state = get_state()
    if st.button("✨ AI continue", disabled=state.busy, help="Let Gemini continue the description"):
        _complete_character(client)


def _complete_character(client):
    state = get_state()
    if not state.project.character_scene_cap:
        return
    dispatch(start_operation, "completing_character")
    try:
        with st.spinner("Writing the character further..."):
            completion = complete_character_description(client, state.project.character_scene_cap)
    except ServiceError as e:
        dispatch(set_error, e.message)
    else:
        dispatch(apply_character_completion, completion)
    finally:
        dispatch(finish_operation, "completing_character")
    st.rerun()
