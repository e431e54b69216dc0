# -*- coding: utf-8 -*-
import streamlit as st

from core.app_state import (
    add_scene, apply_enhanced_description, finish_operation, remove_scene,
    select_scene, set_error, set_scene_field, start_operation,
)
from core.errors import ServiceError
from core.gemini_helpers import enhance_scene_description
from ui.session import get_state, dispatch

# (field, label) for the single-line scene inputs
SCENE_WIDGETS = [
    ("action", "Action"),
    ("mood", "Mood"),
    ("cta", "Call to Action (Theme)"),
    ("camera_angle", "Camera Angle"),
]


def render_section_2(client):
    st.header("2) Scene Details")

    state = get_state()
    rev = state.revision
    scenes = state.project.scenes

    colS1, colS2, colS3 = st.columns([4, 1, 1])
    with colS1:
        labels = [f"Scene {i + 1}" for i in range(len(scenes))]
        pick = st.radio(
            "Active scene", labels, index=state.active_scene_index,
            horizontal=True, key=f"scene_pick_{rev}",
        )
        if labels.index(pick) != state.active_scene_index:
            dispatch(select_scene, labels.index(pick))
    with colS2:
        if st.button("➕ Add scene", disabled=state.busy):
            dispatch(add_scene)
            st.rerun()
    with colS3:
        # The last remaining scene cannot be removed
        if st.button("🗑️ Remove", disabled=state.busy or len(scenes) <= 1):
            dispatch(remove_scene, get_state().active_scene_index)
            st.rerun()

    state = get_state()
    idx = state.active_scene_index
    scene = state.active_scene

    desc = st.text_area(
        "Scene Description", value=scene.description, height=140,
        placeholder="A brief idea of the scene.", key=f"scene_desc_{rev}_{idx}",
    )
    if desc != scene.description:
        dispatch(set_scene_field, idx, "description", desc)

    if st.button("✨ Enhance with AI", disabled=state.busy, key=f"enhance_{idx}"):
        _enhance(client, idx)

    col1, col2 = st.columns(2)
    for i, (field, label) in enumerate(SCENE_WIDGETS):
        with (col1 if i % 2 == 0 else col2):
            current = getattr(scene, field)
            value = st.text_input(label, value=current, key=f"scene_{field}_{rev}_{idx}")
            if value != current:
                dispatch(set_scene_field, idx, field, value)


def _enhance(client, idx: int):
    brief = get_state().project.scenes[idx].description
    if not brief:
        return
    dispatch(start_operation, "enhancing")
    try:
        with st.spinner("Enhancing the scene..."):
            enhanced = enhance_scene_description(client, brief)
    except ServiceError as e:
        dispatch(set_error, e.message)
    else:
        dispatch(apply_enhanced_description, idx, enhanced)
    finally:
        dispatch(finish_operation, "enhancing")
    st.rerun()
