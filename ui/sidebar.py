import streamlit as st

from core.app_state import apply_loaded_project, set_error
from core.env_loader import load_env, get_key_info, get_model_name
from core.errors import StudioError
from core.project_io import save_project, load_project
from ui.session import get_state, dispatch


def render_sidebar():
    st.sidebar.title("⚙️ Settings")

    # Key is read once per process from the environment; only a fingerprint is shown
    current_key = load_env()
    if current_key:
        st.sidebar.caption(f"API key: {get_key_info(current_key)}")
    else:
        st.sidebar.error("No GEMINI_API_KEY found in the environment or .env.")
    st.sidebar.caption(f"Model: {get_model_name()}")

    st.sidebar.markdown("---")
    st.sidebar.subheader("📁 Project")


def render_project_actions():
    """
    Save / Load buttons. Must run after every section has rendered, so the
    widget edits of this rerun are already in the project being saved.
    """
    state = get_state()
    colS, colL = st.sidebar.columns(2)
    with colS:
        save_clicked = st.button("💾 Save", type="primary", disabled=state.busy, key="save_project")
    with colL:
        load_clicked = st.button("📂 Load", disabled=state.busy, key="load_project")

    if save_clicked:
        dispatch(set_error, None)
        try:
            save_project(get_state().project)
        except StudioError as e:
            dispatch(set_error, e.message)
        else:
            st.toast("Project saved successfully!")
        st.rerun()

    if load_clicked:
        dispatch(set_error, None)
        try:
            proj = load_project()
        except StudioError as e:
            dispatch(set_error, e.message)
        else:
            dispatch(apply_loaded_project, proj)
            st.toast("Project loaded successfully!")
        st.rerun()
