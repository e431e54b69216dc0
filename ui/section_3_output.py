# -*- coding: utf-8 -*-
from concurrent.futures import ThreadPoolExecutor

import streamlit as st

from core.app_state import (
    apply_generated_prompt, finish_operation, next_status_message,
    rotate_while_pending, set_error, start_operation,
)
from core.errors import ServiceError
from core.gemini_helpers import generate_final_prompt
from core.text_utils import prompt_filename
from ui.session import get_state, dispatch, put_state


def render_section_3(client):
    st.header("3) Generated Prompt")

    state = get_state()
    if state.project.generated_prompt:
        # st.code ships a copy-to-clipboard button
        st.code(state.project.generated_prompt, language=None, wrap_lines=True)
        st.download_button(
            "⬇️ Download .txt",
            data=state.project.generated_prompt,
            file_name=prompt_filename(state.project.name, state.active_scene_index + 1),
            mime="text/plain",
        )
    else:
        st.caption("Your generated prompt will appear here...")

    if st.button("🎬 Generate Hollywood Prompt", type="primary", disabled=state.busy, use_container_width=True):
        _generate(client)


def _generate(client):
    state = dispatch(start_operation, "generating")
    status = st.empty()
    # The worker only makes the Gemini call; session state and widgets stay on this thread
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(generate_final_prompt, client, state.project, state.active_scene)
        put_state(rotate_while_pending(future, state, status.info))
    status.empty()
    try:
        text = future.result()
    except ServiceError as e:
        dispatch(set_error, e.message)
    else:
        dispatch(apply_generated_prompt, text)
    finally:
        dispatch(finish_operation, "generating")
        dispatch(next_status_message)
    st.rerun()
