import streamlit as st

from core.env_loader import load_env, init_client, quiet_logs, configure_logging
from ui.session import init_session, get_state

from ui.sidebar import render_sidebar, render_project_actions
from ui.section_1_project import render_section_1
from ui.section_2_scenes import render_section_2
from ui.section_3_output import render_section_3

configure_logging()
quiet_logs()
st.set_page_config(page_title="Prompt Studio", page_icon="🎬", layout="wide")

# Session init
init_session()

# Read the key (once per process) and init client
api_key = load_env()
render_sidebar()
client = init_client(api_key) if api_key else None

st.title("🎬 Prompt Studio")
st.caption("Craft the perfect prompt for your next masterpiece.")

error = get_state().error
if error:
    st.error(f"Error: {error}")

left, right = st.columns(2, gap="large")
with left:
    render_section_1(client)
    render_section_2(client)
with right:
    render_section_3(client)

# Last, so this run's field edits are applied before a save
render_project_actions()
