import streamlit as st

from core.app_state import AppState, initial_state


def init_session():
    if "app_state" not in st.session_state:
        st.session_state.app_state = initial_state()


def get_state() -> AppState:
    return st.session_state.app_state


def dispatch(reducer, *args) -> AppState:
    st.session_state.app_state = reducer(st.session_state.app_state, *args)
    return st.session_state.app_state


def put_state(state: AppState) -> AppState:
    st.session_state.app_state = state
    return state
