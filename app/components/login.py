from __future__ import annotations

import streamlit as st

import auth
from components.session_store import browser_session
from config import AppConfig

USERNAME_KEY = "login_username"
PASSWORD_KEY = "login_password"
ERROR_KEY = "login_error"


def _submit(cfg: AppConfig) -> None:
    username = st.session_state.get(USERNAME_KEY, "")
    password = st.session_state.get(PASSWORD_KEY, "")
    marker = auth.login(cfg, browser_session(cfg), username, password)
    st.session_state[PASSWORD_KEY] = ""
    st.session_state[ERROR_KEY] = None if marker else "Invalid username or password."


def render_login_form(cfg: AppConfig) -> None:
    st.markdown('<div class="section-title">Admin sign in</div>', unsafe_allow_html=True)
    with st.form("login_form"):
        st.text_input("Username", key=USERNAME_KEY)
        st.text_input("Password", type="password", key=PASSWORD_KEY)
        st.form_submit_button("Sign in", on_click=_submit, args=(cfg,))

    error = st.session_state.get(ERROR_KEY)
    if error:
        st.error(error)
