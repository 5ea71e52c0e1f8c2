# views/login.py

import streamlit as st

from utils.helper import get_auth


def render():
    auth = get_auth()

    st.subheader("Login")
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

        if submitted:
            if username and password:
                result = auth.login(username, password)
                if result.ok:
                    st.session_state.must_change_password = result.must_change_password
                    if result.must_change_password:
                        st.session_state.nav_page = "Account"
                    st.rerun()
                else:
                    st.error(result.message)
            else:
                st.warning("Please enter username and password")
