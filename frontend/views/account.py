import streamlit as st

from utils.helper import get_auth, show_result
from utils.styles import role_badge


def render():
    st.title("My Account")

    auth = get_auth()
    session = auth.session

    if st.session_state.get("must_change_password"):
        st.warning("Please change your default password")

    tab1, tab2 = st.tabs(["Profile", "Security"])

    with tab1:
        st.subheader("Profile Information")
        col1, col2 = st.columns(2)
        with col1:
            st.write(f"**Username:** {session.username}")
        with col2:
            st.write(f"**Member ID:** {session.member_id or '-'}")
        st.markdown(role_badge(session.role.value), unsafe_allow_html=True)

        st.divider()

        if st.button("Log out", use_container_width=True):
            auth.logout()
            st.session_state.must_change_password = False
            st.rerun()

    with tab2:
        st.subheader("Change Password")

        with st.form("change_password_form"):
            current_password = st.text_input(
                "Current password",
                type="password",
                help="Enter your current password for verification"
            )
            new_password = st.text_input("New password", type="password")
            new_password_confirm = st.text_input(
                "Confirm new password",
                type="password",
                help="Must match the new password"
            )
            submitted = st.form_submit_button(
                "Change password",
                use_container_width=True
            )
            if submitted:
                # Client-side validation
                if not current_password:
                    st.error("Please enter your current password")
                elif not new_password:
                    st.error("Please enter a new password")
                elif new_password != new_password_confirm:
                    st.error("The new passwords do not match")
                elif current_password == new_password:
                    st.error("The new password must be different from the old one")
                else:
                    result = auth.change_password(current_password, new_password)
                    show_result(result)
                    if result.ok:
                        st.session_state.must_change_password = False
