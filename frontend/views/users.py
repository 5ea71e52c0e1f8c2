"""
User management page (admins only).

Features:
- Table of all accounts with role and password status
- Add a user with the default or a chosen password
- Reset a password to the default value
- Change a user's role
"""

import pandas as pd
import streamlit as st

from config import DEFAULT_PASSWORD
from utils.helper import get_auth, show_result
from utils.models import UserRole


def _build_users_dataframe(credentials) -> pd.DataFrame:
	"""Tabular view of the collection without password values."""
	rows = [
		{
			"Username": cred.username,
			"Role": cred.role.value,
			"Member ID": cred.member_id or "-",
			"Default password": "yes" if cred.is_default_password else "no",
		}
		for cred in credentials
	]
	return pd.DataFrame(rows, columns=["Username", "Role", "Member ID", "Default password"])


def render():
	"""Render the user management page."""
	st.title("👥 User management")

	auth = get_auth()
	if not auth.is_admin():
		st.error("Only admins can manage users")
		return

	credentials = auth.list_credentials()

	col1, col2 = st.columns([4, 1])
	with col1:
		st.metric("Accounts", len(credentials))
	with col2:
		if st.button("Reload", use_container_width=True):
			result = auth.reload()
			if not result.ok:
				st.error(result.message)
			else:
				st.rerun()

	st.dataframe(_build_users_dataframe(credentials), use_container_width=True, hide_index=True)

	usernames = [cred.username for cred in credentials]
	roles = [role.value for role in UserRole]

	tab1, tab2, tab3 = st.tabs(["Add user", "Reset password", "Change role"])

	with tab1:
		with st.form("add_user_form", clear_on_submit=True):
			username = st.text_input("Username")
			password = st.text_input(
				"Initial password",
				value=DEFAULT_PASSWORD,
				type="password",
				help="The user is asked to change it at first login",
			)
			role = st.selectbox("Role", roles, index=roles.index(UserRole.USER.value))
			member_id = st.text_input("Team member ID (optional)")
			if st.form_submit_button("Add user"):
				if not username or not password:
					st.warning("Please enter username and password")
				else:
					show_result(auth.add_credential(username, password, role, member_id or None))

	with tab2:
		with st.form("reset_password_form"):
			target = st.selectbox("User", usernames, key="reset_target")
			if st.form_submit_button("Reset to default password"):
				show_result(auth.reset_user_password(target))

	with tab3:
		with st.form("change_role_form"):
			target = st.selectbox("User", usernames, key="role_target")
			new_role = st.selectbox("New role", roles, key="role_value")
			if st.form_submit_button("Update role"):
				show_result(auth.update_role(target, new_role))
