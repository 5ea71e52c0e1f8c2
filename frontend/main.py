import streamlit as st
from streamlit_option_menu import option_menu
from views import login, account, users, work_location
from utils.helper import init_session, get_auth
from utils.styles import inject_styles
from config import APP_NAME


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    inject_styles()
    init_session()
    auth = get_auth()

    # --- Access control
    if not auth.is_authenticated():
        st.title(APP_NAME)
        login.render()
        st.stop()

    # --- Sidebar navigation
    with st.sidebar:
        nav_options = ["Work Location", "Account"]
        icons = ["geo-alt", "gear"]
        if auth.is_admin():
            nav_options.append("Users")
            icons.append("people")

        current_page = st.session_state.get("nav_page", "Work Location")
        try:
            default_index = nav_options.index(current_page)
        except ValueError:
            default_index = 0

        page_selected = option_menu(
            menu_title=auth.session.username,
            options=nav_options,
            icons=icons,
            default_index=default_index,
        )

        if page_selected != current_page:
            st.session_state["nav_page"] = page_selected
            st.rerun()

    page = st.session_state.get("nav_page", "Work Location")

    # --- Routing
    if page == "Account":
        account.render()
    elif page == "Users" and auth.is_admin():
        users.render()
    else:
        work_location.render()


if __name__ == "__main__":
    main()
