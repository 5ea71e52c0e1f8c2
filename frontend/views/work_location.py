import streamlit as st

from utils.helper import get_auth, get_work_locations
from utils.work_locations import WORK_LOCATIONS, location_label, member_key, today


def render():
    auth = get_auth()
    session = auth.session
    if session is None:
        return

    book = get_work_locations()
    day = today()
    key = member_key(session)

    st.title("Today's Work Location")
    st.caption(day)

    values = [value for value, _ in WORK_LOCATIONS]
    current = book.get(key, day)
    location = st.selectbox(
        "Location",
        values,
        index=values.index(current),
        format_func=location_label,
    )
    if st.button("Save"):
        book.set(key, day, location)
        st.success(f"Saved: {location_label(location)}")

    team_today = book.for_day(day)
    if team_today:
        st.subheader("Team today")
        for member, loc in sorted(team_today.items()):
            marker = " (you)" if auth.is_self(member) or member == key else ""
            st.write(f"**{member}**{marker}: {location_label(loc)}")
