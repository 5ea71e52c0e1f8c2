"""
Global styles and CSS for the team board UI.
"""

COLORS = {
    "bg_card": "#21262d",
    "border": "#30363d",
    "text_primary": "#f0f6fc",
    "text_secondary": "#8b949e",
    "accent_green": "#3fb950",
    "accent_red": "#f85149",
    "accent_blue": "#58a6ff",
    "accent_yellow": "#d29922",
}

ROLE_COLORS = {
    "admin": COLORS["accent_yellow"],
    "user": COLORS["accent_blue"],
}


def get_global_css() -> str:
    """Return global CSS for the board."""
    return f"""
    <style>
        .team-card {{
            background: {COLORS['bg_card']};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 16px;
            margin-bottom: 12px;
        }}
        
        .team-card-title {{
            color: {COLORS['text_primary']};
            font-size: 18px;
            font-weight: 700;
            margin-bottom: 8px;
        }}
        
        .team-card-meta {{
            color: {COLORS['text_secondary']};
            font-size: 12px;
        }}
        
        .badge-admin, .badge-user {{
            display: inline-block;
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 600;
        }}
        
        .badge-admin {{ color: {ROLE_COLORS['admin']}; background: rgba(210, 153, 34, 0.2); }}
        .badge-user {{ color: {ROLE_COLORS['user']}; background: rgba(88, 166, 255, 0.2); }}
    </style>
    """


def role_badge(role: str) -> str:
    """HTML badge for a role name."""
    return f'<span class="badge-{role}">{role.upper()}</span>'


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
