import streamlit as st

import config
import views
from logging_config import setup_logging

# Page Configuration
st.set_page_config(
    page_title=config.APP_TITLE,
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded"
)

setup_logging()

# --- MAIN APP LAYOUT ---
st.sidebar.title(f"📦 {config.APP_TITLE}")
st.sidebar.markdown(f"""
    <div style="background-color: #262730; border: 1px solid #444; border-radius: 5px; padding: 5px 10px; margin-bottom: 20px; text-align: center;">
        <span style="color: #888; font-size: 0.8em;">VERSION</span><br>
        <span style="color: #fff; font-weight: bold;">{config.APP_VERSION}</span>
    </div>
    """, unsafe_allow_html=True)

catalogue = views.get_catalogue()
titles = {"Overview": None}
titles.update({f"{schema.icon} {schema.title}": name for name, schema in catalogue.items()})

choice = st.sidebar.radio("Navigation", list(titles))
st.sidebar.markdown("---")

if titles[choice] is None: views.show_overview()
else: views.show_collection(titles[choice])
