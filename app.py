import logging
import os
import streamlit as st
from pages.ingredients import render as render_ingredients

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Zutaten-Vorschau", layout="wide")

render_ingredients()
