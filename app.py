import streamlit as st
from app_shell import run_app

st.set_page_config(page_title="Cupcake", page_icon="🧁", layout="centered")

run_app()
