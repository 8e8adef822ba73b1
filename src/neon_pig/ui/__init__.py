"""Streamlit front end for Neon Pig."""
