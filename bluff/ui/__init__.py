"""Streamlit table UI for Bluff."""
