"""Streamlit user interface for SentiScope."""
