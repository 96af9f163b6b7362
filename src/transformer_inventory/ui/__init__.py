"""Streamlit UI for the feeder analysis report."""
