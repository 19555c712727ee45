"""Web layer - API views and the Streamlit browser."""
