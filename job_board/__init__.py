"""Job board client.

- `services/` talks to the remote job API (HTTP client, endpoint bindings, session).
- `state/` and `controllers/` hold the framework-free view logic.
- `views/` and `app.py` are the Streamlit frontend.
"""
