"""Qt integration for the panel allocation engine (PyQt5)."""
