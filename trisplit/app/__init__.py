"""Application layer: ports, services and state for the panel allocation engine."""
