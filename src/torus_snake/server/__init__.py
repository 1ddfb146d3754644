"""HTTP and WebSocket hosting for torus snake games."""
