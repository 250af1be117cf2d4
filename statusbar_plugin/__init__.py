"""Plugin-side state and lifecycle for the statusbar overlay."""
