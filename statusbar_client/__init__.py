"""Geometry and surface helpers for the statusbar overlay."""
