"""Utility helpers (telemetry)."""
