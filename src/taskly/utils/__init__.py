"""Utility helpers for Taskly."""
