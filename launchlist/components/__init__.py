"""Reusable GTK components."""
