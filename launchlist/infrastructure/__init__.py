"""GTK adapters for the list managers."""
