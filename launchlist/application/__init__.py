"""GTK application setup."""
