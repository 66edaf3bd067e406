"""Command-line utilities: texture export and ephemeris tables."""
