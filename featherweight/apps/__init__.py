"""Application entrypoints for Featherweight."""
