"""Featherweight journaling companion: harmonic pattern analysis."""
