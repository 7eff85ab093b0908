"""Validation engine and its pattern/format collaborators."""
