"""Puzzle filtering and two-word search."""
