"""Presentation layers for the rules engine."""
