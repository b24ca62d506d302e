"""Shared primitives for the core and domain layers."""
