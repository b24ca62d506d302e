"""Pure rules for stat derivation and character progression."""
