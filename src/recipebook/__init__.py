"""Ingredient parsing, mass estimates and shopping-list consolidation for a recipe manager."""
