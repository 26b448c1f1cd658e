"""Household shopping list API."""
