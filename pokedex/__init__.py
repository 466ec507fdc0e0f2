"""Pokedex API: Pokemon species descriptions with fun translations."""
