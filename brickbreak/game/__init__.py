"""Brick Break game internals: entities, physics, skins and layouts."""
