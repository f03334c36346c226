"""Blueprints exposed under /api."""
