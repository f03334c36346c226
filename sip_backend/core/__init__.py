"""Projection engine and the calculations built on its results."""
