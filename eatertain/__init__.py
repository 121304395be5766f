"""Eatertain: zero-scroll watch picks for whatever you're eating."""
