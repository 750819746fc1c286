"""Storable object import runtime package."""
