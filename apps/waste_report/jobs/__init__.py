"""Waste Report Jobs."""
