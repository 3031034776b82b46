"""Waste Report Application Layer."""
