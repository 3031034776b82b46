"""Waste Report Infrastructure Layer."""
