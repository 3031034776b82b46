"""Waste Report Presentation Layer."""
