"""Classify - 폐기물 분류."""
