"""Waste Report API - 폐기물 신고 접수 및 분류 서비스."""
