"""Waste Report Setup - 설정, 로깅, DB, 의존성 주입."""
