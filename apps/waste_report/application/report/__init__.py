"""Report - 폐기물 신고 접수/조회."""
