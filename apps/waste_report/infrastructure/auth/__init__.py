"""Auth Infrastructure."""

from waste_report.infrastructure.auth.jwt_identity_verifier import JwtIdentityVerifier

__all__ = ["JwtIdentityVerifier"]
