"""Common Ports."""

from waste_report.application.common.ports.identity_verifier import IdentityVerifier, UserIdentity

__all__ = ["IdentityVerifier", "UserIdentity"]
