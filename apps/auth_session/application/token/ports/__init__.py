"""Token ports."""

from apps.auth_session.application.token.ports.codec import SignedToken, TokenCodec

__all__ = ["SignedToken", "TokenCodec"]
