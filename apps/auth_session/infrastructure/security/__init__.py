"""Security Infrastructure."""

from apps.auth_session.infrastructure.security.jwt_token_codec import JwtTokenCodec

__all__ = ["JwtTokenCodec"]
