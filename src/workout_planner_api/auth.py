"""
Bearer credential handling.

The planner does not manage sessions. It forwards the caller's bearer token to
the inference function, so the only job here is to pull that token out of the
request and expose it as a credential provider.
"""
from typing import Optional

from fastapi import Header


class StaticCredentialProvider:
    """Credential provider that always returns the same token (possibly None)."""

    def __init__(self, token: Optional[str]):
        self._token = token

    async def __call__(self) -> Optional[str]:
        return self._token


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a 'Bearer <token>' header value, else None."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_credential_provider(
    authorization: Optional[str] = Header(None),
) -> StaticCredentialProvider:
    """
    FastAPI dependency yielding a provider over the caller's bearer token.

    A missing or malformed header produces a provider that returns None; the
    gateway then fails with AuthMissingError before any network call, while
    purely local endpoints keep working without a session.
    """
    return StaticCredentialProvider(extract_bearer_token(authorization))
