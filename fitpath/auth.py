"""Plan API credentials.

Profile and plan routes carry a user's body data, so they sit behind
`require_plan_key` once FITPATH_API_KEY is configured. Catalog routes are
static content and stay public. Both schemes are declared through
fastapi.security so they appear in the OpenAPI document.
"""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from fitpath.config import settings

api_key_header = APIKeyHeader(name="X-API-Key", scheme_name="PlanApiKey", auto_error=False)
bearer_scheme = HTTPBearer(scheme_name="PlanBearer", auto_error=False)


def _presented_key(header_key: str | None, bearer: HTTPAuthorizationCredentials | None) -> str | None:
    if header_key:
        return header_key
    if bearer is not None:
        return bearer.credentials
    return None


async def require_plan_key(
    header_key: str | None = Security(api_key_header),
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> str | None:
    """Return the accepted key, or None when the API runs without one.

    Raises 401 with a WWW-Authenticate hint on a missing or wrong key.
    """
    expected = settings.fitpath_api_key
    if expected is None:
        return None

    presented = _presented_key(header_key, bearer)
    if presented is None or not secrets.compare_digest(presented, expected):
        raise HTTPException(
            status_code=401,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return presented
