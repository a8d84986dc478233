from typing import Dict, Mapping, Optional

from jose import JWTError, jwt

IAM_USER_HEADER = "X-Goog-Authenticated-User-Email"


def _bearer_subject(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None

    token = authorization.split(" ", 1)[1]
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return None

    return claims.get("email") or claims.get("sub")


def extract_user_identity(headers: Mapping[str, str], payload: Dict) -> str:
    """
    Who asked for the generation run, recorded in the log events.

    Order: IAM proxy header, bearer token claims, payload user_id,
    then anonymous.
    """
    headers = headers or {}

    user_email = headers.get(IAM_USER_HEADER)
    if user_email:
        return user_email.split(":")[-1]

    subject = _bearer_subject(headers.get("Authorization"))
    if subject:
        return subject

    return payload.get("user_id") or "anonymous"
