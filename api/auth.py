"""
Admin Login - single shared password.

A successful login returns a bearer token: base64("admin:<issued-at>") plus an
HMAC-SHA256 signature keyed by the admin password. Tokens expire after
config.admin_token_ttl seconds and stop validating when the password changes.
"""

import base64
import hashlib
import hmac
import logging
import time
from typing import Optional

from fastapi import APIRouter, Header, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import config


logger = logging.getLogger(__name__)

auth_router = APIRouter()


class LoginRequest(BaseModel):
    password: Optional[str] = None


def _signature(payload: str, secret: str) -> str:
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def create_token(secret: str, issued_at: Optional[int] = None) -> str:
    issued_at = int(time.time()) if issued_at is None else issued_at
    payload = base64.urlsafe_b64encode(f"admin:{issued_at}".encode()).decode()
    return f"{payload}.{_signature(payload, secret)}"


def verify_token(token: str, secret: str, ttl: int, now: Optional[float] = None) -> bool:
    """Check signature, subject and age of a token."""
    if not secret or '.' not in token:
        return False

    payload, signature = token.rsplit('.', 1)
    # Header values may carry latin-1 characters; compare as bytes
    expected = _signature(payload, secret).encode()
    if not hmac.compare_digest(signature.encode(), expected):
        return False

    try:
        subject, issued_at = base64.urlsafe_b64decode(payload.encode()).decode().split(':', 1)
        issued_at = int(issued_at)
    except ValueError:
        return False

    now = time.time() if now is None else now
    return subject == 'admin' and 0 <= now - issued_at <= ttl


def require_admin(authorization: Optional[str] = Header(None)) -> None:
    """Dependency guarding admin-only routes."""
    if not authorization or not authorization.startswith('Bearer '):
        raise HTTPException(status_code=401, detail="Unauthorized - No token provided")

    token = authorization[len('Bearer '):]
    if not verify_token(token, config.admin_password or '', config.admin_token_ttl):
        raise HTTPException(status_code=401, detail="Unauthorized - Invalid token")


@auth_router.post("/api/auth/login")
async def login(body: LoginRequest):
    if not body.password:
        raise HTTPException(status_code=400, detail="Password required")

    if not config.admin_password:
        logger.warning("Login attempted but ADMIN_PASSWORD is not set")
        raise HTTPException(status_code=401, detail="Invalid password")

    if not hmac.compare_digest(body.password.encode(), config.admin_password.encode()):
        raise HTTPException(status_code=401, detail="Invalid password")

    return JSONResponse({
        "success": True,
        "message": "Login successful",
        "token": create_token(config.admin_password),
    })
