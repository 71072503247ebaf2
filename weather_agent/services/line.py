# services/line.py
import asyncio
import base64
import hashlib
import hmac
import logging

import requests

logger = logging.getLogger(__name__)

LINE_REPLY_URL = "https://api.line.me/v2/bot/message/reply"
MAX_TEXT_LENGTH = 5000  # LINE text message limit


def verify_signature(body: bytes, signature: str, secret: str) -> bool:
    """X-Line-Signature is base64(HMAC-SHA256(channel secret, raw body))."""
    if not signature or not secret:
        return False
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
    expected = base64.b64encode(digest).decode("ascii")
    return hmac.compare_digest(expected, signature)


def reply_text(reply_token: str, text: str, access_token: str, timeout: float = 10.0) -> int:
    """Send one text reply; returns the HTTP status, raises on failure."""
    r = requests.post(
        LINE_REPLY_URL,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        },
        json={
            "replyToken": reply_token,
            "messages": [{"type": "text", "text": text[:MAX_TEXT_LENGTH]}],
        },
        timeout=timeout,
    )
    r.raise_for_status()
    return r.status_code


class LineClient:
    def __init__(self, access_token: str, timeout: float = 10.0):
        self.access_token = access_token
        self.timeout = timeout

    async def reply(self, reply_token: str, text: str) -> int:
        return await asyncio.to_thread(reply_text, reply_token, text, self.access_token, self.timeout)
