"""Helpers for reporting secrets without leaking them."""
from config.env import NOT_SET

VISIBLE_CHARS = 4


def mask_api_key(api_key: str) -> str:
    """Describe an API key by its first few characters only."""
    if not api_key or not api_key.strip() or api_key == NOT_SET:
        return NOT_SET
    return f"SET (first {VISIBLE_CHARS} chars: {api_key[:VISIBLE_CHARS]}...)"
