"""
Breach check for generated passwords.

Uses the Pwned Passwords range API with k-anonymity: only the first five
hex characters of the password's SHA-1 hash leave this machine. The service
answers with every known hash suffix under that prefix, and the match is
done locally.

The check is advisory. `check_pwned` never raises; any failure is logged and
reported as 0 ("not found / unknown").
"""

from __future__ import annotations

import hashlib
import logging

import requests

logger = logging.getLogger(__name__)

PWNED_RANGE_URL = "https://api.pwnedpasswords.com/range/{prefix}"
PWNED_TIMEOUT = 10.0
PREFIX_LENGTH = 5

USER_AGENT = "pwdgen-breach-check"


def sha1_hex(password: str) -> str:
    """Upper-case hex SHA-1 digest of the UTF-8 encoded password."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest().upper()


def split_hash(password: str) -> tuple[str, str]:
    """
    Return (prefix, suffix) of the password hash. Only the prefix is sent.
    """
    digest = sha1_hex(password)
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def parse_range_response(body: str, suffix: str) -> int:
    """
    Find `suffix` in a newline-delimited ``SUFFIX:COUNT`` body.

    Returns the count, or 0 if the suffix is absent.
    """
    for line in body.splitlines():
        hash_suffix, _, count = line.partition(":")
        if hash_suffix.strip().upper() == suffix:
            try:
                return int(count.strip())
            except ValueError:
                logger.warning("Malformed count in breach response: %r", count)
                return 0
    return 0


def check_pwned(
    password: str,
    *,
    api_url: str = PWNED_RANGE_URL,
    timeout: float = PWNED_TIMEOUT,
    session: requests.Session | None = None,
) -> int:
    """
    Return how many times `password` appears in known breaches.

    0 means either "not found" or "could not check"; this function never
    raises. Callers that need to tell the two apart should call the API
    themselves.
    """
    prefix, suffix = split_hash(password)
    url = api_url.format(prefix=prefix)
    http = session or requests

    try:
        response = http.get(
            url,
            headers={"User-Agent": USER_AGENT, "Add-Padding": "true"},
            timeout=timeout,
        )
        if not response.ok:
            logger.warning(
                "Breach check failed: HTTP %s for prefix %s",
                response.status_code,
                prefix,
            )
            return 0
        count = parse_range_response(response.text, suffix)
    except Exception as exc:
        logger.warning("Breach check unavailable: %s", exc)
        return 0

    logger.debug("Breach check for prefix %s: %d hit(s)", prefix, count)
    return count
