"""Lifecycle – answers a client expects back from an observer."""
from __future__ import annotations

from enum import Enum


class AuthChallengeDisposition(str, Enum):
    """How the client should handle an authentication challenge."""

    USE_CREDENTIAL = "use_credential"
    PERFORM_DEFAULT_HANDLING = "perform_default_handling"
    CANCEL_AUTHENTICATION_CHALLENGE = "cancel_authentication_challenge"
    REJECT_PROTECTION_SPACE = "reject_protection_space"


class DelayedRequestDisposition(str, Enum):
    """Whether a delayed request should start as proposed."""

    CONTINUE_LOADING = "continue_loading"
    USE_NEW_REQUEST = "use_new_request"
    CANCEL = "cancel"


class ResponseDisposition(str, Enum):
    """What the client should do after response headers arrive."""

    CANCEL = "cancel"
    ALLOW = "allow"
    BECOME_DOWNLOAD = "become_download"
    BECOME_STREAM = "become_stream"


__all__ = ["AuthChallengeDisposition", "DelayedRequestDisposition", "ResponseDisposition"]
