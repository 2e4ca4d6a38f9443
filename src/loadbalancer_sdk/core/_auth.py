# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional

from azure.core.credentials import AccessToken, TokenCredential


@dataclass
class _TokenPair:
    scope: str
    access_token: str


class StaticTokenCredential:
    """
    Credential wrapping an already-issued Keystone token.

    Implements the :class:`azure.core.credentials.TokenCredential` protocol so
    that any credential source (static token, custom Keystone session, Azure
    Identity style providers) can be handed to the client.

    :param token: Keystone token value sent as ``X-Auth-Token``.
    :type token: str
    :param expires_on: Expiry as a POSIX timestamp; defaults to one hour from now.
    :type expires_on: int or None
    """

    def __init__(self, token: str, expires_on: Optional[int] = None) -> None:
        if not token:
            raise ValueError("token is required.")
        self._token = token
        self._expires_on = expires_on if expires_on is not None else int(time.time()) + 3600

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken(self._token, self._expires_on)


class _AuthManager:
    """Token acquisition for the ``X-Auth-Token`` header."""

    def __init__(self, credential: TokenCredential) -> None:
        if not callable(getattr(credential, "get_token", None)):
            raise TypeError("credential must implement azure.core.credentials.TokenCredential (get_token).")
        self.credential: TokenCredential = credential

    def _acquire_token(self, scope: str) -> _TokenPair:
        """Acquire an access token for the given scope."""
        token = self.credential.get_token(scope)
        return _TokenPair(scope=scope, access_token=token.token)
