"""Create Apple ID token verification components."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Self

import structlog
from httpx import AsyncClient
from structlog.stdlib import BoundLogger

from .config import Config
from .keys import HTTPKeySetSource, KeySetSource
from .verify import IDTokenVerifier

__all__ = ["Factory"]


class Factory:
    """Build verification components from configuration.

    Parameters
    ----------
    config
        Configuration to use.
    http_client
        Client to use for retrieving the key set.
    logger
        Logger to pass to created components.
    """

    @classmethod
    @asynccontextmanager
    async def standalone(
        cls, config: Config, *, logger: BoundLogger | None = None
    ) -> AsyncIterator[Self]:
        """Async context manager that owns its own HTTP client.

        Parameters
        ----------
        config
            Configuration to use.
        logger
            Logger to use. If not given, the ``appleid`` logger is used.

        Yields
        ------
        Factory
            The factory. The HTTP client is closed on exit.

        Examples
        --------
        .. code-block:: python

           async with Factory.standalone(config) as factory:
               verifier = factory.create_verifier()
               await verifier.verify(token, request)
        """
        timeout = config.http_timeout.total_seconds()
        async with AsyncClient(timeout=timeout) as http_client:
            yield cls(
                config,
                http_client,
                logger or structlog.get_logger("appleid"),
            )

    def __init__(
        self, config: Config, http_client: AsyncClient, logger: BoundLogger
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._logger = logger

    def create_key_source(self) -> HTTPKeySetSource:
        """Create a source that retrieves the key set over HTTP."""
        return HTTPKeySetSource(
            self._http_client,
            url=self._config.jwks_url,
            timeout=self._config.http_timeout,
            logger=self._logger,
        )

    def create_verifier(
        self, key_source: KeySetSource | None = None
    ) -> IDTokenVerifier:
        """Create a token verifier.

        Parameters
        ----------
        key_source
            Source of the key set. If not given, the key set is retrieved
            from the configured URL on every signature verification.

        Returns
        -------
        IDTokenVerifier
            The new verifier.
        """
        return IDTokenVerifier(
            key_source or self.create_key_source(),
            issuer=self._config.issuer,
            logger=self._logger,
        )
