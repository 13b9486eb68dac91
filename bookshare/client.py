"""Bookshare API client: look up an endpoint, normalize arguments, call it, map the reply."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any

import requests

from bookshare.config import Settings
from bookshare.endpoints import default_registry
from bookshare.errors import EmptyResultError, TransportError
from bookshare.formats.descriptor import EndpointDescriptor
from bookshare.formats.messages import RetrievalResult, get_schema
from bookshare.helpers.http import media_type
from bookshare.normalize import MAX_LIMIT, NormalizedParameters, normalize
from bookshare.registry import EndpointRegistry
from bookshare.responses import Result, map_response
from bookshare.transport import RawOutcome, RequestInvoker

logger = logging.getLogger(__name__)

USER_PARAM = "userIdentifier"


class BookshareClient:
    """Calls Bookshare API v2 operations by name.

    ``client.invoke_endpoint("get_title", bookshareId="123")`` and
    ``client.get_title(bookshareId="123")`` are equivalent.  Unknown names
    and invalid arguments raise; network and upstream failures come back
    as failed :class:`~bookshare.responses.Result` values.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        registry: EndpointRegistry | None = None,
        session: requests.Session | None = None,
        token: str | None = None,
        user: str | None = None,
        base_url: str | None = None,
    ):
        overrides = {"token": token, "user": user, "base_url": base_url}
        if settings is None:
            settings = Settings.from_env(**overrides)
        else:
            settings = settings.model_copy(
                update={k: v for k, v in overrides.items() if v is not None}
            )
        self._settings = settings
        self._registry = registry if registry is not None else default_registry()
        self._invoker = RequestInvoker(
            base_url=settings.base_url,
            token=settings.token,
            api_key=settings.api_key,
            timeout=settings.timeout,
            open_timeout=settings.open_timeout,
            max_retries=settings.max_retries,
            max_redirects=settings.max_redirects,
            debug_dir=settings.debug_dir,
            session=session,
        )
        self.user = settings.user

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def registry(self) -> EndpointRegistry:
        return self._registry

    @property
    def session(self) -> requests.Session:
        return self._invoker.session

    @property
    def token(self) -> str | None:
        return self._invoker.token

    @token.setter
    def token(self, value: str | None) -> None:
        self._invoker.token = value

    def endpoints(
        self, *, synthetic: bool | str = False, topic: str | None = None
    ) -> list[EndpointDescriptor]:
        return self._registry.endpoints(synthetic=synthetic, topic=topic)

    def describe(self, method_name: str) -> EndpointDescriptor:
        return self._registry.lookup(method_name)

    def invoke_endpoint(self, method_name: str, **args: Any) -> Result:
        """Call *method_name* with *args*.

        Raises:
            UnknownEndpoint: *method_name* is not registered.
            ParameterError: *args* do not satisfy the endpoint's contract.
        """
        descriptor = self._registry.lookup(method_name)
        normalized = self.normalize(descriptor, args)
        composite = _COMPOSITES.get(method_name)
        if composite is not None:
            return composite(self, normalized)

        outcome = self._invoker.invoke(descriptor, normalized)
        result = map_response(get_schema(descriptor.response), outcome)
        if result.is_error:
            logger.info("%s failed: %s", method_name, result.error_message)
        return result

    def normalize(self, descriptor: EndpointDescriptor, args: Mapping[str, Any]) -> NormalizedParameters:
        return normalize(
            descriptor,
            self._with_default_user(descriptor, args),
            strict=self._settings.strict_params,
            multi_style=self._settings.multi_style,
        )

    def __getattr__(self, name: str) -> Callable[..., Result]:
        if name.startswith("_"):
            raise AttributeError(name)
        registry = self.__dict__.get("_registry")
        if registry is None:
            raise AttributeError(name)
        descriptor = registry.lookup(name)

        def call(**args: Any) -> Result:
            return self.invoke_endpoint(name, **args)

        call.__name__ = name
        call.__doc__ = descriptor.summary
        return call

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry))

    # -- Internals --------------------------------------------------------

    def _with_default_user(
        self, descriptor: EndpointDescriptor, args: Mapping[str, Any]
    ) -> Mapping[str, Any]:
        """Fill in the configured user for account-scoped calls that name none."""
        if not self.user or descriptor.param(USER_PARAM) is None:
            return args
        for key, value in args.items():
            if descriptor.aliases.get(key, key) == USER_PARAM and value not in (None, ""):
                return args
        return {**args, USER_PARAM: self.user}

    def _get_artifact_metadata(self, normalized: NormalizedParameters) -> Result:
        bookshare_id = normalized.path["bookshareId"]
        fmt = normalized.params["format"]
        title = self.invoke_endpoint("get_title", bookshareId=bookshare_id)
        if title.is_error:
            return title
        artifact = title.value.artifact(fmt)
        if artifact is None:
            return Result.fail(
                EmptyResultError(f"title {bookshare_id} has no {fmt} artifact", title.status)
            )
        return Result.ok(artifact, title.status)

    def _get_periodical_edition(self, normalized: NormalizedParameters) -> Result:
        series_id = normalized.path["seriesId"]
        edition_id = normalized.params["editionId"]
        editions = self.invoke_endpoint(
            "get_periodical_editions", seriesId=series_id, limit=MAX_LIMIT
        )
        if editions.is_error:
            return editions
        edition = editions.value.edition(edition_id)
        if edition is None:
            return Result.fail(
                EmptyResultError(
                    f"periodical {series_id} has no edition {edition_id}", editions.status
                )
            )
        return Result.ok(edition, editions.status)

    def _get_reading_list(self, normalized: NormalizedParameters) -> Result:
        reading_list_id = normalized.params["readingListId"]
        lists = self.invoke_endpoint("get_all_reading_lists", limit=MAX_LIMIT)
        if lists.is_error:
            return lists
        entry = lists.value.reading_list(reading_list_id)
        if entry is None:
            return Result.fail(
                EmptyResultError(f"no reading list {reading_list_id}", lists.status)
            )
        return Result.ok(entry, lists.status)

    def _get_retrieval(self, normalized: NormalizedParameters) -> Result:
        outcome = self._invoker.fetch(normalized.params["url"])
        if isinstance(outcome, TransportError) or not _is_content(outcome):
            return map_response(RetrievalResult, outcome)
        value = RetrievalResult(
            url=outcome.url,
            contentType=media_type(outcome.headers),
            contentLength=len(outcome.content),
            content=outcome.content,
        )
        return Result.ok(value, outcome.status)


def _is_content(outcome: RawOutcome) -> bool:
    """A 2xx reply carrying something other than JSON (the retrieved file itself)."""
    kind = media_type(outcome.headers)
    return 200 <= outcome.status < 300 and bool(kind) and "json" not in kind and "html" not in kind


_COMPOSITES: dict[str, Callable[[BookshareClient, NormalizedParameters], Result]] = {
    "get_artifact_metadata": BookshareClient._get_artifact_metadata,
    "get_periodical_edition": BookshareClient._get_periodical_edition,
    "get_reading_list": BookshareClient._get_reading_list,
    "get_retrieval": BookshareClient._get_retrieval,
}
