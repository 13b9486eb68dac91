"""Endpoint descriptor registry: method name -> calling contract."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from typing import Literal

from bookshare.errors import DuplicateEndpoint, RegistryFrozen, UnknownEndpoint
from bookshare.formats.descriptor import EndpointDescriptor

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """Table of endpoint descriptors, keyed by canonical method name.

    Populated once at startup and then frozen; a frozen registry is
    read-only and may be shared between threads without locking.
    """

    def __init__(self, descriptors: Iterable[EndpointDescriptor] = ()):
        self._table: dict[str, EndpointDescriptor] = {}
        self._frozen = False
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: EndpointDescriptor, *, override: bool = False) -> None:
        """Insert *descriptor*.

        Raises:
            RegistryFrozen: If :meth:`freeze` has been called.
            DuplicateEndpoint: If the name is taken and *override* is false.
        """
        name = descriptor.name
        if self._frozen:
            raise RegistryFrozen(name)
        if name in self._table:
            if not override:
                raise DuplicateEndpoint(name)
            logger.debug("replacing endpoint %s", name)
        self._table[name] = descriptor

    def lookup(self, method_name: str) -> EndpointDescriptor:
        try:
            return self._table[method_name]
        except KeyError:
            raise UnknownEndpoint(method_name, sorted(self._table)) from None

    def freeze(self) -> EndpointRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def endpoints(
        self,
        *,
        synthetic: bool | Literal["only"] = False,
        topic: str | None = None,
    ) -> list[EndpointDescriptor]:
        """List descriptors in registration order.

        By default only real API operations are listed; ``synthetic=True``
        includes composite operations and ``synthetic="only"`` lists nothing
        else.
        """
        result = []
        for descriptor in self._table.values():
            if synthetic == "only" and not descriptor.synthetic:
                continue
            if synthetic is False and descriptor.synthetic:
                continue
            if topic is not None and descriptor.topic != topic:
                continue
            result.append(descriptor)
        return result

    def topics(self) -> list[str]:
        return list(dict.fromkeys(d.topic for d in self._table.values()))

    def __contains__(self, method_name: object) -> bool:
        return method_name in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)
