"""Attribute forwarding shared by chain proxies."""

from __future__ import annotations

import functools


@functools.lru_cache(maxsize=None)
def _slot_names(cls: type) -> frozenset[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return frozenset(names)


class AttributeProxy:
    """Base class that forwards attribute reads, writes and deletes to a target.

    Subclasses store their own state in ``__slots__`` (assigned with
    ``object.__setattr__``) and return the wrapped object from
    ``_proxy_target``. Anything not defined on the subclass itself is looked
    up on the target.
    """

    __slots__ = ()

    def _proxy_target(self):
        raise NotImplementedError

    def _resolve_attribute(self, name: str):
        return getattr(self._proxy_target(), name)

    def __getattr__(self, name):
        # An unset slot must not fall through to the target.
        if name in _slot_names(type(self)):
            raise AttributeError(name)
        return self._resolve_attribute(name)

    def __setattr__(self, name, value):
        setattr(self._proxy_target(), name, value)

    def __delattr__(self, name):
        delattr(self._proxy_target(), name)

    def __dir__(self):
        return sorted(set(object.__dir__(self)) | set(dir(self._proxy_target())))

    def set_property(self, name: str, value):
        """Write ``value`` to the target's attribute ``name`` and return the proxy."""
        setattr(self._proxy_target(), name, value)
        return self

    def get_property(self, name: str):
        """Return the target's attribute ``name`` as-is."""
        return getattr(self._proxy_target(), name)

    def has_property(self, name: str) -> bool:
        """Whether the target has attribute ``name`` set to something other than None."""
        return getattr(self._proxy_target(), name, None) is not None

    def delete_property(self, name: str) -> None:
        delattr(self._proxy_target(), name)
