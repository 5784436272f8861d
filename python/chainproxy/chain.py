"""Method chaining for objects whose methods were not written to chain."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Iterable

from .errors import MethodNotFoundError
from .proxy import AttributeProxy

logger = logging.getLogger(__name__)

# Results of these types are returned verbatim even when propagating.
_PLAIN_VALUE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def _is_object(value) -> bool:
    return value is not None and not isinstance(value, _PLAIN_VALUE_TYPES)


def _is_method(target, name: str, member) -> bool:
    # Callables stored on the instance (callbacks, nested objects) are data.
    if not inspect.isroutine(member):
        return False
    if inspect.isclass(target) or inspect.ismodule(target):
        return True
    return name not in getattr(target, "__dict__", {})


class Chain(AttributeProxy):
    """Decorates a target so that calls returning nothing return the proxy instead.

    As long as "setter" methods are called, the proxy keeps coming back, so
    an otherwise unchainable object can be used fluently::

        link(Foo()).set_x(42).set_y(7).output()

    A propagating proxy (see ``reaction``) also wraps every object returned by
    a call, so chains continue into sub-objects::

        reaction(Foo()).get_bar().set_z(37).write()

    Methods that intentionally return None are rewritten too. Use the
    whitelist, ``disable()``/``enable()`` or a one-off ``raw()`` call to get
    the target's own result back.
    """

    __slots__ = ("_target", "_enabled", "_propagate", "_whitelist")

    def __init__(
        self,
        target,
        *,
        propagate: bool = False,
        enabled: bool = True,
        whitelist: Iterable[str] = (),
    ) -> None:
        if target is None:
            raise TypeError("cannot chain calls on None")
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_propagate", bool(propagate))
        object.__setattr__(self, "_enabled", bool(enabled))
        object.__setattr__(self, "_whitelist", set(_names(whitelist)))

    @classmethod
    def link(cls, target) -> "Chain":
        """Wrap ``target``; object results of its methods are returned unwrapped."""
        return cls(target, propagate=False)

    @classmethod
    def reaction(cls, target) -> "Chain":
        """Wrap ``target``; object results of its methods are wrapped in new propagating proxies."""
        return cls(target, propagate=True)

    def _proxy_target(self):
        return self._target

    def _resolve_attribute(self, name: str):
        target = self._target
        try:
            member = super()._resolve_attribute(name)
        except AttributeError as exc:
            logger.debug("%s has no attribute %r", type(target).__qualname__, name)
            raise MethodNotFoundError(target, name) from exc
        if not _is_method(target, name, member):
            return member

        @functools.wraps(member, updated=())
        def dispatch(*args: Any, **kwargs: Any):
            return self.invoke(name, *args, **kwargs)

        return dispatch

    def _lookup_method(self, method: str):
        target = self._target
        try:
            member = getattr(target, method)
        except AttributeError as exc:
            raise MethodNotFoundError(target, method) from exc
        if not callable(member):
            raise MethodNotFoundError(target, method)
        return member

    def raw(self, method: str, /, *args: Any, **kwargs: Any):
        """Call ``method`` on the target and return its result without any rewriting."""
        return self._lookup_method(method)(*args, **kwargs)

    def invoke(self, method: str, /, *args: Any, **kwargs: Any):
        """Call ``method`` on the target and apply the chaining rules to its result.

        Returns the target's result untouched when the proxy is disabled or
        the method is whitelisted. Otherwise a result that is the target
        itself or None becomes this proxy, and in propagating mode any other
        object result is wrapped in a new propagating proxy.
        """
        result = self.raw(method, *args, **kwargs)

        if not self._enabled or method in self._whitelist:
            return result

        if result is self._target:
            return self

        if self._propagate and _is_object(result):
            if isinstance(result, Chain):
                return result
            return Chain.reaction(result)

        if result is None:
            return self

        return result

    def unwrap(self):
        """Return the wrapped target."""
        return self._target

    def is_enabled(self) -> bool:
        return self._enabled

    def is_propagating(self) -> bool:
        return self._propagate

    def disable(self) -> "Chain":
        """Return the target's results as-is until ``enable()`` is called."""
        object.__setattr__(self, "_enabled", False)
        logger.debug("chaining disabled for %r", self)
        return self

    def enable(self) -> "Chain":
        object.__setattr__(self, "_enabled", True)
        logger.debug("chaining enabled for %r", self)
        return self

    def add_to_whitelist(self, method: str) -> "Chain":
        """Always return the raw result of ``method``, even when it is None."""
        self._whitelist.add(method)
        logger.debug("whitelisted %r on %r", method, self)
        return self

    def remove_from_whitelist(self, method: str) -> "Chain":
        self._whitelist.discard(method)
        logger.debug("removed %r from whitelist on %r", method, self)
        return self

    def get_whitelist(self) -> frozenset[str]:
        """Return a snapshot of the whitelisted method names."""
        return frozenset(self._whitelist)

    def set_whitelist(self, methods: Iterable[str]) -> "Chain":
        """Replace the whitelist with ``methods``."""
        object.__setattr__(self, "_whitelist", set(_names(methods)))
        return self

    def __repr__(self) -> str:
        mode = "reaction" if self._propagate else "link"
        return f"Chain.{mode}({self._target!r})"


def _names(methods: Iterable[str]) -> Iterable[str]:
    if isinstance(methods, str):
        raise TypeError(
            f"whitelist must be an iterable of method names, got {type(methods).__name__}"
        )
    return methods


link = Chain.link
reaction = Chain.reaction
