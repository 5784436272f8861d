from __future__ import annotations


class MethodNotFoundError(AttributeError):
    """Raised when a forwarded call names a method the target lacks or cannot call."""

    def __init__(self, target: object, method: str) -> None:
        self.target_type = type(target)
        self.type_name = self.target_type.__qualname__
        self.method = method
        super().__init__(f"Call to undefined method {self.type_name}.{method}()")
        # Read by traceback's "Did you mean" suggestions.
        self.name = method
        self.obj = target
