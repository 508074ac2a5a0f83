"""Base class for the API controllers."""

from typing import Any

from classy_fastapi import Routable

from domain.exceptions import ValidationError


class ControllerBase(Routable):
    """Routable controller mounted under a fixed prefix.

    Endpoints are declared with the ``classy_fastapi`` decorators; ``Routable``
    binds them to the instance and exposes them on ``self.router``.
    """

    def __init__(self, prefix: str, tags: list[str]) -> None:
        super().__init__(prefix=prefix, tags=tags)

    @staticmethod
    def ensure_body(body: Any, name: str) -> Any:
        """Reject requests whose body is absent, before anything is dispatched."""
        if body is None:
            raise ValidationError(f"{name} object is null")
        return body
