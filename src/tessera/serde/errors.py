"""Structured errors for payload decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tessera.identifiers.exceptions import IdentifierError

if TYPE_CHECKING:
    from pydantic import ValidationError

    from tessera.identifiers.exceptions import ErrorKind

__all__ = ["DecodeError"]


class DecodeError(Exception):
    """Raised when a wire payload cannot be decoded into a model.

    Identifier validation failures inside the payload are surfaced with the
    same taxonomy the identifier types use, so callers can branch on
    ``kinds`` without digging through pydantic's error list.

    Attributes:
        error_code: "DECODE_ERROR" (class constant).
        model: Name of the model being decoded.
        errors: pydantic error dictionaries, without the exception objects.
        identifier_errors: Identifier errors raised while decoding, in order.
        context: Structured debugging information.

    Example:
        >>> raise DecodeError("ServerAclEventContent", [{"loc": ("allow",)}])
        DecodeError: Failed to decode ServerAclEventContent (model=ServerAclEventContent, error_count=1)
    """

    error_code: str = "DECODE_ERROR"

    def __init__(
        self,
        model: str,
        errors: list[dict[str, Any]],
        identifier_errors: list[IdentifierError] | None = None,
    ) -> None:
        self.model = model
        self.errors = errors
        self.identifier_errors = identifier_errors or []
        self.message = f"Failed to decode {model}"
        self.context: dict[str, Any] = {"model": model, "error_count": len(errors)}
        if self.identifier_errors:
            self.context["kinds"] = ",".join(self.kinds)
        super().__init__(self.message)

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> DecodeError:
        """Build a DecodeError from a pydantic ValidationError."""
        identifier_errors = []
        for error in exc.errors():
            cause = (error.get("ctx") or {}).get("error")
            if isinstance(cause, IdentifierError):
                identifier_errors.append(cause)
        return cls(
            model,
            exc.errors(include_context=False, include_url=False),
            identifier_errors,
        )

    @property
    def kinds(self) -> list[ErrorKind]:
        """Identifier error kinds found in the payload, in order."""
        return [error.kind for error in self.identifier_errors]

    def __str__(self) -> str:
        """String representation including context for logging."""
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"
