"""Base class for validated string identifiers.

An ``Identifier`` is an immutable value object over a single ``str``. The only
public way to obtain one is through validation: calling the class, or
``parse()``. Once constructed, the contained text is guaranteed to satisfy
the subclass grammar for the lifetime of the value.

Ownership:
    Python strings are immutable and reference counted by the interpreter, and
    reference count updates are safe across threads. The borrowed, uniquely
    owned, and shared (single-thread or cross-thread) forms of an identifier
    therefore collapse into this one representation. The conversion methods
    (``as_str``, ``to_owned``, ``share``, ``into_string``) are kept so code
    written against any of the forms reads the same; none of them copies the
    text or re-runs validation.

Comparison:
    Equality, ordering and hashing use the contained text only. An identifier
    also compares equal to a plain ``str`` holding the same text. Ordering of
    Python strings by code point matches byte order of their UTF-8 encoding.

Example:
    >>> from tessera.identifiers import ServerName
    >>> name = ServerName("example.com")
    >>> name == "example.com"
    True
    >>> name.share() is name
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic_core import PydanticCustomError, core_schema

from tessera.identifiers.exceptions import InvalidCharactersError
from tessera.identifiers.validation import MAX_BYTES

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Identifier:
    """Validated, immutable string identifier.

    Subclasses set ``identifier_type`` and implement ``_validate``. They must
    declare ``__slots__ = ()`` and add no fields.

    Attributes:
        value: The validated identifier text.

    Raises:
        IdentifierError: If value does not match the subclass grammar.
        TypeError: If value is not a string.
    """

    value: str

    identifier_type: ClassVar[str] = "Identifier"
    json_schema_description: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"{self.identifier_type} must be a str, got {type(self.value).__name__}"
            raise TypeError(msg)
        type(self)._validate(self.value)

    @classmethod
    def _validate(cls, value: str) -> None:
        raise NotImplementedError

    @classmethod
    def _from_validated(cls, value: str) -> Self:
        """Wrap text that is already known to satisfy the grammar.

        Only called right after a successful validation, or when deriving an
        identifier from part of another already validated identifier.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    # -- Construction ---------------------------------------------------------

    @classmethod
    def parse(cls, value: str | bytes | bytearray | memoryview | Identifier) -> Self:
        """Validate any string-like input and return an identifier.

        ``bytes``-like input is decoded as UTF-8. An instance of this class is
        returned unchanged; an instance of another identifier type is
        validated against this type's grammar.

        Raises:
            IdentifierError: If the text does not match the grammar.
            TypeError: If *value* is not string-like.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Identifier):
            value = value.value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            try:
                value = bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidCharactersError(cls.identifier_type, repr(bytes(value))) from exc
        elif not isinstance(value, str):
            msg = f"Cannot parse {cls.identifier_type} from {type(value).__name__}"
            raise TypeError(msg)
        cls._validate(value)
        return cls._from_validated(str(value))

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Return True if *value* is a ``str`` matching this type's grammar."""
        if not isinstance(value, str):
            return False
        try:
            cls._validate(value)
        except ValueError:
            return False
        return True

    # -- Read access ------------------------------------------------------------

    def as_str(self) -> str:
        """Return the identifier text without copying it."""
        return self.value

    def as_bytes(self) -> bytes:
        """Return the UTF-8 encoding of the identifier text."""
        return self.value.encode("utf-8")

    @property
    def byte_len(self) -> int:
        """Length of the identifier in bytes of its UTF-8 encoding."""
        return len(self.as_bytes())

    # -- Ownership conversions --------------------------------------------------

    def to_owned(self) -> Self:
        """Return an owned identifier equal to this one.

        Instances are immutable, so this is the same object.
        """
        return self

    def share(self) -> Self:
        """Return a shared handle to this identifier, safe to pass between threads."""
        return self

    def into_string(self) -> str:
        """Release the identifier as a plain, unvalidated ``str``."""
        return self.value

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[type[Self], tuple[str]]:
        return (type(self), (self.value,))

    # -- Comparison -------------------------------------------------------------

    def _comparable(self, other: object) -> str | None:
        if isinstance(other, str):
            return other
        if isinstance(other, Identifier) and other.__class__ is self.__class__:
            return other.value
        return None

    def __eq__(self, other: object) -> bool:
        text = self._comparable(other)
        if text is None:
            return NotImplemented
        return self.value == text

    def __lt__(self, other: object) -> bool:
        text = self._comparable(other)
        if text is None:
            return NotImplemented
        return self.value < text

    def __le__(self, other: object) -> bool:
        text = self._comparable(other)
        if text is None:
            return NotImplemented
        return self.value <= text

    def __gt__(self, other: object) -> bool:
        text = self._comparable(other)
        if text is None:
            return NotImplemented
        return self.value > text

    def __ge__(self, other: object) -> bool:
        text = self._comparable(other)
        if text is None:
            return NotImplemented
        return self.value >= text

    def __hash__(self) -> int:
        return hash(self.value)

    # -- Rendering ----------------------------------------------------------------

    def __str__(self) -> str:
        """Return the identifier text exactly as it was validated."""
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    # -- Pydantic integration -----------------------------------------------------

    @classmethod
    def _validate_input(cls, value: Any) -> Self:
        if isinstance(value, (str, Identifier)):
            return cls.parse(value)
        raise PydanticCustomError("string_type", "Input should be a valid string")

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Validate on every input path; serialize as the plain string."""
        return core_schema.no_info_plain_validator_function(
            cls._validate_input,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        # max_length counts characters; the binding cap is in UTF-8 bytes.
        json_schema = handler(core_schema.str_schema(max_length=MAX_BYTES))
        json_schema["title"] = cls.__name__
        limit = f"at most {MAX_BYTES} bytes when UTF-8 encoded"
        if cls.json_schema_description:
            json_schema["description"] = f"{cls.json_schema_description}; {limit}"
        else:
            json_schema["description"] = f"At most {MAX_BYTES} bytes when UTF-8 encoded"
        return json_schema
