"""
This module provides a mixin implementing the ``TypeName{field=value, field=value}`` text form used throughout
vectoral, along with the helpers needed to parse that form back.

Values are formatted with ``repr`` (or ``str``) so that floats survive a round trip exactly.  Nested values that are
themselves text serializable (for instance :class:`.RealNumber` components of a vector) simply nest their own braces,
which is why splitting is done based on bracket depth rather than a plain ``split(', ')``.
"""

from typing import Any, Iterable, Sequence

from vectoral.errors import ParseError


_OPENING = '{['
_CLOSING = '}]'


class TextSerializable:
    """
    A mixin class that provides ``__str__`` and ``__repr__`` in the ``TypeName{field=value, ...}`` form.

    Subclasses implement :meth:`_text_fields` which returns the (name, value) pairs to print in order.  The type name
    defaults to the class name.
    """

    __slots__ = ()

    def _text_fields(self) -> Iterable[tuple[str, Any]]:
        """
        Returns the name/value pairs that make up the text form, in order.
        """
        raise NotImplementedError

    @classmethod
    def _text_name(cls) -> str:
        return cls.__name__

    def _build_representation(self, attribute_repr: bool) -> str:
        """
        Implements the basic functionality of turning the instance into a string including all fields.

        :param attribute_repr: Whether to call repr on the field values instead of str.
        """

        fields = []
        for name, value in self._text_fields():
            if attribute_repr:
                fields.append(f"{name}={value!r}")
            else:
                fields.append(f"{name}={value}")
        return f"{self._text_name()}{{{', '.join(fields)}}}"

    def __str__(self) -> str:
        return self._build_representation(False)

    def __repr__(self) -> str:
        return self._build_representation(True)


def split_top_level(text: str, separator: str = ',') -> list[str]:
    """
    Splits `text` on `separator` ignoring separators nested inside braces or brackets.

    :param text: the text to split
    :param separator: the single character to split on
    :return: the stripped pieces.  An empty (or whitespace only) string gives an empty list
    :raises ValueError: if the braces/brackets are unbalanced
    """

    if not text.strip():
        return []

    pieces = []
    depth = 0
    start = 0
    for index, character in enumerate(text):
        if character in _OPENING:
            depth += 1
        elif character in _CLOSING:
            depth -= 1
            if depth < 0:
                raise ValueError('unbalanced closing bracket')
        elif character == separator and depth == 0:
            pieces.append(text[start:index].strip())
            start = index + 1

    if depth != 0:
        raise ValueError('unbalanced opening bracket')

    pieces.append(text[start:].strip())

    return pieces


def split_text_fields(text: str, type_name: str | Sequence[str]) -> tuple[str, dict[str, str]]:
    """
    Breaks ``TypeName{a=1, b=2}`` into its type name and a dictionary of raw field strings.

    :param text: the text to interpret
    :param type_name: the type name (or names) that are acceptable as the prefix
    :return: the matched type name and a dictionary mapping field names to their unparsed value strings
    :raises ParseError: if the text is not of the expected form
    """

    names = (type_name,) if isinstance(type_name, str) else tuple(type_name)

    stripped = text.strip()

    for name in names:
        if stripped.startswith(name + '{'):
            matched = name
            break
    else:
        raise ParseError(text, names[0], 'unexpected type name')

    if not stripped.endswith('}'):
        raise ParseError(text, matched, 'missing closing brace')

    body = stripped[len(matched) + 1:-1]

    try:
        pieces = split_top_level(body)
    except ValueError as err:
        raise ParseError(text, matched, str(err)) from err

    fields: dict[str, str] = {}
    for piece in pieces:
        name, sep, value = piece.partition('=')
        name = name.strip()
        if not sep or not name or not value.strip():
            raise ParseError(text, matched, f'malformed field {piece!r}')
        if name in fields:
            raise ParseError(text, matched, f'duplicate field {name!r}')
        fields[name] = value.strip()

    return matched, fields


def require_fields(fields: dict[str, str], expected: Sequence[str], text: str, type_name: str) -> list[str]:
    """
    Checks that exactly the `expected` fields are present and returns their raw values in the expected order.

    :raises ParseError: if a field is missing or an unknown field is present
    """

    if set(fields) != set(expected):
        raise ParseError(text, type_name, f'expected fields {", ".join(expected)} but got {", ".join(fields)}')

    return [fields[name] for name in expected]


def parse_float(raw: str, text: str, type_name: str) -> float:
    """
    Interprets a raw field value as a float, accepting ``inf``, ``nan``, ``Infinity`` and ``NaN`` spellings.

    :raises ParseError: if the value is not a number
    """

    if '_' in raw:
        raise ParseError(text, type_name, f'{raw!r} is not a number')

    try:
        return float(raw)
    except ValueError as err:
        raise ParseError(text, type_name, f'{raw!r} is not a number') from err
