# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module defines the exceptions raised by vectoral.

The taxonomy is small:

* :class:`DimensionMismatchError` two vectors of different lengths are combined
* :class:`UnsupportedOperationError` an operation has no defined meaning for the operands (multiplying 3 element
  vectors, normalizing a zero vector, ...)
* :class:`NonFiniteArithmeticError` arithmetic is attempted on a non-finite :class:`.Fraction`
* :class:`ParseError` text could not be interpreted as the requested type

Division by zero and table overflow use the built in :class:`ZeroDivisionError` and :class:`OverflowError`.
"""


class VectoralError(Exception):
    """
    The base class for all errors specific to vectoral.
    """


class DimensionMismatchError(VectoralError, ValueError):
    """
    Raised when two vectors with different lengths are combined.
    """

    def __init__(self, expected: int, received: int, operation: str = 'combine'):
        """
        :param expected: the length of the vector the operation was called on
        :param received: the length of the other operand
        :param operation: the name of the operation for the message
        """

        super().__init__(f'Cannot {operation} a vector of length {expected} with a vector of length {received}')

        self.expected = expected
        self.received = received


class UnsupportedOperationError(VectoralError):
    """
    Raised when an operation has no defined meaning for the given operands.

    This is distinct from :class:`DimensionMismatchError`: the input is well formed but the operation is not defined.
    """


class NonFiniteArithmeticError(VectoralError, ArithmeticError):
    """
    Raised when arithmetic is attempted on a fraction that represents a non-finite value.
    """


class ParseError(VectoralError, ValueError):
    """
    Raised when a string cannot be parsed into the requested type.
    """

    def __init__(self, text: str, type_name: str, reason: str | None = None):
        """
        :param text: the text that failed to parse
        :param type_name: the name of the type that was being parsed
        :param reason: an optional explanation
        """

        message = f'The provided string does not represent a {type_name}: {text!r}'
        if reason:
            message += f' ({reason})'

        super().__init__(message)

        self.text = text
        self.type_name = type_name
