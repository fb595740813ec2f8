"""
Exception Taxonomy.

Three failure classes exist:

- :class:`InvalidArgumentError`: A mandatory input was ``None``. Raised before any work starts.
- :class:`IntrospectionFailure`: The conventional introspection step could not describe a class.
  Always propagated to the caller.
- :class:`DescriptorSynthesisError`: A property descriptor could not be built for an accessor pair.
  The merger treats this as a soft failure and skips the offending method.
"""

from typing import Any, Optional


class InvalidArgumentError(ValueError):
  """Raised when a required argument is missing."""


def require(value: Any, name: str) -> Any:
  """
  Returns ``value`` unchanged, failing fast if it is ``None``.

  Args:
      value: The argument to check.
      name: Argument name used in the error message.

  Returns:
      Any: The original value.

  Raises:
      InvalidArgumentError: If ``value`` is None.
  """
  if value is None:
    raise InvalidArgumentError(f"'{name}' must not be None")
  return value


class IntrospectionFailure(Exception):
  """
  Raised when conventional introspection cannot produce a BeanInfo for a class.

  Attributes:
      bean_class: The class that was being introspected (may be any object if the
          caller passed something that is not a class).
  """

  def __init__(self, message: str, bean_class: Optional[Any] = None):
    super().__init__(message)
    self.bean_class = bean_class


class DescriptorSynthesisError(ValueError):
  """Raised when an accessor pair cannot form a valid property descriptor."""
