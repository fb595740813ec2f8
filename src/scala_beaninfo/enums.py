"""
Enumerations for scala-beaninfo.

Defines method classification roles and the precedence bounds used to order
competing BeanInfo factories.
"""

from enum import Enum, IntEnum


class MethodRole(str, Enum):
  """
  Result of classifying a single public method against the alternate convention.
  """

  SETTER = "setter"  # <property>_=(value) -> None
  GETTER = "getter"  # <property>() -> value
  IGNORED = "ignored"


class Precedence(IntEnum):
  """
  Bounds of the factory ordering scale. Lower values are consulted first.
  """

  HIGHEST = -(2**31)
  LOWEST = 2**31 - 1
