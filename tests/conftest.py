"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A sample class mixing conventional and assignment-operator accessors.
- A builder for hand-made MethodRefs.
"""

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add src to path so we can import 'scala_beaninfo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from scala_beaninfo.introspection.handles import MethodRef  # noqa: E402

MethodFactory = Callable[..., MethodRef]


class ScalaBean:
  """Bean with one conventional property and two assignment-operator properties."""

  def __init__(self):
    self._bean_property = None
    self._read_write = None

  def getBeanProperty(self) -> str:
    return self._bean_property

  def setBeanProperty(self, value: str) -> None:
    self._bean_property = value

  def readOnly(self) -> str:
    return "Foo"

  def readWrite(self) -> str:
    return self._read_write


def _assign_read_write(self, value: str) -> None:
  self._read_write = value


# Not expressible with 'def'; bridge layers attach these at runtime
setattr(ScalaBean, "readWrite_=", _assign_read_write)


class PlainBean:
  """Bean following only the get/set convention."""

  def getName(self) -> str:
    return "plain"

  def setName(self, value: str) -> None:
    pass


@pytest.fixture
def scala_bean_class():
  """Returns the sample alternate-convention class."""
  return ScalaBean


@pytest.fixture
def plain_bean_class():
  """Returns a class without alternate-convention setters."""
  return PlainBean


@pytest.fixture
def make_method() -> MethodFactory:
  """
  Builds MethodRefs without a backing callable.

  Usage: ``make_method("price_=", params=1, void=True)``.
  """

  def _build(
    name: str,
    params: int = 0,
    void: bool = False,
    universal: bool = False,
    value_type: Optional[str] = None,
  ) -> MethodRef:
    return MethodRef(
      name=name,
      parameter_count=params,
      returns_void=void,
      inherited_from_universal_base=universal,
      value_type=value_type,
    )

  return _build
