"""
Introspection Data Model.

This module defines the value types exchanged between conventional introspection,
the descriptor merger and the BeanInfo factories.

Classes:
    MethodHandle: Protocol describing the four attributes classification needs.
    MethodRef: Concrete, immutable MethodHandle built from a live callable.
    PropertyDescriptor: A named pair of optional read/write accessors.
    BeanDescriptor: Class-level metadata.
    BeanInfo: The full result of conventional introspection.

Accessors are stored by reference. Building or copying a descriptor never clones
the handles it holds, so identity checks on accessors survive a merge.
"""

import inspect
import typing
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from scala_beaninfo.errors import DescriptorSynthesisError

# Every Python object answers to these, whatever its declared type.
UNIVERSAL_BASE_METHODS = frozenset(dir(object))


@runtime_checkable
class MethodHandle(Protocol):
  """
  Opaque reference to a public member of a class.
  """

  name: str
  parameter_count: int
  returns_void: bool
  inherited_from_universal_base: bool


def _annotation_name(annotation: Any) -> Optional[str]:
  """Serializes an annotation to a comparable string, or None when absent."""
  if annotation is inspect.Parameter.empty:
    return None
  if isinstance(annotation, str):
    return annotation
  # Parameterized generics keep their arguments: Dict[str, int] != Dict[str, str]
  if typing.get_origin(annotation) is not None:
    return inspect.formatannotation(annotation)
  if hasattr(annotation, "__name__"):
    return annotation.__name__
  return str(annotation)


class MethodRef(BaseModel):
  """
  Immutable description of one public method.

  Attributes:
      name (str): Member name as exposed on the class (may be a non-identifier such as ``price_=``).
      parameter_count (int): Number of declared parameters, excluding ``self``/``cls`` and variadics.
      returns_void (bool): True when the return annotation is ``None``.
      inherited_from_universal_base (bool): True for members every object has (``__eq__``, ``__repr__``...).
      owner (Optional[str]): Qualified name of the class the member was found on.
      value_type (Optional[str]): Return annotation of a 0-arg method, or the first
          parameter's annotation of a 1-arg method.
      target (Any): The underlying callable. Excluded from serialization.
  """

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  name: str
  parameter_count: int = Field(ge=0)
  returns_void: bool
  inherited_from_universal_base: bool = False
  owner: Optional[str] = None
  value_type: Optional[str] = None
  target: Any = Field(None, exclude=True, repr=False)

  @classmethod
  def from_callable(
    cls,
    name: str,
    func: Callable[..., Any],
    owner: Optional[str] = None,
    skip_first: bool = True,
  ) -> "MethodRef":
    """
    Creates a MethodRef from a live Python callable.

    Args:
        name: The attribute name the callable is reachable under.
        func: The function, bound method or builtin to describe.
        owner: Qualified name of the declaring class.
        skip_first: Drop the leading parameter (``self`` of a plain function looked up on a class).

    Returns:
        MethodRef: The populated handle.
    """
    try:
      sig = inspect.signature(func)
    except (ValueError, TypeError):
      # Builtins without text signatures
      return cls(
        name=name,
        parameter_count=0,
        returns_void=False,
        inherited_from_universal_base=name in UNIVERSAL_BASE_METHODS,
        owner=owner,
        target=func,
      )

    params = [
      p
      for p in sig.parameters.values()
      if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if skip_first and params and params[0].kind != inspect.Parameter.KEYWORD_ONLY:
      params = params[1:]

    returns = sig.return_annotation
    returns_void = returns is None or returns == "None"

    value_type = None
    if len(params) == 0 and not returns_void:
      value_type = _annotation_name(returns)
    elif len(params) == 1:
      value_type = _annotation_name(params[0].annotation)

    return cls(
      name=name,
      parameter_count=len(params),
      returns_void=returns_void,
      inherited_from_universal_base=name in UNIVERSAL_BASE_METHODS,
      owner=owner,
      value_type=value_type,
      target=func,
    )


class PropertyDescriptor(BaseModel):
  """
  One discoverable property of a class.

  A descriptor needs a non-empty name and at least one accessor. The read accessor
  takes no argument and returns a value; the write accessor takes exactly one.
  If both accessors declare a value type, the types must agree.

  Direct construction raises ``pydantic.ValidationError`` on violation. :meth:`create`
  and the ``with_*`` helpers raise :class:`DescriptorSynthesisError` instead.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  name: str
  read_accessor: Optional[Any] = None
  write_accessor: Optional[Any] = None

  @model_validator(mode="after")
  def check_accessors(self) -> "PropertyDescriptor":
    if not self.name:
      raise ValueError("property name must not be empty")
    if self.read_accessor is None and self.write_accessor is None:
      raise ValueError(f"property '{self.name}' has neither a read nor a write accessor")

    read, write = self.read_accessor, self.write_accessor
    if read is not None:
      if not isinstance(read, MethodHandle):
        raise ValueError(f"read accessor of '{self.name}' is not a method handle")
      if read.parameter_count != 0 or read.returns_void:
        raise ValueError(f"bad read accessor '{read.name}' for property '{self.name}'")
    if write is not None:
      if not isinstance(write, MethodHandle):
        raise ValueError(f"write accessor of '{self.name}' is not a method handle")
      if write.parameter_count != 1:
        raise ValueError(f"bad write accessor '{write.name}' for property '{self.name}'")

    read_type = getattr(read, "value_type", None)
    write_type = getattr(write, "value_type", None)
    if read_type and write_type and read_type != write_type:
      raise ValueError(
        f"type mismatch between read accessor '{read.name}' ({read_type}) and "
        f"write accessor '{write.name}' ({write_type}) for property '{self.name}'"
      )
    return self

  @classmethod
  def create(
    cls,
    name: str,
    read_accessor: Optional[MethodHandle] = None,
    write_accessor: Optional[MethodHandle] = None,
  ) -> "PropertyDescriptor":
    """
    Builds a validated descriptor.

    Raises:
        DescriptorSynthesisError: If the accessors cannot describe a property.
    """
    try:
      return cls(name=name, read_accessor=read_accessor, write_accessor=write_accessor)
    except ValidationError as e:
      raise DescriptorSynthesisError(_first_error(e)) from e

  def with_read_accessor(self, method: MethodHandle) -> "PropertyDescriptor":
    """Returns a copy of this descriptor using ``method`` as the read accessor."""
    return self.create(self.name, method, self.write_accessor)

  def with_write_accessor(self, method: MethodHandle) -> "PropertyDescriptor":
    """Returns a copy of this descriptor using ``method`` as the write accessor."""
    return self.create(self.name, self.read_accessor, method)

  @property
  def readable(self) -> bool:
    return self.read_accessor is not None

  @property
  def writable(self) -> bool:
    return self.write_accessor is not None


def _first_error(error: ValidationError) -> str:
  details = error.errors()
  if not details:
    return str(error)
  msg = details[0].get("msg", str(error))
  # Pydantic prefixes messages raised from validators
  return msg.removeprefix("Value error, ")


class BeanDescriptor(BaseModel):
  """Class-level metadata of an introspected bean."""

  name: str
  qualified_name: str
  summary: str = ""


class BeanInfo(BaseModel):
  """
  Result of conventional introspection for one class.

  ``method_descriptors`` holds every public method of the class and is what the
  alternate-convention classifier scans.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  bean_class: Optional[Any] = None
  bean_descriptor: Optional[BeanDescriptor] = None
  property_descriptors: List[PropertyDescriptor] = Field(default_factory=list)
  method_descriptors: List[Any] = Field(default_factory=list)
  event_set_descriptors: List[Any] = Field(default_factory=list)
  additional_bean_info: List["BeanInfo"] = Field(default_factory=list)
  default_property_index: int = -1
  default_event_index: int = -1
  icons: Dict[int, Any] = Field(default_factory=dict)

  def get_icon(self, icon_kind: int) -> Optional[Any]:
    """
    Returns the icon registered for ``icon_kind``, if any.

    Args:
        icon_kind (int): Host-defined icon kind (size/colour variant).

    Returns:
        Optional[Any]: The icon object or None.
    """
    return self.icons.get(icon_kind)


BeanInfo.model_rebuild()
