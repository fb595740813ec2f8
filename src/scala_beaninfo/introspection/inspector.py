"""
Conventional Introspection for Python Classes.

This module provides the :class:`RuntimeIntrospector`, which builds the baseline
:class:`BeanInfo` of a live class using ``inspect``:

1.  **Method Discovery**: Every public routine reachable on the class (inherited ones
    included) becomes a :class:`MethodRef`. Members whose names are not identifiers,
    such as ``price_=`` attached with ``setattr``, are discovered too.
2.  **Conventional Properties**: ``getX()``/``isX() -> bool`` readers and ``setX(v)``
    writers are paired by property name. Snake-case spellings (``get_x``) are accepted.
3.  **Class Property**: Every bean exposes a read-only ``class`` property.
"""

import inspect
from typing import Any, Callable, Dict, List

from scala_beaninfo.errors import DescriptorSynthesisError, IntrospectionFailure
from scala_beaninfo.introspection.handles import BeanDescriptor, BeanInfo, MethodRef, PropertyDescriptor
from scala_beaninfo.introspection.merger import property_name_key
from scala_beaninfo.utils.console import log_debug

Introspector = Callable[[Any], BeanInfo]

# Universal-base members kept in the method list so callers can see them being excluded.
_VISIBLE_DUNDERS = frozenset({"__eq__", "__hash__", "__repr__", "__str__"})

CLASS_ACCESSOR = MethodRef(
  name="__class__",
  parameter_count=0,
  returns_void=False,
  inherited_from_universal_base=True,
  owner="builtins.object",
  value_type="type",
  target=type,
)


def decapitalize(name: str) -> str:
  """
  Converts an accessor suffix to a property name.

  ``Foo`` becomes ``foo`` and ``_foo`` becomes ``foo``. Names starting with two
  capitals are left alone, so ``URL`` stays ``URL``.

  Args:
      name (str): The part of the accessor name after ``get``/``is``/``set``.

  Returns:
      str: The property name.
  """
  name = name.lstrip("_")
  if not name:
    return name
  if len(name) > 1 and name[0].isupper() and name[1].isupper():
    return name
  return name[0].lower() + name[1:]


class RuntimeIntrospector:
  """
  Conventional introspection backed by ``inspect.getmembers``.

  Instances are callable and match the :data:`Introspector` signature.
  """

  def __call__(self, bean_class: Any) -> BeanInfo:
    return self.introspect(bean_class)

  def introspect(self, bean_class: Any) -> BeanInfo:
    """
    Describes ``bean_class``.

    Args:
        bean_class: The class to introspect.

    Returns:
        BeanInfo: Conventional descriptors plus the full public method list.

    Raises:
        IntrospectionFailure: If ``bean_class`` is not a class or its members cannot be read.
    """
    if not inspect.isclass(bean_class):
      raise IntrospectionFailure(f"Cannot introspect {bean_class!r}: not a class", bean_class)

    methods = self.collect_methods(bean_class)
    return BeanInfo(
      bean_class=bean_class,
      bean_descriptor=_describe_bean(bean_class),
      property_descriptors=self._conventional_properties(methods),
      method_descriptors=methods,
    )

  def collect_methods(self, bean_class: type) -> List[MethodRef]:
    """
    Lists the public methods of a class as MethodRefs, in ``inspect.getmembers`` order.

    Raises:
        IntrospectionFailure: If reading the class members fails.
    """
    owner = f"{bean_class.__module__}.{bean_class.__qualname__}"
    try:
      members = inspect.getmembers(bean_class)
    except Exception as e:
      raise IntrospectionFailure(f"Cannot read members of {owner}: {e}", bean_class) from e

    methods = []
    for name, member in members:
      if name.startswith("_") and name not in _VISIBLE_DUNDERS:
        continue
      if inspect.isclass(member) or not callable(member):
        continue

      # staticmethods have no receiver; classmethods come back already bound
      is_static = isinstance(inspect.getattr_static(bean_class, name, None), staticmethod)
      skip_first = not (is_static or inspect.ismethod(member))
      methods.append(MethodRef.from_callable(name, member, owner=owner, skip_first=skip_first))

    return methods

  def _conventional_properties(self, methods: List[MethodRef]) -> List[PropertyDescriptor]:
    reads: Dict[str, MethodRef] = {}
    writes: Dict[str, MethodRef] = {}

    for m in methods:
      if m.inherited_from_universal_base:
        continue
      name = m.name
      if name.startswith("is") and m.parameter_count == 0 and m.value_type == "bool":
        prop = decapitalize(name[2:])
        if prop:
          # isX() takes precedence over getX()
          reads[prop] = m
      elif name.startswith("get") and m.parameter_count == 0 and not m.returns_void:
        prop = decapitalize(name[3:])
        if prop:
          reads.setdefault(prop, m)
      elif name.startswith("set") and m.parameter_count == 1:
        prop = decapitalize(name[3:])
        if prop:
          writes.setdefault(prop, m)

    descriptors = [PropertyDescriptor.create("class", CLASS_ACCESSOR, None)]
    for prop in sorted((set(reads) | set(writes)) - {"class"}):
      read, write = reads.get(prop), writes.get(prop)
      try:
        descriptors.append(PropertyDescriptor.create(prop, read, write))
      except DescriptorSynthesisError as e:
        log_debug(f"Dropping write accessor of conventional property '{prop}': {e}")
        if read is not None:
          descriptors.append(PropertyDescriptor.create(prop, read, None))

    return sorted(descriptors, key=lambda pd: property_name_key(pd.name))


def _describe_bean(bean_class: type) -> BeanDescriptor:
  doc = inspect.getdoc(bean_class) or ""
  return BeanDescriptor(
    name=bean_class.__name__,
    qualified_name=f"{bean_class.__module__}.{bean_class.__qualname__}",
    summary=doc.strip().split("\n")[0] if doc else "",
  )


def introspect(bean_class: Any) -> BeanInfo:
  """
  Convenience wrapper around :class:`RuntimeIntrospector`.

  Args:
      bean_class: The class to introspect.

  Returns:
      BeanInfo: The conventional introspection result.
  """
  return RuntimeIntrospector().introspect(bean_class)
