"""
Method Classification.

Decides whether a public method is an alternate-convention setter (``price_=(v) -> None``),
an alternate-convention getter (``price() -> value``) or irrelevant.

Universal-base members (``__eq__``, ``__repr__``...) are never classified, whatever
their shape.
"""

from typing import Optional, Sequence

from scala_beaninfo.config import DEFAULT_GETTER_PREFIXES, DEFAULT_SETTER_SUFFIX, IntrospectionConfig
from scala_beaninfo.enums import MethodRole
from scala_beaninfo.introspection.handles import MethodHandle


def is_alternate_setter(method: MethodHandle, suffix: str = DEFAULT_SETTER_SUFFIX) -> bool:
  """
  Checks the setter shape: one parameter, no return value, name ending in ``suffix``.

  Args:
      method (MethodHandle): Candidate method.
      suffix (str): Exact, case-sensitive setter suffix.

  Returns:
      bool: True if the method is an alternate setter.
  """
  return method.parameter_count == 1 and method.returns_void and method.name.endswith(suffix)


def is_alternate_getter(method: MethodHandle, prefixes: Sequence[str] = DEFAULT_GETTER_PREFIXES) -> bool:
  """
  Checks the getter shape: no parameters, returns a value, no conventional getter prefix.

  Args:
      method (MethodHandle): Candidate method.
      prefixes (Sequence[str]): Prefixes identifying conventional getters.

  Returns:
      bool: True if the method is an alternate getter.
  """
  return method.parameter_count == 0 and not method.returns_void and not method.name.startswith(tuple(prefixes))


def classify_method(method: MethodHandle, config: Optional[IntrospectionConfig] = None) -> MethodRole:
  """
  Assigns a role to a single method.

  Setter detection wins over getter detection; the two shapes cannot overlap anyway
  since they disagree on the parameter count.

  Args:
      method (MethodHandle): The method to classify.
      config (Optional[IntrospectionConfig]): Naming conventions. Defaults apply when None.

  Returns:
      MethodRole: SETTER, GETTER or IGNORED.
  """
  if method.inherited_from_universal_base:
    return MethodRole.IGNORED

  cfg = config or IntrospectionConfig()
  if is_alternate_setter(method, cfg.setter_suffix):
    return MethodRole.SETTER
  if is_alternate_getter(method, cfg.getter_prefixes):
    return MethodRole.GETTER
  return MethodRole.IGNORED


def property_name_for(method: MethodHandle, role: MethodRole, suffix: str = DEFAULT_SETTER_SUFFIX) -> str:
  """
  Derives the property name an accessor contributes to.

  Setters drop the trailing suffix (``price_=`` -> ``price``); getters are named after
  the property itself.

  Args:
      method (MethodHandle): A classified accessor.
      role (MethodRole): Its role.
      suffix (str): The setter suffix in use.

  Returns:
      str: The property name. May be empty for a setter named exactly ``suffix``.
  """
  if role == MethodRole.SETTER:
    return method.name[: len(method.name) - len(suffix)]
  return method.name
