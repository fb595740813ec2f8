"""
BeanInfo Factories and Convention Gate.

A host asks its registered factories, in ascending ``order``, for the BeanInfo of a
class and keeps the first non-None answer.

- :class:`ScalaBeanInfoFactory` answers only for classes that declare at least one
  alternate-convention setter. It sits just above the lowest precedence.
- :class:`ExtendedBeanInfoFactory` answers for every class with the conventional
  result and is meant to be the final fallback.

Results are computed per call and never cached.
"""

from typing import Any, Iterable, List, Optional, Protocol

from scala_beaninfo.config import IntrospectionConfig
from scala_beaninfo.enums import MethodRole, Precedence
from scala_beaninfo.errors import IntrospectionFailure, require
from scala_beaninfo.introspection.bean_info import AugmentedBeanInfo
from scala_beaninfo.introspection.classifier import classify_method
from scala_beaninfo.introspection.handles import BeanInfo, MethodHandle
from scala_beaninfo.introspection.inspector import Introspector, introspect
from scala_beaninfo.utils.console import log_debug, set_log_level

SCALA_BEAN_INFO_ORDER = Precedence.LOWEST - 1000


class BeanInfoFactory(Protocol):
  """
  Protocol definition for a BeanInfo strategy.
  """

  @property
  def order(self) -> int: ...

  def supports(self, bean_class: Any) -> bool: ...

  def get_bean_info(self, bean_class: Any) -> Optional[Any]: ...


def applies_alternate_convention(
  methods: Iterable[MethodHandle],
  config: Optional[IntrospectionConfig] = None,
) -> bool:
  """
  Checks whether any method is an alternate-convention setter.

  Args:
      methods: The public methods of a class.
      config: Naming conventions. Defaults apply when None.

  Returns:
      bool: True if at least one ``<property>_=`` setter is present.

  Raises:
      InvalidArgumentError: If ``methods`` is None.
  """
  require(methods, "methods")
  cfg = config or IntrospectionConfig()
  return any(classify_method(m, cfg) == MethodRole.SETTER for m in methods)


def _run_introspector(introspector: Introspector, bean_class: Any) -> BeanInfo:
  require(bean_class, "bean_class")
  try:
    return introspector(bean_class)
  except IntrospectionFailure:
    raise
  except Exception as e:
    raise IntrospectionFailure(f"Introspection of {bean_class!r} failed: {e}", bean_class) from e


class ScalaBeanInfoFactory:
  """
  Factory exposing ``<property>_=`` setters and bare-name getters as properties.

  Attributes:
      config (IntrospectionConfig): Naming conventions used by the gate and the merger.
  """

  def __init__(
    self,
    introspector: Optional[Introspector] = None,
    config: Optional[IntrospectionConfig] = None,
  ):
    """
    Args:
        introspector: Conventional introspection collaborator. Defaults to :func:`introspect`.
        config: Naming conventions. When given, its ``log_level`` becomes the package logger threshold.
    """
    self._introspector = introspector or introspect
    self.config = config or IntrospectionConfig()
    if config is not None:
      set_log_level(config.log_level)

  @property
  def order(self) -> int:
    """Just above the lowest precedence, so the default fallback still comes last."""
    return int(SCALA_BEAN_INFO_ORDER)

  def supports(self, bean_class: Any) -> bool:
    """
    Returns True if ``bean_class`` declares an alternate-convention setter.

    Raises:
        IntrospectionFailure: If the class cannot be introspected.
    """
    info = _run_introspector(self._introspector, bean_class)
    return applies_alternate_convention(info.method_descriptors, self.config)

  def get_bean_info(self, bean_class: Any) -> Optional[AugmentedBeanInfo]:
    """
    Builds the augmented BeanInfo of ``bean_class``.

    Args:
        bean_class: The class to describe.

    Returns:
        Optional[AugmentedBeanInfo]: The merged view, or None when the class does not
        use the alternate convention (the host should use the conventional result).

    Raises:
        InvalidArgumentError: If ``bean_class`` is None.
        IntrospectionFailure: If the introspection collaborator fails.
    """
    info = _run_introspector(self._introspector, bean_class)
    if not applies_alternate_convention(info.method_descriptors, self.config):
      log_debug(f"No alternate-convention setters on {bean_class!r}; skipping augmentation")
      return None
    return AugmentedBeanInfo(info, self.config)


class ExtendedBeanInfoFactory:
  """
  Fallback factory returning the conventional BeanInfo for any class.
  """

  def __init__(self, introspector: Optional[Introspector] = None):
    self._introspector = introspector or introspect

  @property
  def order(self) -> int:
    return int(Precedence.LOWEST)

  def supports(self, bean_class: Any) -> bool:
    return True

  def get_bean_info(self, bean_class: Any) -> BeanInfo:
    return _run_introspector(self._introspector, bean_class)


def sort_by_order(factories: Iterable[BeanInfoFactory]) -> List[BeanInfoFactory]:
  """
  Sorts factories by ascending ``order``. Ties keep their registration order.

  Args:
      factories: Registered factories.

  Returns:
      List[BeanInfoFactory]: Factories in consultation order.
  """
  return sorted(require(factories, "factories"), key=lambda f: f.order)


def resolve_bean_info(
  bean_class: Any,
  factories: Iterable[BeanInfoFactory],
  introspector: Optional[Introspector] = None,
) -> Any:
  """
  Asks each factory in order and returns the first non-None BeanInfo.

  Args:
      bean_class: The class to describe.
      factories: Candidate factories, in any order.
      introspector: Used when no factory answers. Defaults to :func:`introspect`.

  Returns:
      The first factory result, or the conventional BeanInfo.

  Raises:
      IntrospectionFailure: If introspection of the class fails.
  """
  require(bean_class, "bean_class")
  for factory in sort_by_order(factories):
    info = factory.get_bean_info(bean_class)
    if info is not None:
      return info
  return _run_introspector(introspector or introspect, bean_class)
