"""
Augmented BeanInfo.

Wraps a conventional :class:`BeanInfo` and replaces only its property descriptors
with the merged set. Everything else is read straight from the delegate.
"""

from typing import Any, List, Optional

from scala_beaninfo.config import IntrospectionConfig
from scala_beaninfo.errors import require
from scala_beaninfo.introspection.handles import BeanDescriptor, BeanInfo, PropertyDescriptor
from scala_beaninfo.introspection.inspector import Introspector, introspect
from scala_beaninfo.introspection.merger import merge_property_descriptors


class AugmentedBeanInfo:
  """
  BeanInfo view exposing alternate-convention properties.

  Attributes:
      delegate (BeanInfo): The conventional introspection result.
  """

  def __init__(self, delegate: BeanInfo, config: Optional[IntrospectionConfig] = None):
    """
    Merges the delegate's descriptors eagerly.

    Args:
        delegate: Conventional BeanInfo of the class.
        config: Naming conventions for the merge.

    Raises:
        InvalidArgumentError: If ``delegate`` is None.
    """
    self.delegate = require(delegate, "delegate")
    self._property_descriptors = merge_property_descriptors(
      delegate.property_descriptors, delegate.method_descriptors, config
    )

  @classmethod
  def for_class(
    cls,
    bean_class: type,
    introspector: Optional[Introspector] = None,
    config: Optional[IntrospectionConfig] = None,
  ) -> "AugmentedBeanInfo":
    """
    Introspects ``bean_class`` and wraps the result. No convention check is made.

    Raises:
        IntrospectionFailure: If conventional introspection fails.
    """
    run = introspector or introspect
    return cls(run(require(bean_class, "bean_class")), config)

  @property
  def property_descriptors(self) -> List[PropertyDescriptor]:
    return list(self._property_descriptors)

  @property
  def bean_class(self) -> Optional[Any]:
    return self.delegate.bean_class

  @property
  def bean_descriptor(self) -> Optional[BeanDescriptor]:
    return self.delegate.bean_descriptor

  @property
  def method_descriptors(self) -> List[Any]:
    return self.delegate.method_descriptors

  @property
  def event_set_descriptors(self) -> List[Any]:
    return self.delegate.event_set_descriptors

  @property
  def additional_bean_info(self) -> List[BeanInfo]:
    return self.delegate.additional_bean_info

  @property
  def default_property_index(self) -> int:
    return self.delegate.default_property_index

  @property
  def default_event_index(self) -> int:
    return self.delegate.default_event_index

  def get_icon(self, icon_kind: int) -> Optional[Any]:
    return self.delegate.get_icon(icon_kind)

  def get_property_descriptor(self, name: str) -> Optional[PropertyDescriptor]:
    """Looks up a merged descriptor by name."""
    for pd in self._property_descriptors:
      if pd.name == name:
        return pd
    return None

  def __repr__(self) -> str:
    names = ", ".join(pd.name for pd in self._property_descriptors)
    return f"AugmentedBeanInfo({names})"
