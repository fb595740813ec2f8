"""
Introspection subpackage: data model, classification, merging and factories.
"""

from scala_beaninfo.introspection.bean_info import AugmentedBeanInfo
from scala_beaninfo.introspection.classifier import classify_method, is_alternate_getter, is_alternate_setter
from scala_beaninfo.introspection.factory import (
  SCALA_BEAN_INFO_ORDER,
  BeanInfoFactory,
  ExtendedBeanInfoFactory,
  ScalaBeanInfoFactory,
  applies_alternate_convention,
  resolve_bean_info,
  sort_by_order,
)
from scala_beaninfo.introspection.handles import (
  BeanDescriptor,
  BeanInfo,
  MethodHandle,
  MethodRef,
  PropertyDescriptor,
)
from scala_beaninfo.introspection.inspector import RuntimeIntrospector, introspect
from scala_beaninfo.introspection.merger import (
  compare_property_names,
  merge_property_descriptors,
  property_name_key,
)

__all__ = [
  "AugmentedBeanInfo",
  "BeanDescriptor",
  "BeanInfo",
  "BeanInfoFactory",
  "ExtendedBeanInfoFactory",
  "MethodHandle",
  "MethodRef",
  "PropertyDescriptor",
  "RuntimeIntrospector",
  "SCALA_BEAN_INFO_ORDER",
  "ScalaBeanInfoFactory",
  "applies_alternate_convention",
  "classify_method",
  "compare_property_names",
  "introspect",
  "is_alternate_getter",
  "is_alternate_setter",
  "merge_property_descriptors",
  "property_name_key",
  "resolve_bean_info",
  "sort_by_order",
]
