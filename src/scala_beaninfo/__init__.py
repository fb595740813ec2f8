"""
scala-beaninfo Package.

Augments conventional property introspection with properties declared through the
assignment-operator naming convention, where a setter is named ``<property>_=``
and the matching getter is just ``<property>``.

Usage
-----

.. code-block:: python

    from scala_beaninfo import ScalaBeanInfoFactory

    class Order:
      def price(self) -> int:
        return self._price

    def _set_price(self, value: int) -> None:
      self._price = value

    setattr(Order, "price_=", _set_price)

    info = ScalaBeanInfoFactory().get_bean_info(Order)
    print([pd.name for pd in info.property_descriptors])
    # ['class', 'price']
"""

from scala_beaninfo.config import IntrospectionConfig
from scala_beaninfo.errors import DescriptorSynthesisError, IntrospectionFailure, InvalidArgumentError
from scala_beaninfo.introspection import (
  AugmentedBeanInfo,
  BeanInfo,
  ExtendedBeanInfoFactory,
  MethodRef,
  PropertyDescriptor,
  ScalaBeanInfoFactory,
  applies_alternate_convention,
  merge_property_descriptors,
  resolve_bean_info,
)

__version__ = "0.1.0"

__all__ = [
  "AugmentedBeanInfo",
  "BeanInfo",
  "DescriptorSynthesisError",
  "ExtendedBeanInfoFactory",
  "IntrospectionConfig",
  "IntrospectionFailure",
  "InvalidArgumentError",
  "MethodRef",
  "PropertyDescriptor",
  "ScalaBeanInfoFactory",
  "applies_alternate_convention",
  "merge_property_descriptors",
  "resolve_bean_info",
  "__version__",
]
