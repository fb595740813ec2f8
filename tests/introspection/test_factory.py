"""
Tests for the Convention Gate and BeanInfo factories.

Scenarios:
1. Gate correctness on hand-made method lists.
2. End-to-end augmentation of the sample bean (registration behaviour).
3. Pass-through of non-property BeanInfo data.
4. Error propagation from the introspection collaborator.
5. Host-side ordering of competing factories.
"""

import logging
from unittest.mock import MagicMock

import pytest

from scala_beaninfo.config import IntrospectionConfig
from scala_beaninfo.enums import Precedence
from scala_beaninfo.errors import IntrospectionFailure, InvalidArgumentError
from scala_beaninfo.introspection.bean_info import AugmentedBeanInfo
from scala_beaninfo.introspection.factory import (
  SCALA_BEAN_INFO_ORDER,
  ExtendedBeanInfoFactory,
  ScalaBeanInfoFactory,
  applies_alternate_convention,
  resolve_bean_info,
  sort_by_order,
)
from scala_beaninfo.introspection.handles import BeanDescriptor, BeanInfo


def test_gate_empty():
  assert applies_alternate_convention([]) is False


def test_gate_alternate_setter(make_method):
  assert applies_alternate_convention([make_method("price_=", params=1, void=True)]) is True


def test_gate_conventional_setter(make_method):
  assert applies_alternate_convention([make_method("setFoo", params=1, void=True)]) is False


def test_gate_getter_alone_is_not_enough(make_method):
  assert applies_alternate_convention([make_method("price")]) is False


def test_gate_rejects_none():
  with pytest.raises(InvalidArgumentError):
    applies_alternate_convention(None)


def test_gate_ignores_universal_setter_shape(make_method):
  assert applies_alternate_convention([make_method("notify_=", params=1, void=True, universal=True)]) is False


def test_property_descriptors(scala_bean_class):
  info = ScalaBeanInfoFactory().get_bean_info(scala_bean_class)
  pds = info.property_descriptors

  assert len(pds) == 4
  assert pds[0].name == "beanProperty"
  assert pds[0].read_accessor.name == "getBeanProperty"
  assert pds[0].write_accessor.name == "setBeanProperty"
  assert pds[1].name == "class"
  assert pds[2].name == "readOnly"
  assert pds[2].read_accessor.name == "readOnly"
  assert pds[2].write_accessor is None
  assert pds[3].name == "readWrite"
  assert pds[3].read_accessor.name == "readWrite"
  assert pds[3].write_accessor.name == "readWrite_="


def test_accessors_are_usable(scala_bean_class):
  """The discovered accessors drive a real instance."""
  info = ScalaBeanInfoFactory().get_bean_info(scala_bean_class)
  read_write = info.get_property_descriptor("readWrite")
  bean = scala_bean_class()

  read_write.write_accessor.target(bean, "Bar")

  assert read_write.read_accessor.target(bean) == "Bar"


def test_supports(scala_bean_class, plain_bean_class):
  factory = ScalaBeanInfoFactory()

  assert factory.supports(scala_bean_class) is True
  assert factory.supports(plain_bean_class) is False
  assert factory.get_bean_info(scala_bean_class) is not None
  assert factory.get_bean_info(plain_bean_class) is None


def test_order_is_near_lowest():
  factory = ScalaBeanInfoFactory()

  assert factory.order == Precedence.LOWEST - 1000
  assert factory.order == SCALA_BEAN_INFO_ORDER
  assert factory.order < ExtendedBeanInfoFactory().order


def test_pass_through(make_method):
  descriptor = BeanDescriptor(name="Order", qualified_name="shop.Order")
  delegate = BeanInfo(
    bean_descriptor=descriptor,
    method_descriptors=[make_method("price_=", params=1, void=True)],
    event_set_descriptors=["changed"],
    additional_bean_info=[BeanInfo()],
    default_property_index=2,
    default_event_index=0,
    icons={16: "icon16"},
  )
  factory = ScalaBeanInfoFactory(introspector=lambda cls: delegate)

  info = factory.get_bean_info(object)

  assert isinstance(info, AugmentedBeanInfo)
  assert info.delegate is delegate
  assert info.bean_descriptor is descriptor
  assert info.method_descriptors is delegate.method_descriptors
  assert info.event_set_descriptors == ["changed"]
  assert info.additional_bean_info is delegate.additional_bean_info
  assert info.default_property_index == 2
  assert info.default_event_index == 0
  assert info.get_icon(16) == "icon16"
  assert info.get_icon(32) is None
  assert [pd.name for pd in info.property_descriptors] == ["price"]


def test_property_descriptors_returns_copy(make_method):
  delegate = BeanInfo(method_descriptors=[make_method("price_=", params=1, void=True)])
  info = AugmentedBeanInfo(delegate)

  info.property_descriptors.clear()

  assert len(info.property_descriptors) == 1


def test_augmented_bean_info_requires_delegate():
  with pytest.raises(InvalidArgumentError):
    AugmentedBeanInfo(None)


def test_for_class_skips_gate(plain_bean_class):
  info = AugmentedBeanInfo.for_class(plain_bean_class)
  assert [pd.name for pd in info.property_descriptors] == ["class", "name"]


def test_get_bean_info_rejects_none():
  with pytest.raises(InvalidArgumentError):
    ScalaBeanInfoFactory().get_bean_info(None)


def test_collaborator_failure_is_wrapped():
  introspector = MagicMock(side_effect=KeyError("missing metadata"))
  factory = ScalaBeanInfoFactory(introspector=introspector)

  with pytest.raises(IntrospectionFailure) as exc:
    factory.get_bean_info(int)

  assert exc.value.bean_class is int
  assert isinstance(exc.value.__cause__, KeyError)
  introspector.assert_called_once_with(int)


def test_introspection_failure_propagates_unchanged():
  original = IntrospectionFailure("malformed", int)
  factory = ScalaBeanInfoFactory(introspector=MagicMock(side_effect=original))

  with pytest.raises(IntrospectionFailure) as exc:
    factory.get_bean_info(int)

  assert exc.value is original


def test_extended_factory_returns_conventional(plain_bean_class):
  factory = ExtendedBeanInfoFactory()

  info = factory.get_bean_info(plain_bean_class)

  assert factory.supports(plain_bean_class) is True
  assert factory.order == Precedence.LOWEST
  assert isinstance(info, BeanInfo)
  assert [pd.name for pd in info.property_descriptors] == ["class", "name"]


def test_sort_by_order_is_stable():
  first = MagicMock(order=5)
  second = MagicMock(order=5)
  early = MagicMock(order=-1)

  assert sort_by_order([first, second, early]) == [early, first, second]


def test_resolve_prefers_scala_factory(scala_bean_class):
  factories = [ExtendedBeanInfoFactory(), ScalaBeanInfoFactory()]

  info = resolve_bean_info(scala_bean_class, factories)

  assert isinstance(info, AugmentedBeanInfo)
  assert info.get_property_descriptor("readWrite") is not None


def test_resolve_falls_back_to_extended(plain_bean_class):
  factories = [ScalaBeanInfoFactory(), ExtendedBeanInfoFactory()]

  info = resolve_bean_info(plain_bean_class, factories)

  assert isinstance(info, BeanInfo)


def test_resolve_without_factories(plain_bean_class):
  info = resolve_bean_info(plain_bean_class, [])
  assert [pd.name for pd in info.property_descriptors] == ["class", "name"]


def test_resolve_consults_higher_precedence_first(scala_bean_class):
  custom = MagicMock(order=Precedence.HIGHEST)
  custom.get_bean_info.return_value = "custom"

  assert resolve_bean_info(scala_bean_class, [ScalaBeanInfoFactory(), custom]) == "custom"


@pytest.fixture
def package_logger():
  """Restores the package logger threshold after the test."""
  pkg_logger = logging.getLogger("scala_beaninfo")
  previous_level = pkg_logger.level
  yield pkg_logger
  pkg_logger.setLevel(previous_level)


def test_config_log_level_is_applied(package_logger):
  ScalaBeanInfoFactory(config=IntrospectionConfig(log_level="DEBUG"))

  assert package_logger.getEffectiveLevel() == logging.DEBUG


def test_default_config_keeps_log_level(package_logger):
  package_logger.setLevel(logging.ERROR)

  ScalaBeanInfoFactory()

  assert package_logger.level == logging.ERROR
