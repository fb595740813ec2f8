"""
Descriptor Merger.

Combines the property descriptors found by conventional introspection with the
accessors found through the alternate convention.

Handles:
- Seeding a name-keyed working set from the conventional descriptors.
- Filling a missing read/write accessor. An accessor that is already present is never replaced.
- Synthesizing read-only and write-only descriptors for names the base result lacks.
- Emitting the result in byte-wise (ordinal) name order.

A descriptor that cannot be built is a soft failure. The method is skipped, a
debug diagnostic is logged and the merge continues.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional

from scala_beaninfo.config import IntrospectionConfig
from scala_beaninfo.enums import MethodRole
from scala_beaninfo.errors import DescriptorSynthesisError, require
from scala_beaninfo.introspection.classifier import classify_method, property_name_for
from scala_beaninfo.introspection.handles import MethodHandle, PropertyDescriptor
from scala_beaninfo.utils.console import log_debug


def property_name_key(name: str) -> bytes:
  """
  Sort key giving byte-wise ordering of property names.

  Bytes compare unsigned and element by element. A strict prefix sorts before
  the longer name, and upper case sorts before lower case (``"Z" < "a"``).

  Args:
      name (str): Property name.

  Returns:
      bytes: The UTF-8 encoding of the name.
  """
  return name.encode("utf-8", "surrogatepass")


def compare_property_names(left: str, right: str) -> int:
  """
  Three-way comparator matching :func:`property_name_key`.

  Args:
      left (str): First name.
      right (str): Second name.

  Returns:
      int: Negative, zero or positive as ``left`` sorts before, with or after ``right``.
  """
  left_bytes = property_name_key(left)
  right_bytes = property_name_key(right)

  for l_byte, r_byte in zip(left_bytes, right_bytes):
    if l_byte != r_byte:
      return l_byte - r_byte
  return len(left_bytes) - len(right_bytes)


class SynthesisOutcome(NamedTuple):
  """Either the descriptor to store, or the reason it could not be built."""

  descriptor: Optional[PropertyDescriptor] = None
  error: Optional[DescriptorSynthesisError] = None


def _apply_accessor(
  existing: Optional[PropertyDescriptor],
  property_name: str,
  method: MethodHandle,
  role: MethodRole,
) -> SynthesisOutcome:
  """
  Computes the working-set entry after offering ``method`` for ``property_name``.

  Returns an empty outcome when the slot is already taken.
  """
  try:
    if existing is None:
      if role == MethodRole.SETTER:
        return SynthesisOutcome(PropertyDescriptor.create(property_name, None, method))
      return SynthesisOutcome(PropertyDescriptor.create(property_name, method, None))

    if role == MethodRole.SETTER and existing.write_accessor is None:
      return SynthesisOutcome(existing.with_write_accessor(method))
    if role == MethodRole.GETTER and existing.read_accessor is None:
      return SynthesisOutcome(existing.with_read_accessor(method))
  except DescriptorSynthesisError as e:
    return SynthesisOutcome(error=e)

  return SynthesisOutcome()


def merge_property_descriptors(
  base: Iterable[PropertyDescriptor],
  methods: Iterable[MethodHandle],
  config: Optional[IntrospectionConfig] = None,
) -> List[PropertyDescriptor]:
  """
  Merges alternate-convention accessors into a conventional descriptor set.

  Neither input is mutated. Descriptors that gain an accessor are replaced by
  copies, and untouched descriptors are returned as the same objects.

  Args:
      base: Descriptors from conventional introspection. On duplicate names the later entry wins.
      methods: Every public method of the class, in enumeration order.
      config: Naming conventions. Defaults apply when None.

  Returns:
      List[PropertyDescriptor]: Descriptors with unique names, sorted byte-wise by name.

  Raises:
      InvalidArgumentError: If ``base`` or ``methods`` is None.
  """
  require(base, "base")
  require(methods, "methods")
  cfg = config or IntrospectionConfig()

  descriptors: Dict[str, PropertyDescriptor] = {}
  for pd in base:
    descriptors[pd.name] = pd

  for method in methods:
    role = classify_method(method, cfg)
    if role == MethodRole.IGNORED:
      continue

    property_name = property_name_for(method, role, cfg.setter_suffix)
    outcome = _apply_accessor(descriptors.get(property_name), property_name, method, role)

    if outcome.error is not None:
      log_debug(f"Could not add {role.value} '{method.name}' for property '{property_name}': {outcome.error}")
    elif outcome.descriptor is not None:
      descriptors[property_name] = outcome.descriptor

  return sorted(descriptors.values(), key=lambda pd: property_name_key(pd.name))
