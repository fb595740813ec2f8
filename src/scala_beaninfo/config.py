"""
Runtime Configuration Store.

Holds the naming-convention knobs used by the classifier and the threshold
of the package logger. :class:`~scala_beaninfo.introspection.factory.ScalaBeanInfoFactory`
applies ``log_level`` when it is constructed.
Values can be declared in a project's ``pyproject.toml``:

.. code-block:: toml

    [tool.scala_beaninfo]
    setter_suffix = "_="
    getter_excluded_prefixes = ["get", "is"]
    log_level = "DEBUG"
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

DEFAULT_SETTER_SUFFIX = "_="
DEFAULT_GETTER_PREFIXES = ("get", "is")


class IntrospectionConfig(BaseModel):
  """
  Global configuration container for descriptor merging.
  """

  setter_suffix: str = Field(
    DEFAULT_SETTER_SUFFIX,
    description="Exact, case-sensitive suffix that marks an alternate-convention setter.",
  )
  getter_excluded_prefixes: List[str] = Field(
    default_factory=lambda: list(DEFAULT_GETTER_PREFIXES),
    description="Name prefixes that mark conventional getters, which are never classified as alternate getters.",
  )
  log_level: str = Field("WARNING", description="Level applied to the package logger.")

  @field_validator("setter_suffix")
  @classmethod
  def validate_suffix(cls, v: str) -> str:
    """
    Rejects an empty suffix, which would turn every 1-arg void method into a setter.

    Args:
        v (str): The configured suffix.

    Returns:
        str: The suffix, unchanged.

    Raises:
        ValueError: If the suffix is empty.
    """
    if not v:
      raise ValueError("setter_suffix must not be empty")
    return v

  @field_validator("log_level")
  @classmethod
  def validate_log_level(cls, v: str) -> str:
    """
    Normalizes the level name and checks it against the logging module.

    Args:
        v (str): Level name, any case.

    Returns:
        str: The upper-cased level name.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    v_clean = v.upper().strip()
    if not isinstance(logging.getLevelName(v_clean), int):
      raise ValueError(f"Unknown log level: '{v}'")
    return v_clean

  @property
  def getter_prefixes(self) -> Tuple[str, ...]:
    """Excluded getter prefixes as a tuple, ready for ``str.startswith``."""
    return tuple(self.getter_excluded_prefixes)

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "IntrospectionConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
            Defaults to the current working directory.
        **overrides: Field values that take precedence over the file. ``None`` values are ignored.

    Returns:
        IntrospectionConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config = _load_toml_settings(start_dir)
    cli_values = {k: v for k, v in overrides.items() if v is not None}
    return cls.model_validate({**toml_config, **cli_values})


def _load_toml_settings(start_path: Path) -> Dict[str, Any]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts our tool section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Dict[str, Any]: The ``[tool.scala_beaninfo]`` table, or an empty dict.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}
      return data.get("tool", {}).get("scala_beaninfo", {})

  return {}
