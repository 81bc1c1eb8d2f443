"""YAML loading with ``!env`` tags for configuration files.

Two forms are understood:

- ``!env VAR`` substitutes the variable and fails when it is unset;
- ``!env [VAR, default]`` substitutes the variable or the YAML default.
"""

from __future__ import annotations

import os
from typing import Any

import yaml


class EnvSafeLoader(yaml.SafeLoader):
    """SafeLoader that resolves ``!env`` tags against ``os.environ``."""


def _construct_env(loader: EnvSafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        var_name = loader.construct_scalar(node)
        value = os.getenv(var_name)
        if value is None:
            raise ValueError(f"Required environment variable '{var_name}' is not set")
        return value

    if isinstance(node, yaml.SequenceNode):
        values = loader.construct_sequence(node)
        if len(values) != 2:
            raise yaml.constructor.ConstructorError(None, None, f'!env sequence must have exactly 2 elements [var_name, default], got {len(values)}', node.start_mark)
        var_name, default_value = values
        if not isinstance(var_name, str):
            raise yaml.constructor.ConstructorError(None, None, f'Environment variable name must be a string, got {type(var_name).__name__}', node.start_mark)
        return os.getenv(var_name, default_value)

    raise yaml.constructor.ConstructorError(None, None, f'!env tag expects scalar (var_name) or sequence ([var_name, default]), got {type(node).__name__}', node.start_mark)


EnvSafeLoader.add_constructor('!env', _construct_env)


def load_yaml(stream) -> Any:
    """Parse YAML text or a file object, resolving ``!env`` tags."""
    return yaml.load(stream, Loader=EnvSafeLoader)


__all__ = ['EnvSafeLoader', 'load_yaml']
