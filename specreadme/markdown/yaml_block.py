"""YAML payload access for code block nodes."""

from __future__ import annotations

from typing import Any

import yaml

from .document import Node


def dump_yaml(value: Any) -> str:
    """Encode ``value`` as block-style YAML without wrapping long scalars."""
    return yaml.safe_dump(
        value,
        width=float("inf"),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def get_yaml_from_node(node: Node) -> Any:
    """Decode the literal of ``node``.

    ``yaml.YAMLError`` propagates to the caller, as does the ``ValueError``
    PyYAML raises for date-like scalars that are not real dates.
    """
    return yaml.safe_load(node.literal or "")


def update_yaml_for_node(node: Node, value: Any) -> None:
    """Re-encode ``value`` into the literal of ``node`` in place."""
    node.literal = dump_yaml(value)


__all__ = ["dump_yaml", "get_yaml_from_node", "update_yaml_for_node"]
