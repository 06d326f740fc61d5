"""
Typed generic tree over parsed HOCON.

``parse_config_text`` hands the rc text to pyhocon and wraps the result in
``ConfigNode`` values: a tagged variant over string, number, boolean,
mapping, sequence and null. Readers never cast; they go through the
accessors below, which raise MalformedConfigError on a missing path or a
type mismatch.

Usage:
    root = parse_config_text(text)
    if root.has_path("appearance.title"):
        title = root.get_string("appearance.title")
    for key, body in root.get_mapping("bindings").items():
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from pyhocon import ConfigFactory
from pyhocon.config_tree import NoneValue
from pyhocon.exceptions import ConfigException
from pyparsing import ParseBaseException

from ..exceptions import MalformedConfigError

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Value types a parsed config node can hold."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    NULL = "null"


@dataclass(frozen=True)
class ConfigNode:
    """One value of the parsed config tree.

    ``value`` holds a str, int/float, bool, ``dict[str, ConfigNode]``,
    ``list[ConfigNode]`` or None depending on ``kind``. ``origin`` is the
    dotted path of the node, used in error messages.
    """

    kind: NodeKind
    value: Any = None
    origin: str = ""

    @classmethod
    def from_raw(cls, raw: Any, origin: str = "") -> ConfigNode:
        """Wrap a value produced by pyhocon (or plain Python data)."""
        if raw is None or isinstance(raw, NoneValue):
            return cls(NodeKind.NULL, None, origin)
        # bool before int: bool is an int subclass
        if isinstance(raw, bool):
            return cls(NodeKind.BOOLEAN, raw, origin)
        if isinstance(raw, (int, float)):
            return cls(NodeKind.NUMBER, raw, origin)
        if isinstance(raw, str):
            return cls(NodeKind.STRING, str(raw), origin)
        if isinstance(raw, dict):
            children = {}
            for raw_key, child in raw.items():
                key = _unquote_key(str(raw_key))
                children[key] = cls.from_raw(child, _join(origin, key))
            return cls(NodeKind.MAPPING, children, origin)
        if isinstance(raw, (list, tuple)):
            items = [
                cls.from_raw(child, f"{origin}[{index}]")
                for index, child in enumerate(raw)
            ]
            return cls(NodeKind.SEQUENCE, items, origin)
        raise MalformedConfigError(
            f"Unsupported value of type {type(raw).__name__}", path=origin or None
        )

    @property
    def is_mapping(self) -> bool:
        return self.kind is NodeKind.MAPPING

    @property
    def is_null(self) -> bool:
        return self.kind is NodeKind.NULL

    # ------------------------------------------------------------------
    # Direct accessors
    # ------------------------------------------------------------------

    def as_string(self, strict: bool = False) -> str:
        """Return the node as a string.

        Numbers and booleans are rendered the way HOCON writes them unless
        ``strict`` is set, in which case only string nodes are accepted.
        """
        if self.kind is NodeKind.STRING:
            return self.value
        if strict:
            raise self._wrong_type(NodeKind.STRING)
        if self.kind is NodeKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is NodeKind.NUMBER:
            return str(self.value)
        raise self._wrong_type(NodeKind.STRING)

    def as_mapping(self) -> ConfigNode:
        """Return self, checking that this node is a mapping."""
        if self.kind is not NodeKind.MAPPING:
            raise self._wrong_type(NodeKind.MAPPING)
        return self

    def items(self) -> List[Tuple[str, ConfigNode]]:
        """Entries of a mapping node in declaration order."""
        return list(self.as_mapping().value.items())

    def __contains__(self, key: str) -> bool:
        """True if this is a mapping with a non-null entry ``key``."""
        if self.kind is not NodeKind.MAPPING:
            return False
        child = self.value.get(key)
        return child is not None and not child.is_null

    # ------------------------------------------------------------------
    # Path accessors
    # ------------------------------------------------------------------

    def has_path(self, path: str) -> bool:
        """True if ``path`` resolves to a non-null value."""
        node = self
        for segment in path.split("."):
            if node.kind is not NodeKind.MAPPING or segment not in node.value:
                return False
            node = node.value[segment]
        return not node.is_null

    def get_node(self, path: str) -> ConfigNode:
        """Resolve a dotted path.

        Raises:
            MalformedConfigError: if a segment is missing or null, or an
                intermediate node is not a mapping
        """
        node = self
        for segment in path.split("."):
            if node.kind is not NodeKind.MAPPING:
                raise node._wrong_type(NodeKind.MAPPING)
            child = node.value.get(segment)
            if child is None or child.is_null:
                raise MalformedConfigError(
                    f"No configuration setting found for key '{segment}'",
                    path=_join(node.origin, segment),
                )
            node = child
        return node

    def get_string(self, path: str, strict: bool = False) -> str:
        return self.get_node(path).as_string(strict=strict)

    def get_mapping(self, path: str) -> ConfigNode:
        return self.get_node(path).as_mapping()

    def _wrong_type(self, expected: NodeKind) -> MalformedConfigError:
        return MalformedConfigError(
            f"Expected {expected.value} but found {self.kind.value}",
            path=self.origin or None,
        )


def _join(origin: str, key: str) -> str:
    return f"{origin}.{key}" if origin else key


def _unquote_key(key: str) -> str:
    # pyhocon keeps the quotes on keys that contain a dot
    if len(key) >= 2 and key[0] == key[-1] == '"':
        return key[1:-1]
    return key


def parse_config_text(text: str, basedir: Optional[str] = None) -> ConfigNode:
    """
    Parse HOCON text into a ConfigNode tree.

    Args:
        text: Raw rc file contents
        basedir: Directory that relative ``include`` statements resolve
            against, normally the rc file's own directory

    Returns:
        Root mapping node

    Raises:
        MalformedConfigError: if the text does not parse or a substitution
            refers back to itself
    """
    try:
        tree = ConfigFactory.parse_string(text, basedir=basedir)
        root = ConfigNode.from_raw(tree)
    except (ConfigException, ParseBaseException) as e:
        logger.debug(f"HOCON parse failed: {e}")
        raise MalformedConfigError(str(e)) from e
    except RecursionError as e:
        # pyhocon recurses forever on a value that substitutes itself
        logger.debug(f"HOCON substitution cycle: {e}")
        raise MalformedConfigError("Cyclic substitution in config") from e

    if not root.is_mapping:
        raise MalformedConfigError("Config root must be an object")
    return root
