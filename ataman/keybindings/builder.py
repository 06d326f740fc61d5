"""
Binding tree builder.

Turns the generic ``bindings`` mapping of the rc file into the typed,
ordered tree of LeaderBinding nodes:

    bindings {
        q {
            description: Session...
            bindings {
                f { actionId: OpenAtamanConfigAction, description: Open config }
            }
        }
    }

Only the first character of an entry's key is its mnemonic, so descriptive
keys like ``f-open`` are allowed. An entry with an ``actionId`` becomes a
SingleBinding; otherwise an entry with nested ``bindings`` becomes a
GroupBinding; anything else contributes no node. A group whose children
all contribute no node is dropped as well rather than emitted with an
empty ``children`` tuple, so every GroupBinding in the tree has at least
one child.

Structural problems (a body that is not an object, a missing or
non-string ``description`` or ``actionId``) are not handled here: the
ConfigNode accessors raise MalformedConfigError and the whole reload is
aborted.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config.constants import (
    ACTION_ID_KEYWORD,
    BINDINGS_KEYWORD,
    DESCRIPTION_KEYWORD,
)
from ..config.tree import ConfigNode
from .keychord import synthesize
from .models import GroupBinding, LeaderBinding, SingleBinding

logger = logging.getLogger(__name__)


def build_bindings_tree(
    entries: Iterable[Tuple[str, ConfigNode]], window: Any = None
) -> Tuple[LeaderBinding, ...]:
    """
    Build one level of the binding tree, recursing into groups.

    Args:
        entries: (keyword, body) pairs in declaration order
        window: Host window token passed to key chord synthesis

    Returns:
        Well-formed bindings in menu order

    Raises:
        MalformedConfigError: if a body is not an object or lacks a
            string description
    """
    nodes = [
        node
        for node in (_build_entry(keyword, body, window) for keyword, body in entries)
        if node is not None
    ]
    ordered = sort_bindings(nodes)
    _warn_duplicates(ordered)
    return ordered


def _build_entry(
    keyword: str, body: ConfigNode, window: Any
) -> Optional[LeaderBinding]:
    """Expand a single entry into zero or one binding."""
    body = body.as_mapping()
    description = body.get_string(DESCRIPTION_KEYWORD, strict=True)

    if not keyword:
        logger.warning(f"Skipping binding with an empty key ({description!r})")
        return None
    key = keyword[0]

    if ACTION_ID_KEYWORD in body:
        action_id = body.get_string(ACTION_ID_KEYWORD, strict=True)
        return SingleBinding(
            key=key,
            key_chord=synthesize(key, window),
            description=description,
            action_id=action_id,
        )

    if BINDINGS_KEYWORD in body:
        children = build_bindings_tree(
            body.get_mapping(BINDINGS_KEYWORD).items(), window
        )
        if not children:
            logger.warning(
                f"Dropping group '{keyword}' ({description!r}): all of its bindings were dropped"
            )
            return None
        return GroupBinding(
            key=key,
            key_chord=synthesize(key, window),
            description=description,
            children=children,
        )

    logger.warning(
        f"Dropping binding '{keyword}' ({description!r}): "
        f"neither {ACTION_ID_KEYWORD} nor {BINDINGS_KEYWORD} given"
    )
    return None


def _binding_order(binding: LeaderBinding) -> Tuple[str, int]:
    # Case-insensitive by letter; for the same letter lowercase first
    return binding.key.lower(), -ord(binding.key)


def sort_bindings(bindings: Iterable[LeaderBinding]) -> Tuple[LeaderBinding, ...]:
    """Order siblings alphabetically, ``a`` before ``A`` before ``b``.

    Bindings with identical keys keep their declaration order.
    """
    return tuple(sorted(bindings, key=_binding_order))


# =============================================================================
# Lookup & inspection
# =============================================================================


@dataclass(frozen=True)
class DuplicateKeyReport:
    """Siblings sharing a mnemonic; only the first one is reachable."""

    path: str
    key: str
    bindings: Tuple[LeaderBinding, ...]

    def to_string(self) -> str:
        """Format for logging/display."""
        where = self.path or "<root>"
        descriptions = ", ".join(repr(b.description) for b in self.bindings)
        return f"Key '{self.key}' bound {len(self.bindings)} times under {where}: {descriptions}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "path": self.path,
            "key": self.key,
            "bindings": [b.description for b in self.bindings],
        }


def find_child(bindings: Sequence[LeaderBinding], key: str) -> Optional[LeaderBinding]:
    """Return the binding for ``key`` among siblings; first one wins."""
    for binding in bindings:
        if binding.key == key:
            return binding
    return None


def find_binding(
    bindings: Sequence[LeaderBinding], keys: Iterable[str]
) -> Optional[LeaderBinding]:
    """Follow a path of mnemonics, e.g. ``"qf"`` or ``["q", "f"]``.

    Returns None if any step is missing or tries to descend into a leaf.
    """
    current: Optional[LeaderBinding] = None
    level: Sequence[LeaderBinding] = bindings
    for key in keys:
        if current is not None:
            if not isinstance(current, GroupBinding):
                return None
            level = current.children
        current = find_child(level, key)
        if current is None:
            return None
    return current


def iter_bindings(
    bindings: Sequence[LeaderBinding], prefix: str = ""
) -> Iterator[Tuple[str, LeaderBinding]]:
    """Depth-first walk yielding (mnemonic path, binding)."""
    for binding in bindings:
        path = prefix + binding.key
        yield path, binding
        if isinstance(binding, GroupBinding):
            yield from iter_bindings(binding.children, path)


def find_duplicate_keys(
    bindings: Sequence[LeaderBinding], prefix: str = ""
) -> List[DuplicateKeyReport]:
    """Report every sibling list that binds the same key more than once."""
    reports: List[DuplicateKeyReport] = []
    by_key: dict = {}
    for binding in bindings:
        by_key.setdefault(binding.key, []).append(binding)
    for key, same in by_key.items():
        if len(same) > 1:
            reports.append(DuplicateKeyReport(prefix, key, tuple(same)))
    for binding in bindings:
        if isinstance(binding, GroupBinding):
            reports.extend(find_duplicate_keys(binding.children, prefix + binding.key))
    return reports


def _warn_duplicates(bindings: Sequence[LeaderBinding]) -> None:
    seen = set()
    for binding in bindings:
        if binding.key in seen:
            logger.warning(
                f"Key '{binding.key}' is bound more than once; "
                f"{binding.description!r} is unreachable"
            )
        seen.add(binding.key)
