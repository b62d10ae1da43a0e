"""Selection resolver: turns free-form menu input into catalog indices.

Recognized forms, in precedence order:
- ``custom:a, b`` ad-hoc commands appended past the end of the catalog
- preset keywords (``all``, ``common``, ``safe``, ``mcp``, ``dev``, ``system``)
- numbers and inclusive ranges separated by commas or whitespace (``1,3 5-8``)
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field

from .catalog import MCP_WILDCARD
from .catalog import Catalog
from .catalog import CommandEntry
from .catalog import RiskLevel

logger = logging.getLogger(__name__)

CUSTOM_PREFIX = "custom:"

_NUMBER_RE = re.compile(r"[0-9]+")
_RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")
_SEPARATOR_RE = re.compile(r"[,\s]+")

PRESETS: dict[str, Callable[[Catalog], list[int]]] = {
    "all": lambda catalog: list(range(len(catalog))),
    "common": lambda catalog: list(range(min(catalog.common_count, len(catalog)))),
    "safe": lambda catalog: catalog.indices_where(lambda entry: entry.risk == RiskLevel.SAFE),
    "mcp": lambda catalog: catalog.indices_where(lambda entry: entry.name == MCP_WILDCARD),
    "dev": lambda catalog: catalog.indices_where(lambda entry: entry.name in catalog.dev_commands),
    "system": lambda catalog: catalog.indices_where(lambda entry: entry.name in catalog.system_commands),
}


@dataclass
class Selection:
    """Result of resolving one line of menu input.

    ``indices`` and ``entries`` are parallel lists. Catalog selections are
    sorted and unique; ``custom:`` selections keep token order and may repeat,
    with indices starting at ``len(catalog)``.
    """

    indices: list[int] = field(default_factory=list)
    entries: list[CommandEntry] = field(default_factory=list)
    custom_entries: list[CommandEntry] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.indices)


def resolve_selection(text: str, catalog: Catalog) -> Selection:
    """Resolve menu input against the catalog.

    Invalid tokens never abort the parse; each one adds a warning and is
    skipped. An empty selection means nothing valid was entered.

    Args:
        text: Raw selection line
        catalog: Catalog the numbers refer to (1-based in the input)

    Returns:
        Selection with indices, resolved entries and any warnings
    """
    text = text.strip()
    selection = Selection()

    if text.startswith(CUSTOM_PREFIX):
        _resolve_custom(text[len(CUSTOM_PREFIX) :], catalog, selection)
        return selection

    preset = PRESETS.get(text)
    if preset is not None:
        indices = set(preset(catalog))
    else:
        indices = _parse_manual(text, catalog, selection)

    selection.indices = sorted(indices)
    selection.entries = [catalog[index] for index in selection.indices]
    logger.debug(f"Resolved {text!r} to {len(selection.indices)} catalog entries")
    return selection


def _resolve_custom(text: str, catalog: Catalog, selection: Selection) -> None:
    names = [piece.strip() for piece in text.split(",")]
    names = [name for name in names if name]

    if not names:
        _warn(selection, f'No custom commands provided after "{CUSTOM_PREFIX}"')
        return

    # Positional: custom index i maps to custom_entries[i - len(catalog)]
    selection.custom_entries = [CommandEntry.custom(name) for name in names]
    selection.entries = list(selection.custom_entries)
    selection.indices = [len(catalog) + offset for offset in range(len(names))]
    logger.info(f"Added {len(names)} custom commands: {', '.join(names)}")


def _parse_manual(text: str, catalog: Catalog, selection: Selection) -> set[int]:
    size = len(catalog)
    selected: set[int] = set()

    for token in _SEPARATOR_RE.split(text):
        if not token:
            continue

        if _NUMBER_RE.fullmatch(token):
            number = int(token)
            if 1 <= number <= size:
                selected.add(number - 1)
            else:
                _warn(selection, f"Number {token} is out of range (1-{size})")
            continue

        match = _RANGE_RE.fullmatch(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if 1 <= start <= end <= size:
                selected.update(range(start - 1, end))
            else:
                _warn(selection, f"Range {token} is invalid")
            continue

        _warn(selection, f"Invalid input: {token}")

    return selected


def _warn(selection: Selection, message: str) -> None:
    selection.warnings.append(message)
    logger.warning(message)
