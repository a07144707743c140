"""Exercise option list: remote catalog + custom exercises, deduplicated with precedence.

Order is pinned name first, then remote catalog names, then custom names; the
first occurrence of a name wins. Failed lookups arrive as None and count as empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from app.core.constants import OTHER_MUSCLE_GROUP
from app.core.enums import OptionSource


@dataclass(frozen=True)
class CatalogOption:
    name: str
    source: OptionSource


def is_other(muscle_group: str | None) -> bool:
    """The "Other" group takes free text instead of a list."""
    return (muscle_group or "").strip().lower() == OTHER_MUSCLE_GROUP.lower()


def resolve(
    muscle_group: str | None,
    remote_catalog_names: Iterable[str | None] | None,
    custom_names: Iterable[str | None] | None,
    pinned_name: str | None = None,
) -> list[CatalogOption]:
    """Merge the sources for one muscle group. Never raises; "Other" or no group gives []."""
    if not muscle_group or is_other(muscle_group):
        return []

    remote = _clean(remote_catalog_names)
    custom = _clean(custom_names)

    # dict keeps insertion order: name -> source
    seen: dict[str, OptionSource] = {}
    if pinned_name:
        if pinned_name in remote:
            seen[pinned_name] = OptionSource.CATALOG
        elif pinned_name in custom:
            seen[pinned_name] = OptionSource.CUSTOM
        else:
            seen[pinned_name] = OptionSource.PINNED
    for name in remote:
        seen.setdefault(name, OptionSource.CATALOG)
    for name in custom:
        seen.setdefault(name, OptionSource.CUSTOM)

    return [CatalogOption(name=name, source=source) for name, source in seen.items()]


def _clean(names: Iterable[str | None] | None) -> list[str]:
    return [n for n in names or () if isinstance(n, str) and n]


def option_names(options: Sequence[CatalogOption]) -> list[str]:
    return [o.name for o in options]
