"""Variant entry normalization: raw scraper records → VariantOption."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from config import VARIANT_EXTRA_KEYS
from models import VariantOption
from normalization.coerce import loose_flag, loose_text, string_keyed

logger = logging.getLogger(__name__)


@dataclass
class GroupAssembly:
    """Result of folding one variant group: kept options plus what was dropped."""

    options: list[VariantOption] = field(default_factory=list)
    dropped: list[tuple[int, str]] = field(default_factory=list)  # (index, reason)


def normalize_variant(raw: Mapping) -> VariantOption:
    """Build a VariantOption from one raw variant record.

    A bad field falls back to its default instead of failing the record.
    """
    value = raw.get("value")
    extra = {key: raw[key] for key in VARIANT_EXTRA_KEYS if key in raw}
    return VariantOption(
        text=loose_text(raw.get("text")),
        selected=loose_flag(raw.get("selected")),
        value=value if isinstance(value, str) else None,
        extra=extra or None,
    )


def _fold_entry(acc: GroupAssembly, index: int, entry: Any) -> GroupAssembly:
    if not isinstance(entry, Mapping):
        acc.dropped.append((index, f"not a mapping ({type(entry).__name__})"))
        return acc

    clean = string_keyed(entry)
    if "text" not in clean:
        acc.dropped.append((index, "missing text"))
        return acc

    try:
        acc.options.append(normalize_variant(clean))
    except Exception as e:
        acc.dropped.append((index, f"error: {e}"))
    return acc


def assemble_group(group: str, entries: list) -> GroupAssembly:
    """Fold a raw variant list into options, keeping input order.

    A failing entry is recorded in `dropped`; its siblings are unaffected.
    """
    acc = GroupAssembly()
    for index, entry in enumerate(entries):
        acc = _fold_entry(acc, index, entry)

    for index, reason in acc.dropped:
        logger.warning(f"[{group}] Dropped entry {index}: {reason}")
    logger.debug(f"[{group}] Kept {len(acc.options)}/{len(entries)} entries")
    return acc
