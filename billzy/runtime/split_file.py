"""Loader for TOML split files (people plus assigned items).

Example::

    [[people]]
    id = "a"
    name = "Alice"

    [[people]]
    id = "b"

    [[items]]
    name = "Pizza"
    price = "18.00"
    assignees = ["a", "b"]
    merchant = "Luigi's"
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from billzy.domain.split import Person, SplitItem
from billzy.runtime.logging import get_logger

logger = get_logger(__name__)


class SplitFileError(ValueError):
    """Raised when a split file is missing or malformed."""


@dataclass(frozen=True)
class SplitFile:
    """People and items read from a split file, in file order."""

    people: tuple[Person, ...]
    items: tuple[SplitItem, ...]


def _parse_price(raw: Any, where: str) -> Decimal:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise SplitFileError(f"{where}: price must be a number or string, got {raw!r}")
    try:
        price = Decimal(str(raw).strip().lstrip("$"))
    except InvalidOperation as exc:
        raise SplitFileError(f"{where}: invalid price {raw!r}") from exc
    if not price.is_finite() or price < 0:
        raise SplitFileError(f"{where}: price must be a non-negative amount, got {raw!r}")
    return price


def _parse_people(raw_people: Any) -> list[Person]:
    if not isinstance(raw_people, list):
        raise SplitFileError("people must be an array of tables")
    people: list[Person] = []
    seen: set[str] = set()
    for idx, entry in enumerate(raw_people, start=1):
        if not isinstance(entry, dict):
            raise SplitFileError(f"people[{idx}]: expected a table")
        person_id = str(entry.get("id", f"p{idx}")).strip()
        if not person_id:
            raise SplitFileError(f"people[{idx}]: id must not be empty")
        if person_id in seen:
            raise SplitFileError(f"people[{idx}]: duplicate id {person_id!r}")
        seen.add(person_id)
        people.append(Person(id=person_id, name=str(entry.get("name", "")).strip()))
    return people


def _parse_items(raw_items: Any) -> list[SplitItem]:
    if not isinstance(raw_items, list):
        raise SplitFileError("items must be an array of tables")
    items: list[SplitItem] = []
    for idx, entry in enumerate(raw_items, start=1):
        where = f"items[{idx}]"
        if not isinstance(entry, dict):
            raise SplitFileError(f"{where}: expected a table")
        name = str(entry.get("name", "")).strip()
        if not name:
            raise SplitFileError(f"{where}: name must not be empty")
        if "price" not in entry:
            raise SplitFileError(f"{where}: missing price")

        quantity = entry.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise SplitFileError(f"{where}: quantity must be a positive integer")

        assignees = entry.get("assignees", [])
        if not isinstance(assignees, list):
            raise SplitFileError(f"{where}: assignees must be an array")

        merchant = str(entry.get("merchant") or "").strip() or None
        items.append(
            SplitItem(
                id=str(entry.get("id", f"i{idx}")),
                name=name,
                price=_parse_price(entry["price"], where),
                quantity=quantity,
                assignee_ids={str(a) for a in assignees},
                merchant=merchant,
            )
        )
    return items


def load_split_file(path: Path) -> SplitFile:
    """Load people and items from a split TOML file."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        raise SplitFileError(f"Split file not found: {path}")

    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise SplitFileError(f"{path}: {exc}") from exc

    people = _parse_people(config.get("people", []))
    items = _parse_items(config.get("items", []))
    logger.debug("Loaded %d people and %d items from %s", len(people), len(items), path)
    return SplitFile(people=tuple(people), items=tuple(items))
