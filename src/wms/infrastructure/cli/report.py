"""Plain-text rendering of ledger snapshots."""

from __future__ import annotations

from wms.application.dto import LocationLineDTO
from wms.domain.model.item import ItemSnapshot

_RULE = "-" * 72


def render_item(item: ItemSnapshot) -> list[str]:
    lines = [
        "",
        "----------- Item stock -----------",
        f"Code      : {item.item_code}",
        f"Name      : {item.item_name}",
        f"Total     : {item.total_quantity}",
    ]
    if not item.locations:
        lines.append("Locations : -")
    else:
        for i, loc in enumerate(item.locations):
            label = "Locations : " if i == 0 else " " * 12
            lines.append(f"{label}{loc.location_code}: {loc.quantity}")
    lines.append("-" * 34)
    return lines


def render_report(items: list[ItemSnapshot]) -> list[str]:
    lines = [
        "",
        "Full inventory report",
        f"{'Code':<18} {'Name':<28} {'Total':>8}  Location: Qty",
        _RULE,
    ]
    if not items:
        lines.append("No items defined.")
    for item in items:
        head = f"{item.item_code:<18} {item.item_name:<28} {item.total_quantity:>8}  "
        if not item.locations:
            lines.append(head + "-")
            continue
        first, *rest = item.locations
        lines.append(f"{head}{first.location_code}: {first.quantity}")
        for loc in rest:
            lines.append(f"{'':<58}  {loc.location_code}: {loc.quantity}")
    lines.append(_RULE)
    return lines


def render_location_report(lines: list[LocationLineDTO]) -> list[str]:
    out = ["", "--- Current Warehouse Inventory ---"]
    for line in lines:
        out.append(
            f"Location: {line.location_code}, Code: {line.item_code}, "
            f"Name: {line.item_name}, Quantity: {line.quantity}"
        )
    out.append("--- End of Report ---")
    return out
