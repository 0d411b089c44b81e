"""Human-readable rendering of ServiceResult, one renderer per op.

Every renderer writes into a StringIO-backed Rich console from
:func:`create_console`. :func:`render_result` picks the renderer from
``result.op`` (unknown ops get key/value lines) and, in verbose mode,
appends the ``meta:`` block with the telemetry span tree.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from tankctl.output.console import create_console, get_output, style_for_rating

if TYPE_CHECKING:
    from rich.console import Console

    from tankctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]

STANDARD_GLASS_NOTE = "Standard aquarium glass recommended"

_CATEGORY_LABELS: dict[str, str] = {
    "uv_sterilizer": "UV Sterilizer",
    "auto_top_off": "Auto Top-Off",
}

# Span durations above these (ms) are highlighted.
_SLOW_MS = 100.0
_VERY_SLOW_MS = 1000.0


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal.

    Rich drops ANSI codes when the output is not a TTY, so CliRunner and
    pipes see plain text.
    """
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
        if verbose and result.meta:
            _render_meta(console, result.meta)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One value per line for ``--quiet``.

    Triples for search and resize, labels for presets, the headline
    figure for single-tank ops.
    """
    if not result.ok:
        reason = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {reason}"

    data = result.data
    if result.op in ("find", "presets"):
        items = data.get("items", [])
        if result.op == "find":
            return "\n".join(_triple(item) for item in items)
        return "\n".join(str(item["label"]) for item in items)
    if result.op == "resize":
        return _triple(data["dimensions"])
    if result.op == "calculate":
        return f"{_num(data['volume'])} {data['volume_unit']}"
    if result.op == "glass":
        return f"{data['thickness']} {data['thickness_unit']}"
    return f"OK: {result.op}"


# ── Formatting helpers ────────────────────────────────────────────────


def _num(value: Any) -> str:
    """Compact number: integers without a decimal point, else up to two places."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)


def _triple(d: dict[str, Any]) -> str:
    return f"{_num(d['length'])}x{_num(d['width'])}x{_num(d['height'])}"


def _dims_text(d: dict[str, Any]) -> str:
    unit = d.get("unit", "")
    return f"{_num(d['length'])} x {_num(d['width'])} x {_num(d['height'])} {unit}".rstrip()


def _category_label(category: str) -> str:
    return _CATEGORY_LABELS.get(category, category.replace("_", " ").title())


def _table() -> Table:
    return Table(show_header=True, show_lines=False, pad_edge=False, expand=False)


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "tank.ok"), (f"  {result.op}", "tank.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Indented ``key: value`` line; dimensions get their own style."""
    value_style = "tank.dims" if key == "dimensions" else style
    console.print(Text.assemble((f"  {key}: ", "tank.key"), (str(value), value_style)))


def _heading(console: Console, title: str) -> None:
    console.print()
    console.print(Text(title, style="tank.value"))


# ── Verbose meta ──────────────────────────────────────────────────────


def _span_label(span: dict[str, Any]) -> Text:
    duration = span.get("duration_ms", 0.0)
    if duration > _VERY_SLOW_MS:
        style = "bold red"
    elif duration > _SLOW_MS:
        style = "yellow"
    else:
        style = "dim"
    label = Text.assemble((f"{duration:.2f}ms", style), f"  {span.get('name', '?')}")
    annotations = span.get("annotations")
    if annotations:
        pairs = ", ".join(f"{key}={value}" for key, value in annotations.items())
        label.append(f"  ({pairs})", style="dim")
    return label


def _span_tree(span: dict[str, Any], tree: Tree | None = None) -> Tree:
    node = Tree(_span_label(span)) if tree is None else tree.add(_span_label(span))
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            console.print(_span_tree(value), new_line_start=True)
        else:
            console.print(f"    {key}: {value}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "tank.error"),
            (f"  {result.op}", "tank.op"),
            " — ",
            err.message if err else "Unknown error",
        )
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


# ── Section writers (shared by single ops and report) ─────────────────


def _volume_fields(console: Console, d: dict[str, Any]) -> None:
    unit = d["volume_unit"]
    if unit == "gal":
        other = f"{_num(d['volume_liters'])} L"
        other_water = f"{_num(d['water_liters'])} L"
    else:
        other = f"{_num(d['volume_gallons'])} gal"
        other_water = f"{_num(d['water_gallons'])} gal"
    displacement = f"{d['displacement']:.0%}"

    _field(console, "volume", f"{_num(d['volume'])} {unit} ({other})")
    _field(
        console,
        "water volume",
        f"{_num(d['water_volume'])} {unit} ({other_water}) at {displacement} displacement",
    )
    area = d["surface_area"]
    _field(
        console,
        "surface area",
        f"{_num(area['total_sq_ft'])} sq ft total, {_num(area['top_sq_ft'])} sq ft top",
    )
    rating = d["oxygen_exchange"]
    _field(console, "oxygen exchange", rating, style=style_for_rating(rating))
    _field(console, "size", d["size_category"])
    _field(console, "shape", d["aspect_label"])


def _glass_fields(console: Console, d: dict[str, Any]) -> None:
    _field(console, "thickness", f"{d['thickness']} {d['thickness_unit']}", style="tank.value")
    _field(console, "grade", d["label"])
    note = d.get("safety_note") or STANDARD_GLASS_NOTE
    _field(console, "note", note, style="tank.warning" if d.get("safety_note") else "")
    if d.get("requires_special_attention"):
        _field(console, "special attention", "yes", style="tank.warning")
    considerations = d.get("considerations", [])
    if considerations:
        console.print(Text("  considerations:", style="tank.key"))
        for line in considerations:
            console.print(f"    - {line}")


def _equipment_table(console: Console, d: dict[str, Any]) -> None:
    low, high = d.get("turnover", [None, None])
    if d.get("flow_estimated"):
        source = f"estimated at {_num(low)}-{_num(high)}x turnover"
    else:
        source = "given"
    _field(console, "filter flow", f"{_num(d['flow_gph'])} GPH ({source})")

    table = _table()
    table.add_column("Equipment", style="tank.value", no_wrap=True)
    table.add_column("Recommendation")
    for category, text in d.get("recommendations", {}).items():
        table.add_row(_category_label(category), text)
    console.print(table)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_calculate(result: ServiceResult, console: Console) -> None:
    _header(console, result)
    _field(console, "dimensions", _dims_text(result.data["dimensions"]))
    _volume_fields(console, result.data)


def _render_glass(result: ServiceResult, console: Console) -> None:
    _header(console, result)
    _field(console, "dimensions", _dims_text(result.data["dimensions"]))
    _glass_fields(console, result.data)


def _render_equipment(result: ServiceResult, console: Console) -> None:
    _header(console, result)
    _field(console, "dimensions", _dims_text(result.data["dimensions"]))
    _equipment_table(console, result.data)


def _render_report(result: ServiceResult, console: Console) -> None:
    """Volume, glass and equipment as three headed sections."""
    d = result.data
    _header(console, result)
    if d.get("preset"):
        _field(console, "preset", d["preset"], style="tank.value")
    _field(console, "dimensions", _dims_text(d["dimensions"]))

    _heading(console, "Volume")
    _volume_fields(console, d["volume"])
    _heading(console, "Glass")
    _glass_fields(console, d["glass"])
    _heading(console, "Equipment")
    _equipment_table(console, d["equipment"])


def _render_resize(result: ServiceResult, console: Console) -> None:
    d = result.data
    unit = d["volume_unit"]
    kind = "water " if d.get("target_kind") == "water" else ""
    _header(console, result)
    _field(console, "from", _dims_text(d["original"]))
    _field(console, "dimensions", _dims_text(d["dimensions"]))
    _field(console, f"target {kind}volume", f"{_num(d['target'])} {unit}")
    _field(console, "volume", f"{_num(d['volume'])} {unit}")
    _field(console, "water volume", f"{_num(d['water_volume'])} {unit}")
    _field(console, "deviation", f"{_num(d['deviation_percent'])}%", style="tank.deviation")


def _render_find(result: ServiceResult, console: Console) -> None:
    """Ranked candidates; the Preset column only appears when one matched."""
    d = result.data
    items = d.get("items", [])
    vol_unit = d.get("volume_unit", "")
    with_preset = any(item.get("preset") for item in items)

    table = _table()
    table.add_column("#", justify="right", style="dim")
    table.add_column(f"L x W x H ({d.get('unit', '')})", style="tank.dims", no_wrap=True)
    table.add_column(f"Volume ({vol_unit})", justify="right")
    table.add_column("Deviation", style="tank.deviation", justify="right")
    table.add_column("Shape")
    table.add_column("Size")
    if with_preset:
        table.add_column("Preset")

    for rank, item in enumerate(items, start=1):
        row = [
            str(rank),
            _triple(item),
            _num(item["volume"]),
            f"{item['deviation_percent']:.1f}%",
            item["aspect_label"],
            item["size_category"],
        ]
        if with_preset:
            row.append(item.get("preset") or "")
        table.add_row(*row)

    title = f"Dimensions for {_num(d['target'])} {vol_unit} (within {d['tolerance']:.0%})"
    console.print(Text(title, style="tank.op"))
    if items:
        console.print(table)
    console.print(f"\n{d.get('count', len(items))} results")


def _render_presets(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])

    table = _table()
    table.add_column("Preset", style="tank.value", no_wrap=True)
    table.add_column(f"L x W x H ({d.get('unit', '')})", style="tank.dims", no_wrap=True)
    table.add_column("Nominal (gal)", justify="right")
    table.add_column(f"Volume ({d.get('volume_unit', '')})", justify="right")
    for item in items:
        table.add_row(
            item["label"], _triple(item), _num(item["nominal_gallons"]), _num(item["volume"])
        )

    if items:
        console.print(table)
    console.print(f"\n{d.get('count', len(items))} presets")


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback: one field per data key, containers as compact JSON."""
    _header(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "calculate": _render_calculate,
    "glass": _render_glass,
    "equipment": _render_equipment,
    "report": _render_report,
    "resize": _render_resize,
    "find": _render_find,
    "presets": _render_presets,
}
