"""Rich renderers for ServiceResult and a compact descriptor notation.

Notation used by :func:`render_descriptor`::

    any  never  "dog"  enum["cat", "dog"]  string
    array<T>  [T1, T2, ...T]  {name: T, tag?: T, ...: T}
    (A | B)  (A & B)  (A - B)  error<kind: reason>
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from schemalgebra.domain.descriptors import BaseDescriptor, dump_descriptor
from schemalgebra.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from schemalgebra.domain.descriptors import Descriptor
    from schemalgebra.services.result import ServiceResult


# ── Descriptor notation ──────────────────────────────────────────────


def render_descriptor(descriptor: Descriptor | dict[str, Any]) -> str:
    """Render a descriptor (model or its JSON dict form) in compact notation."""
    if isinstance(descriptor, BaseDescriptor):
        descriptor = dump_descriptor(descriptor)  # type: ignore[arg-type]
    return _notation(descriptor)  # type: ignore[arg-type]


def _literal(value: Any) -> str:
    return json.dumps(value, separators=(", ", ": "))


def _rest_suffix(node: dict[str, Any]) -> str | None:
    return None if node.get("type") == "any" else _notation(node)


def _notation(node: dict[str, Any]) -> str:
    tag = node.get("type")
    if tag in ("any", "never"):
        return str(tag)
    if tag == "const":
        return _literal(node["value"])
    if tag == "enum":
        return "enum[" + ", ".join(_literal(v) for v in node["values"]) + "]"
    if tag == "primitive":
        return str(node["kind"])
    if tag == "array":
        return f"array<{_notation(node['items'])}>"
    if tag == "tuple":
        parts = [_notation(item) for item in node["items"]]
        rest = _rest_suffix(node["additional_items"])
        parts.append("..." if rest is None else f"...{rest}")
        return "[" + ", ".join(parts) + "]"
    if tag == "object":
        required = set(node["required"])
        parts = [
            f"{name}{'' if name in required else '?'}: {_notation(prop)}"
            for name, prop in node["properties"].items()
        ]
        parts.extend(f"{name}: any" for name in node["required"] if name not in node["properties"])
        rest = _rest_suffix(node["additional_properties"])
        parts.append("..." if rest is None else f"...: {rest}")
        return "{" + ", ".join(parts) + "}"
    if tag == "union":
        return "(" + " | ".join(_notation(m) for m in node["members"]) + ")"
    if tag == "intersection":
        return "(" + " & ".join(_notation(m) for m in node["members"]) + ")"
    if tag == "exclusion":
        return f"({_notation(node['base'])} - {_notation(node['excluded'])})"
    if tag == "error":
        return f"error<{node['kind']}: {node['reason']}>"
    return f"<unknown {tag!r}>"


# ── ServiceResult rendering ──────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)
    if result.ok:
        _status_line(console, result)
    else:
        _render_error(console, result)
    _render_data(console, result)
    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the answer."""
    if "result" in result.data:
        return render_descriptor(result.data["result"])
    if "matches" in result.data:
        return "true" if result.data["matches"] else "false"
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sa.ok"), Text(f"  {result.op}", style="sa.op"))


def _render_error(console: Console, result: ServiceResult) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="sa.error"),
        Text(f"  {result.op}{code}", style="sa.op"),
        Text(" — "),
        Text(msg),
    )
    if err and err.detail:
        for key, value in err.detail.items():
            lines = value if isinstance(value, list) else [value]
            for line in lines:
                console.print(Text(f"  {key}:", style="sa.key"), Text(str(line)))


def _render_data(console: Console, result: ServiceResult) -> None:
    data = result.data
    if "result" in data:
        tag = str(data.get("tag", ""))
        console.print(Text("  tag:", style="sa.key"), Text(tag, style="sa.tag"))
        style = "sa.never" if tag == "never" else "sa.descriptor"
        console.print(
            Text("  result:", style="sa.key"),
            Text(render_descriptor(data["result"]), style=style),
        )
    if "matches" in data:
        console.print(Text("  matches:", style="sa.key"), Text(str(data["matches"]).lower()))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if telemetry:
        console.print(Text("  telemetry:", style="dim"))
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    extras = ", ".join(f"{k}={v}" for k, v in span.get("annotations", {}).items())
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.3f}ms  {span.get('name', '?')}"
    console.print(Text(line + (f"  ({extras})" if extras else ""), style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)
