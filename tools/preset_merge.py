#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import re
import sys
import json
import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

import preset_config
from preset_errors import PresetError, SelectionError
from preset_parser import parse_preset
from preset_ops import union_all, intersect_all, difference
from preset_renderer import render_preset, DEFAULT_TEMPLATE

# UKSFTA Preset Merger
# Combines Arma 3 Launcher presets with union / intersection / difference and
# exports the result as a launcher-importable HTML preset.

OPERATIONS = ("union", "intersection", "difference")

def new_session():
    return {"presets": [], "result": None}

def load_presets(session, files):
    """Replaces the loaded presets with one parsed preset per (file_name, text) pair."""
    session["presets"] = []
    session["result"] = None
    for file_name, text in files:
        preset = parse_preset(text)
        preset["file_name"] = file_name
        session["presets"].append(preset)
    return session["presets"]

def display_name(preset):
    return preset["preset_name"] or preset.get("file_name", "")

def default_selection(session):
    return list(range(min(2, len(session["presets"]))))

def run_operation(session, operation, selected=None, name=None):
    """
    Applies an operation to the selected presets (by index, in selection order)
    and stores the result on the session.

    Difference only uses the first two selected presets (A minus B).
    """
    presets = session["presets"]
    if selected is None: selected = default_selection(session)
    selected = list(selected)

    if operation not in OPERATIONS:
        raise SelectionError(f"Unknown operation '{operation}'. Choose from: {', '.join(OPERATIONS)}.")
    for idx in selected:
        if not 0 <= idx < len(presets):
            raise SelectionError(f"No preset loaded at index {idx}.")
    if not selected:
        raise SelectionError("Select at least one preset.")

    chosen = [presets[i] for i in selected]
    if operation == "union":
        mods = union_all(p["mods"] for p in chosen)
    elif operation == "intersection":
        if len(chosen) < 2: raise SelectionError("Intersection needs at least two presets selected.")
        mods = intersect_all(p["mods"] for p in chosen)
    else:
        if len(chosen) < 2: raise SelectionError("Difference needs two presets selected (A then B).")
        chosen = chosen[:2]
        mods = difference(chosen[0]["mods"], chosen[1]["mods"])

    result = {
        "name": name or preset_config.get_result_name(),
        "mods": mods,
        "template": presets[selected[0]]["original_html"],
        "operation": operation,
        "sources": [display_name(p) for p in chosen]
    }
    session["result"] = result
    return result

def summarize_result(result):
    return f"{len(result['mods'])} mods in result (preset: {result['name']})"

def render_result(result):
    return render_preset(result["template"] or DEFAULT_TEMPLATE, result["mods"], result["name"])

def export_path(result, output_dir=None):
    safe = re.sub(r'[\\/:*?"<>|]', "_", result["name"]).strip() or preset_config.get_result_name()
    return Path(output_dir or preset_config.get_export_dir()) / f"{safe}.html"

def export_result(session, output_dir=None, dry_run=False):
    result = session.get("result")
    if not result: raise SelectionError("Nothing to export. Run an operation first.")
    path = export_path(result, output_dir)
    content = render_result(result)
    if not dry_run:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return path

def parse_selection(value):
    if not value: return None
    try:
        return [int(x) for x in value.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid selection '{value}'. Use comma separated indices, e.g. 0,2")

def print_loaded(console, session, selected):
    table = Table(title="Loaded Presets", box=box.ROUNDED, border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Preset", style="bold cyan")
    table.add_column("File", style="dim")
    table.add_column("Mods", justify="right", style="green")
    table.add_column("Selected", justify="center")
    for i, p in enumerate(session["presets"]):
        table.add_row(str(i), escape(display_name(p)), escape(p.get("file_name", "")), str(len(p["mods"])), "✅" if i in selected else "")
    console.print(table)

def print_result(console, result):
    table = Table(title=escape(f"{result['operation'].title()}: {' | '.join(result['sources'])}"), box=box.ROUNDED, border_style="magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Mod Name", style="bold white")
    table.add_column("Source", style="cyan")
    table.add_column("Workshop Link", style="blue underline")
    for i, m in enumerate(result["mods"], 1):
        table.add_row(str(i), escape(m["name"]), escape(m["source"]), escape(m["link"]))
    console.print(table)
    console.print(f"[bold green]{escape(summarize_result(result))}[/]")

def main(argv=None):
    parser = argparse.ArgumentParser(description="UKSFTA Preset Merger")
    parser.add_argument("operation", choices=OPERATIONS, help="Set operation to apply")
    parser.add_argument("files", nargs="+", help="Arma 3 Launcher preset files (HTML)")
    parser.add_argument("--select", type=parse_selection, default=None, help="Comma separated preset indices in operation order (default: 0,1)")
    parser.add_argument("--name", default=None, help="Preset name for the result")
    parser.add_argument("--output", default=None, help="Directory to export the result preset into")
    parser.add_argument("--dry-run", action="store_true", help="Show the result without writing a file")
    parser.add_argument("--json", action="store_true", help="Output the result as JSON")
    args = parser.parse_args(argv)
    preset_config.load_env()

    console = Console()
    session = new_session()
    try:
        files = [(os.path.basename(f), Path(f).read_bytes()) for f in args.files]
        load_presets(session, files)
        selected = args.select if args.select is not None else default_selection(session)
        result = run_operation(session, args.operation, selected, args.name)
        path = export_result(session, args.output, dry_run=args.dry_run)
    except (PresetError, OSError) as e:
        console.print(f"[bold red]❌ Error:[/] {escape(str(e))}")
        sys.exit(1)

    if args.json:
        print(json.dumps({
            "name": result["name"], "operation": result["operation"], "sources": result["sources"],
            "count": len(result["mods"]), "mods": result["mods"], "output": None if args.dry_run else str(path)
        }, indent=2))
        return

    console.print(Panel.fit("🧩 [bold blue]UKSFTA Preset Merger[/bold blue]", border_style="blue"))
    print_loaded(console, session, selected)
    if args.operation == "difference" and len(selected) > 2:
        console.print(f"[yellow]⚠️  Difference uses only the first two selected presets; ignoring {len(selected) - 2} more.[/]")
    print_result(console, result)
    if args.dry_run:
        console.print(f"[dim][DRY-RUN] Would export to: {escape(str(path))}[/dim]")
    else:
        console.print(f"✅ Preset exported to: [cyan]{escape(str(path))}[/]")

if __name__ == "__main__":
    main()
