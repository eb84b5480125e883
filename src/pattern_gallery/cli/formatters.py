"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for scenario listings and scenario output
- Plain line-per-entry lists
- JSON and YAML dumps
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "scenarios" in data:
        return format_scenarios_table(data["scenarios"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    elif isinstance(data, dict) and "lines" in data:
        return _render_table(["Output"], [[line] for line in data["lines"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as plain lines, the way the demos print to a console."""
    if isinstance(data, dict) and "scenarios" in data:
        return "\n".join(
            f"{s['name']:<10} {s['pattern']:<10} {s['description']}" for s in data["scenarios"]
        )
    elif isinstance(data, dict) and "results" in data:
        blocks = []
        for result in data["results"]:
            header = f"== {result['pattern']} ({result['name']}) =="
            blocks.append("\n".join([header, *result["lines"]]))
        return "\n\n".join(blocks)
    elif isinstance(data, dict) and "lines" in data:
        return "\n".join(data["lines"])
    elif isinstance(data, dict) and "error" in data:
        return f"Error: {data['message']}"
    else:
        return json.dumps(data, indent=2, default=str)


def format_scenarios_table(scenarios: List[Dict[str, Any]]) -> str:
    """Format registered scenarios as a table."""
    if not scenarios:
        return "No scenarios found."
    rows = [[s["name"], s["pattern"], s["description"]] for s in scenarios]
    return _render_table(["Name", "Pattern", "Description"], rows)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    """Format scenario results as a table with one row per output line."""
    if not results:
        return "No results."
    rows = []
    for result in results:
        for line in result["lines"]:
            rows.append([result["pattern"], line])
    return _render_table(["Pattern", "Output"], rows)


def _render_table(headers: List[str], rows: List[List[Any]]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    styles = ["cyan", "green", "yellow"]
    for index, header in enumerate(headers):
        table.add_column(header, style=styles[index % len(styles)])
    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
