"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- ASCII tables for demonstration listings
- Plain line listings for demonstration transcripts
"""

import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
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
    if isinstance(data, dict) and "demonstrations" in data:
        return format_demonstrations_table(data["demonstrations"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_list(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demonstrations" in data:
        return format_demonstrations_list(data["demonstrations"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_list(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_demonstrations_table(demonstrations: List[Dict[str, Any]]) -> str:
    """Format demonstrations as an ASCII table."""
    if not demonstrations:
        return "No demonstrations found."

    headers = ["NAME", "CATEGORY", "SUMMARY"]
    rows = [[d.get("name", ""), d.get("category", ""), d.get("summary", "")] for d in demonstrations]
    widths = [max(len(str(row[i])) for row in rows + [headers]) for i in range(len(headers))]

    def render(row: List[Any]) -> str:
        return "| " + " | ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)) + " |"

    separator = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    lines = [separator, render(headers), separator]
    lines.extend(render(row) for row in rows)
    lines.append(separator)
    return "\n".join(lines)


def format_demonstrations_list(demonstrations: List[Dict[str, Any]]) -> str:
    """Format demonstrations as a grouped list."""
    if not demonstrations:
        return "No demonstrations found."

    lines = []
    current_category = None
    for demo in demonstrations:
        if demo.get("category") != current_category:
            current_category = demo.get("category")
            if lines:
                lines.append("")
            lines.append(f"{current_category}:")
        lines.append(f"  {demo.get('name', '')} - {demo.get('summary', '')}")
    return "\n".join(lines)


def format_results_list(results: List[Dict[str, Any]]) -> str:
    """Format demonstration transcripts, one block per demonstration."""
    blocks = []
    for result in results:
        header = f"== {result.get('name', '')} ({result.get('category', '')})"
        blocks.append("\n".join([header, *result.get("lines", [])]))
    return "\n\n".join(blocks)
