#!/usr/bin/env python3
"""
Output Formatting Module for the NFT Collection Wizard CLI

Renders the finished collection schema as a table, JSON or YAML, and writes
it to disk for downstream tooling.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

FORMATS = ('table', 'json', 'yaml')


class OutputFormatter:
    """Output formatter for schema dictionaries."""

    def __init__(self, format_type: str = 'table', color_output: bool = True):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            color_output: Enable colored keys in table output
        """
        if format_type not in FORMATS:
            raise ValueError(f"Unsupported output format: {format_type}")

        self.format_type = format_type
        self.color_output = color_output and sys.stdout.isatty()

    def format(self, data: Any) -> str:
        """Format data according to the configured format type."""
        if self.format_type == 'json':
            return self.format_json(data)
        elif self.format_type == 'yaml':
            return self.format_yaml(data)
        else:
            return self.format_table(data)

    def format_json(self, data: Any) -> str:
        return json.dumps(data, indent=2, default=str)

    def format_yaml(self, data: Any) -> str:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    def format_table(self, data: Any) -> str:
        """Format a (possibly nested) dictionary as a key-value table."""
        if not isinstance(data, dict):
            return str(data)

        flat = self._flatten_dict(data)
        if not flat:
            return "No data available"

        max_key_len = max(len(k) for k in flat)
        lines = []
        for key, value in flat.items():
            padded = f"{key:<{max_key_len}}"
            lines.append(f"{self._colorize(padded, 'key')}  {self._format_value(value)}")
        return '\n'.join(lines)

    def _format_value(self, value: Any) -> str:
        """Format individual value for display."""
        if value is None:
            return self._colorize('null', 'null')
        elif isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, int):
            return self._colorize(str(value), 'number')
        elif isinstance(value, list):
            return ', '.join(str(item) for item in value) if value else '(none)'
        elif value == "":
            return '(empty)'
        return str(value)

    def _flatten_dict(self, d: Dict[str, Any], parent_key: str = '', sep: str = '.') -> Dict[str, Any]:
        """Flatten nested dictionaries (and lists of dictionaries) with dotted keys."""
        items: List[tuple] = []
        for k, v in d.items():
            new_key = f"{parent_key}{sep}{k}" if parent_key else str(k)
            if isinstance(v, dict):
                items.extend(self._flatten_dict(v, new_key, sep=sep).items())
            elif isinstance(v, list) and v and all(isinstance(item, dict) for item in v):
                for i, item in enumerate(v, start=1):
                    items.extend(self._flatten_dict(item, f"{new_key}[{i}]", sep=sep).items())
            else:
                items.append((new_key, v))
        return dict(items)

    def _colorize(self, text: str, color_type: str) -> str:
        """Add color to text if color output is enabled."""
        if not self.color_output:
            return text

        colors = {
            'key': '\033[1;36m',     # Bold cyan
            'number': '\033[33m',    # Yellow
            'null': '\033[90m',      # Gray
            'reset': '\033[0m'
        }

        color = colors.get(color_type, '')
        return f"{color}{text}{colors['reset']}" if color else text


def save_schema_file(data: Dict[str, Any], file_path: str, indent: int = 2) -> Path:
    """
    Save schema data to a JSON or YAML file, chosen by suffix.

    Returns:
        The path written to
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        if path.suffix in ('.yml', '.yaml'):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=indent)

    return path


def format_output(data: Any, format_type: str = 'table', color_output: Optional[bool] = None) -> str:
    """Convenience wrapper around OutputFormatter."""
    formatter = OutputFormatter(format_type, color_output if color_output is not None else True)
    return formatter.format(data)


__all__ = [
    'FORMATS',
    'OutputFormatter',
    'save_schema_file',
    'format_output',
]
