"""Init command implementation."""

import json
from pathlib import Path

from ..config import write_config_template
from ..constants import CONFIG_FILENAME, DEFINITION_FILENAME
from ..output import get_output_context

SAMPLE_DEFINITION = [
    {
        "id": "animal",
        "prompt": "Animal",
        "default": "cat",
        "order": 2,
        "format": "${0}",
    },
    {
        "id": "color",
        "prompt": "Color",
        "default": "red",
        "order": 1,
        "format": "${0}-colored",
        "constraints": [{"id": "animal", "answers": ["cat"]}],
    },
]


def init() -> None:
    """Create namecraft.toml and a sample definition in the current directory."""
    ctx = get_output_context()
    cwd = Path.cwd()
    config_path = cwd / CONFIG_FILENAME
    definition_path = cwd / DEFINITION_FILENAME

    if ctx.dry_run:
        ctx.console.print("[cyan][DRY RUN][/cyan] Would initialize namecraft in this directory:")
        for path in (config_path, definition_path):
            if not path.exists():
                ctx.console.print(f"  Create: {path}")
            else:
                ctx.console.print(f"  Already exists: {path}")
        return

    if not config_path.exists():
        write_config_template(cwd)
        ctx.console.print(f"[green]Created config template:[/green] {config_path}")
    else:
        ctx.console.print(f"[yellow]Config already exists:[/yellow] {config_path}")

    if not definition_path.exists():
        definition_path.write_text(json.dumps(SAMPLE_DEFINITION, indent=2) + "\n")
        ctx.console.print(f"[green]Created sample definition:[/green] {definition_path}")
    else:
        ctx.console.print(f"[yellow]Definition already exists:[/yellow] {definition_path}")
