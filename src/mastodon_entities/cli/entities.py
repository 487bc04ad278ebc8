import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mastodon_entities.codec import decode_value
from mastodon_entities.config import get_indent
from mastodon_entities.errors import DecodeError
from mastodon_entities.models import Entity
from mastodon_entities.registry import ENTITY_KINDS, resolve_kind

console = Console()


def _resolve(kind: str) -> type[Entity]:
    try:
        return resolve_kind(kind)
    except ValueError as exc:
        console.print(str(exc), style="red", markup=False)
        raise typer.Exit(2) from None


def _print_errors(exc: DecodeError) -> None:
    table = Table(title=f"Cannot decode {exc.target}", show_lines=False)
    table.add_column("location")
    table.add_column("error")
    table.add_column("input")
    for error in exc.errors:
        loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        table.add_row(Text(loc), Text(str(error.get("msg", ""))), Text(repr(error.get("input"))[:80]))
    console.print(table)
    console.print(f"({len(exc.errors)} errors)")


def kinds() -> None:
    """List the entity kinds that can be decoded."""
    table = Table(show_lines=False)
    table.add_column("kind")
    table.add_column("type")
    for name, entity_type in ENTITY_KINDS.items():
        table.add_row(name, entity_type.__name__)
    console.print(table)
    console.print(f"({len(ENTITY_KINDS)} rows)")


def decode(
    kind: Annotated[str, typer.Argument(help="Entity kind, e.g. status or account.")],
    path: Annotated[Path, typer.Argument(help="JSON file holding the wire object.")],
    many: Annotated[bool, typer.Option("--many", help="The file holds a JSON array of objects.")] = False,
) -> None:
    """Decode a wire JSON file and print its normalized form."""
    entity_type = _resolve(kind)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        console.print(f"File not found: {path}", style="red", markup=False)
        raise typer.Exit(2) from None
    except json.JSONDecodeError as exc:
        console.print(f"Invalid JSON in {path}: {exc}", style="red", markup=False)
        raise typer.Exit(1) from None

    try:
        if many:
            decoded: Any = [item.to_wire() for item in decode_value(list[entity_type], raw)]  # type: ignore[valid-type]
        else:
            decoded = entity_type.from_wire(raw).to_wire()
    except DecodeError as exc:
        _print_errors(exc)
        raise typer.Exit(1) from None

    typer.echo(json.dumps(decoded, indent=get_indent(), ensure_ascii=False))


def schema(
    kind: Annotated[str, typer.Argument(help="Entity kind, e.g. status or account.")],
) -> None:
    """Print the JSON schema accepted for an entity kind."""
    entity_type = _resolve(kind)
    typer.echo(json.dumps(entity_type.model_json_schema(), indent=get_indent()))
