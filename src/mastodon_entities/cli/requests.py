import json
from typing import Annotated

import typer
from rich.console import Console

from mastodon_entities.config import get_indent
from mastodon_entities.enums import AccountAction
from mastodon_entities.errors import BuildError
from mastodon_entities.requests.admin import AccountActionRequest

console = Console()


def account_action(
    action: Annotated[AccountAction, typer.Argument(help="Action to perform on the account.")],
    report_id: Annotated[str | None, typer.Option(help="Report that caused the action.")] = None,
    warning_preset_id: Annotated[str | None, typer.Option(help="Preset warning to attach.")] = None,
    text: Annotated[str | None, typer.Option(help="Why the action was taken.")] = None,
    send_email: Annotated[bool, typer.Option("--send-email", help="Email the user about the action.")] = False,
) -> None:
    """Build an admin account action form and print its wire JSON."""
    builder = AccountActionRequest.builder(action)
    if report_id is not None:
        builder.report_id(report_id)
    if warning_preset_id is not None:
        builder.warning_preset_id(warning_preset_id)
    if text is not None:
        builder.text(text)
    if send_email:
        builder.send_email_notification(True)

    try:
        request = builder.build()
    except BuildError as exc:
        console.print(str(exc), style="red", markup=False)
        raise typer.Exit(1) from None

    typer.echo(json.dumps(request.to_wire(), indent=get_indent()))
