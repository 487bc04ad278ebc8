import logging

import typer

from mastodon_entities.cli.entities import decode, kinds, schema
from mastodon_entities.cli.requests import account_action
from mastodon_entities.config import get_log_level

app = typer.Typer(
    name="mastodon-entities",
    help="Mastodon entities CLI — decode wire JSON and build request payloads.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")


app.command("kinds")(kinds)
app.command("decode")(decode)
app.command("schema")(schema)
app.command("account-action")(account_action)


def main() -> None:
    app()
