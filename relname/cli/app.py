from __future__ import annotations

import typer

from relname.cli.context import build_context
from relname.core.errors import ErrorCode
from relname.core.options import parse_args
from relname.core.result import Err, Ok
from relname.output.errors import print_parse_error, print_rename_error, rename_error_exit_code
from relname.services.release import ReleaseService

# Every token reaches parse_args untouched: no --help, unknown flags ignored.
_CONTEXT_SETTINGS = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command(context_settings=_CONTEXT_SETTINGS)
def relname(ctx: typer.Context) -> None:
    """Rename target/release/<package> to <name>-<os>-<version>."""
    cli = build_context()

    match parse_args([ctx.info_name or "relname", *ctx.args]):
        case Err(error):
            print_parse_error(error, cli.console)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        case Ok(options):
            pass

    svc = ReleaseService(
        layout=cli.layout,
        platform=cli.platform,
        env=cli.env,
        console=cli.console,
    )
    match svc.run(options):
        case Ok(_):
            return
        case Err(error):
            print_rename_error(error, cli.console)
            raise typer.Exit(code=rename_error_exit_code(error))


def main() -> None:
    app()
