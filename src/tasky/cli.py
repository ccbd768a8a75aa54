"""Tasky CLI - conversational task tracker."""

import json
import logging
import sys

import click

from .adapters.file_store import FileTaskStore
from .config import load_config
from .session import Session


def _open_session(ctx: click.Context) -> Session:
    return Session(FileTaskStore(ctx.obj["data_file"]))


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--data-file", type=click.Path(dir_okay=False), default=None,
              help="Task file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """Tasky - keep track of todos, deadlines and events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["data_file"] = data_file or config.data_path

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Talk to Tasky until you say bye."""
    session = _open_session(ctx)
    click.echo(session.greet())

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except (EOFError, click.Abort):
            # Input closed without a bye; tasks are already saved after each change
            click.echo()
            return

        if not line:
            continue

        reply = session.handle_command(line)
        click.echo(reply.text)
        if reply.exit:
            sys.exit(0)


@main.command()
@click.argument("command")
@click.pass_context
def run(ctx, command: str):
    """Run a single COMMAND, e.g. tasky run "todo buy milk"."""
    session = _open_session(ctx)
    reply = session.handle_command(command)
    click.echo(reply.text, err=not reply.ok)
    if not reply.ok:
        sys.exit(1)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_tasks(ctx, as_json: bool):
    """List all tasks."""
    session = _open_session(ctx)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"index": i, **task.to_dict()}
                    for i, task in enumerate(session.tasks, start=1)
                ],
                indent=2,
            )
        )
    else:
        click.echo(session.handle_command("list").text)


@main.command()
@click.pass_context
def bot(ctx):
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting Tasky Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(ctx.obj["config"], data_file=ctx.obj["data_file"])
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
