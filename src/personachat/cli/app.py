"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..llm import LLMError
from ..personas import DEFAULT_PERSONA, PersonaId, get_persona, list_personas
from .providers import (
    get_config,
    get_provider_factory,
    get_settings,
    make_debug_printer,
    mask_key,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="personachat",
    help="Persona-based chat with Google Gemini",
    no_args_is_help=True,
    add_completion=True,
)

key_app = typer.Typer(help="Manage the saved Gemini API key", no_args_is_help=True)
app.add_typer(key_app, name="key")

# Console for rich output
console = Console()


@app.command()
def chat(
    persona: PersonaId = typer.Option(
        DEFAULT_PERSONA,
        "--persona",
        "-p",
        help="Persona active at startup"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    )
):
    """Open the interactive chat interface."""
    from ..ui import run_textual_tui

    config = get_config()
    asyncio.run(run_textual_tui(config, persona=persona, log_level=log_level))


@app.command()
def ask(
    message: str = typer.Argument(..., help="Message to send"),
    persona: PersonaId = typer.Option(
        DEFAULT_PERSONA,
        "--persona",
        "-p",
        help="Persona framing the reply"
    ),
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        envvar="GEMINI_API_KEY",
        help="Use this key instead of the saved one (not persisted)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Print trace logs at this level (debug, info, warning, error)"
    )
):
    """Send a single message and print the reply."""
    async def _ask():
        config = get_config()
        profile = get_persona(persona)

        with get_settings(config) as settings:
            key = (api_key or "").strip() or settings.api_key

        if not message.strip():
            console.print("[red]Error: message must not be empty[/red]")
            raise typer.Exit(code=1)

        if not key:
            console.print("[red]API Key Required:[/red] Please enter your Gemini API key first.")
            console.print("[dim]Save one with: personachat key set[/dim]")
            raise typer.Exit(code=1)

        debug = make_debug_printer(log_level or config.log_level, console)
        try:
            llm = get_provider_factory(config)(key)
            if debug and hasattr(llm, "set_debug_callback"):
                llm.set_debug_callback(debug)
            async with llm:
                reply = await llm.generate_response(profile.instruction, message.strip())
        except LLMError as e:
            console.print(f"[red]{e.title}:[/red] {e.message}")
            raise typer.Exit(code=1)

        console.print(Panel(reply, title=profile.name, border_style="cyan"))

    asyncio.run(_ask())


@app.command()
def personas():
    """List the available personas."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Id", style="yellow", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Description")

    for profile in list_personas():
        table.add_row(profile.id.value, profile.name, profile.description)

    console.print(table)


@key_app.command("set")
def key_set(
    key: str | None = typer.Argument(None, help="API key (prompted for when omitted)")
):
    """Save the Gemini API key."""
    value = key if key is not None else typer.prompt("Gemini API key", hide_input=True)
    with get_settings() as settings:
        try:
            settings.save_api_key(value)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        console.print(f"[green]API key saved to {settings.path}[/green]")


@key_app.command("show")
def key_show():
    """Show the saved API key (masked)."""
    with get_settings() as settings:
        if not settings.has_api_key:
            console.print("[yellow]No API key saved[/yellow]")
            raise typer.Exit(code=1)
        console.print(f"Gemini API key: {mask_key(settings.api_key)}")


@key_app.command("clear")
def key_clear():
    """Erase the saved API key."""
    with get_settings() as settings:
        settings.clear_api_key()
    console.print("[green]API key cleared[/green]")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
