"""reqres CLI - Main commands."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="reqres",
    help="Session-gated client for the reqres.in user API",
    add_completion=False
)
console = Console()


# Session path: ~/.config/reqres/session.session
def get_session_path() -> Path:
    config_dir = Path.home() / ".config" / "reqres"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "session"


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def make_client(ctx: typer.Context):
    from reqrespy import UsersClient
    
    options = ctx.obj or {}
    config = UsersClient.create_config(
        base_url=options.get('base_url'),
        api_key=options.get('api_key'),
        timeout=options.get('timeout', 30),
    )
    return UsersClient(str(get_session_path()), config=config)


def unwrap(result):
    """Turn a tagged failure into a CLI error, pass anything else through."""
    from reqrespy import AuthRequired, RequestFailed
    
    if isinstance(result, AuthRequired):
        console.print("[red]Not logged in. Run 'reqres login' first.[/red]")
        raise typer.Exit(1)
    if isinstance(result, RequestFailed):
        console.print(f"[red]Request failed: {result.message}[/red]")
        raise typer.Exit(1)
    return result


@app.callback()
def main_options(
    ctx: typer.Context,
    base_url: str = typer.Option(None, "--base-url", envvar="REQRES_BASE_URL", help="API root URL"),
    api_key: str = typer.Option(None, "--api-key", envvar="REQRES_API_KEY", help="x-api-key header value"),
    timeout: float = typer.Option(30.0, "--timeout", help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log HTTP traffic"),
):
    """Global options."""
    if verbose:
        from reqrespy import setup_logging
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        setup_logging(logging.DEBUG)
    ctx.obj = {'base_url': base_url, 'api_key': api_key, 'timeout': timeout}


@app.command()
def login(
    ctx: typer.Context,
    token: str = typer.Option(None, "--token", "-t", help="OAuth access token"),
    from_env: bool = typer.Option(False, "--from-env", help="Read the token from REQRES_ACCESS_TOKEN"),
):
    """Store an OAuth access token as the session credential."""
    from reqrespy import StaticTokenProvider, EnvTokenProvider, ReqresAuthError
    
    if from_env:
        provider = EnvTokenProvider()
    else:
        if not token:
            token = typer.prompt("Access token", hide_input=True)
        provider = StaticTokenProvider(token.strip())
    
    async def do_login():
        client = make_client(ctx)
        try:
            await client.login_with(provider)
            console.print("[green]Logged in[/green]")
            console.print(f"Session saved to: {client.session_file}")
        except ReqresAuthError as e:
            console.print(f"[red]Login failed: {e}[/red]")
            raise typer.Exit(1)
        finally:
            await client.close()
    
    run_async(do_login())


@app.command()
def logout(ctx: typer.Context):
    """Remove the stored credential."""
    async def do_logout():
        client = make_client(ctx)
        try:
            if not await client.is_logged_in():
                console.print("[yellow]No active session[/yellow]")
                return
            await client.logout()
            console.print("[green]Logged out successfully[/green]")
        finally:
            await client.close()
    
    run_async(do_logout())


@app.command()
def whoami():
    """Show whether a credential is stored."""
    from reqrespy.core.session import SQLiteSession
    
    session = SQLiteSession(str(get_session_path()))
    credential = session.load_sync()
    session.close_sync()
    
    if credential is None:
        console.print("[red]Not logged in. Run 'reqres login' first.[/red]")
        raise typer.Exit(1)
    
    token = credential.token
    masked = f"{token[:4]}...{token[-4:]}" if len(token) > 12 else "***"
    console.print(f"Token: {masked}")
    console.print(f"Stored: {credential.updated_at:%Y-%m-%d %H:%M:%S}")
    console.print(f"Session: {session.path}")


@app.command()
def users(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page to list"),
):
    """List users."""
    async def list_users():
        async with make_client(ctx) as client:
            result = unwrap(await client.list_users_page(page))
        
        table = Table(title=f"Users - page {result.page} of {result.total_pages}")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Name")
        table.add_column("Email", style="dim")
        
        for user in result:
            table.add_row(str(user.id), user.full_name, user.email)
        
        console.print(table)
    
    run_async(list_users())


@app.command()
def show(
    ctx: typer.Context,
    user_id: int = typer.Argument(..., help="User id"),
):
    """Show a single user."""
    async def show_user():
        async with make_client(ctx) as client:
            user = unwrap(await client.get_user(user_id))
        
        console.print(f"[bold]ID:[/bold] {user.id}")
        console.print(f"[bold]First name:[/bold] {user.first_name}")
        console.print(f"[bold]Last name:[/bold] {user.last_name}")
        console.print(f"[bold]Email:[/bold] {user.email}")
        if user.avatar:
            console.print(f"[bold]Avatar:[/bold] {user.avatar}")
    
    run_async(show_user())


@app.command()
def edit(
    ctx: typer.Context,
    user_id: int = typer.Argument(..., help="User id"),
    first_name: Optional[str] = typer.Option(None, "--first-name", "-f", help="New first name"),
    last_name: Optional[str] = typer.Option(None, "--last-name", "-l", help="New last name"),
):
    """Update a user's first and last name."""
    async def do_edit():
        async with make_client(ctx) as client:
            # Unchanged fields keep their current remote value
            if first_name is None or last_name is None:
                current = unwrap(await client.get_user(user_id))
            else:
                current = None
            
            fields = {
                'first_name': first_name if first_name is not None else current.first_name,
                'last_name': last_name if last_name is not None else current.last_name,
            }
            unwrap(await client.update_user(user_id, fields))
        
        console.print(f"[green]Updated user {user_id}[/green]")
    
    run_async(do_edit())


@app.command()
def delete(
    ctx: typer.Context,
    user_id: int = typer.Argument(..., help="User id"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Delete without confirmation"),
):
    """Delete a user."""
    if not yes:
        confirm = typer.confirm(f"Delete user {user_id}?")
        if not confirm:
            raise typer.Abort()
    
    async def do_delete():
        async with make_client(ctx) as client:
            unwrap(await client.delete_user(user_id))
        
        console.print(f"[green]Deleted user {user_id}[/green]")
    
    run_async(do_delete())


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
