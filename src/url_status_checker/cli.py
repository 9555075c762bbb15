"""CLI for URL status checks."""

import json
import logging
import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .checker import StatusChecker
from .config import CheckerConfig
from .cookies import CookieOverride, mirror_cookies
from .exceptions import CookieFileError, InvalidURIError, StatusCheckError
from .methods import RequestMethod
from .sources import StaticCookieSource, load_cookie_file

app = typer.Typer(
    name="url-status-checker",
    help="Check HTTP status codes using a browser session's cookies",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

METHOD_HELP = "HTTP method: " + ", ".join(m.value for m in RequestMethod)


def load_env() -> None:
    """Load environment from local.env if present."""
    # Try working directory first, then parent directories
    for parent in [Path.cwd()] + list(Path.cwd().parents)[:3]:
        env_file = parent / "local.env"
        if env_file.exists():
            with open(env_file) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, _, value = line.partition("=")
                        value = value.strip().strip('"').strip("'")
                        os.environ.setdefault(key.strip(), value)
            break


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def parse_override(value: str | None) -> CookieOverride | None:
    """Parse a NAME=DOMAIN option value."""
    if not value:
        return None
    name, sep, domain = value.partition("=")
    if not sep:
        raise typer.BadParameter("expected NAME=DOMAIN", param_hint="--override")
    try:
        return CookieOverride(name=name.strip(), domain=domain.strip())
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--override") from e


def get_cookie_source(cookie_file: Path | None) -> StaticCookieSource:
    if cookie_file is None:
        return StaticCookieSource()
    try:
        return load_cookie_file(cookie_file)
    except CookieFileError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def check(
    url: Annotated[str, typer.Argument(help="URL to check")],
    method: Annotated[str, typer.Option("--method", "-m", help=METHOD_HELP)] = "GET",
    follow_redirects: Annotated[
        bool, typer.Option("--follow-redirects", "-L", help="Report the status after following redirects")
    ] = False,
    cookie_file: Annotated[
        Optional[Path],
        typer.Option("--cookies", "-c", help="Cookies JSON (driver.get_cookies() dump or Playwright storage state)"),
    ] = None,
    no_mimic: Annotated[bool, typer.Option("--no-mimic", help="Send the request without cookies")] = False,
    override: Annotated[
        Optional[str], typer.Option("--override", help="Force a cookie onto another domain: NAME=DOMAIN")
    ] = None,
    expect: Annotated[
        Optional[int], typer.Option("--expect", "-e", help="Exit 1 unless the status code matches")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log cookie and request details")] = False,
) -> None:
    """Check the HTTP status code of a URL.

    Examples:

        url-status-checker check https://example.com/account -c cookies.json

        url-status-checker check https://example.com/old -L

        url-status-checker check https://example.com/ -m HEAD --expect 200
    """
    load_env()
    configure_logging(verbose)

    cookie_override = parse_override(override)
    try:
        config = CheckerConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    checker = StatusChecker(get_cookie_source(cookie_file), config)

    try:
        checker.set_target_uri(url)
        checker.set_method(method)
    except (InvalidURIError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    checker.set_follow_redirects(follow_redirects)
    checker.set_mimic_cookies(not no_mimic)
    if cookie_override:
        checker.set_cookie_domain_override(cookie_override.name, cookie_override.domain)

    try:
        status_code = checker.check_status()
    except StatusCheckError as e:
        console.print(f"[red]Check failed:[/red] {e}")
        raise typer.Exit(1) from e

    if json_output:
        output = {
            "url": str(checker.target_uri),
            "method": checker.method.value,
            "status_code": status_code,
            "follow_redirects": checker.follow_redirects,
            "cookies_mirrored": len(checker.cookie_store.jar) if checker.cookie_store is not None else 0,
        }
        print(json.dumps(output, indent=2))
    else:
        style = "green" if status_code < 400 else "red"
        console.print(f"[{style}]{status_code}[/{style}] {checker.method.value} {escape(str(checker.target_uri))}")

    if expect is not None and status_code != expect:
        if not json_output:
            console.print(f"[yellow]Expected {expect}, got {status_code}[/yellow]")
        raise typer.Exit(1)


@app.command()
def cookies(
    cookie_file: Annotated[Path, typer.Argument(help="Cookies JSON file")],
    override: Annotated[
        Optional[str], typer.Option("--override", help="Force a cookie onto another domain: NAME=DOMAIN")
    ] = None,
) -> None:
    """Show the cookies that would be sent with a check."""
    source = get_cookie_source(cookie_file)
    store = mirror_cookies(source.get_cookies(), parse_override(override))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Domain")
    table.add_column("Path")
    table.add_column("Secure", width=6)
    table.add_column("Expires")

    for cookie in store.jar:
        expires = str(cookie.expires) if cookie.expires is not None else "session"
        table.add_row(cookie.name, cookie.domain, cookie.path, "yes" if cookie.secure else "no", expires)

    console.print(table)
    console.print(f"[dim]{len(store.jar)} cookie(s)[/dim]")


if __name__ == "__main__":
    app()
