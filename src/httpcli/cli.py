"""
httpcli command-line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import dataclasses
import logging

import click
from rich.console import Console
from rich.markup import escape

from httpcli import __version__
from httpcli.arguments import build_descriptor, parse_headers
from httpcli.client import execute
from httpcli.config import get_config
from httpcli.exceptions import HeaderFormatError, HttpCliError
from httpcli.logging_config import configure_logging
from httpcli.models import HTTPResponse, Method, RequestDescriptor

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _headers_callback(ctx, param, value):
    try:
        return parse_headers(value)
    except HeaderFormatError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


url_argument = click.argument("url")
header_option = click.option(
    "-H", "--headers", multiple=True, callback=_headers_callback,
    help="Header in 'name=value' format (repeatable)",
)
data_option = click.option("-d", "--data", help="Request body, sent as given")
file_option = click.option(
    "-f", "--file", type=click.Path(),
    help="Send the contents of this file as the request body",
)
form_option = click.option(
    "--form", is_flag=True,
    help="Upload the -f file as a multipart form part named 'file'",
)
verbose_option = click.option("-v", "--verbose", is_flag=True, help="Show request and response headers")


@click.group(no_args_is_help=False)
@click.version_option(__version__, prog_name="httpcli")
@click.option("-t", "--timeout", type=float, help="Request timeout in seconds (default 10)")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write debug logs to this file")
@click.pass_context
def cli(ctx, timeout: float | None, insecure: bool, debug: bool, log_file: str | None):
    """Send GET, POST, PUT and DELETE requests with custom headers and bodies.

    \b
    Examples:
        httpcli get http://example.com
        httpcli get example.com -H "User-Agent=MyClient"
        httpcli post http://example.com -d '{"key": "value"}' -H "Content-Type=application/json"
        httpcli post example.com -f file.txt
        httpcli put example.com -f update.txt
        httpcli delete http://example.com
    """
    configure_logging(debug=debug, log_file=log_file)

    config = get_config()
    if timeout is not None:
        config = dataclasses.replace(config, timeout=timeout)
    if insecure:
        config = dataclasses.replace(config, verify_ssl=False)
    ctx.obj = config


def run_request(ctx: click.Context, descriptor: RequestDescriptor, verbose: bool) -> None:
    """Send the request and print the response, exiting 1 on failure."""
    try:
        resp = execute(descriptor, ctx.obj)
    except HttpCliError as e:
        logger.debug("%s %s failed", descriptor.method.value, descriptor.url, exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    display_response(resp, verbose)


def display_response(resp: HTTPResponse, verbose: bool = False) -> None:
    """Print the status line, optionally the headers, then the body."""
    if verbose:
        # Headers as sent, including httpx defaults and the inline-data Content-Type
        console.print("\n[cyan]Request:[/cyan]")
        console.print(f"  {resp.request_method} {resp.url}", markup=False, highlight=False)
        for h_name, h_value in resp.request_headers:
            console.print(f"  {h_name}: {h_value}", markup=False, highlight=False)
        console.print()

    if resp.is_success:
        status_color = "green"
    elif resp.is_redirect:
        status_color = "yellow"
    elif resp.is_client_error:
        status_color = "red"
    elif resp.is_server_error:
        status_color = "red bold"
    else:
        status_color = "cyan"

    console.print(
        f"[{status_color}]{resp.status_code} {resp.status_text}[/{status_color}] "
        f"({resp.elapsed_ms:.0f}ms)",
        highlight=False,
    )

    if verbose:
        console.print("\n[cyan]Response Headers:[/cyan]")
        for h_name, h_value in resp.headers:
            console.print(f"  {h_name}: {h_value}", markup=False, highlight=False)

    # Body is written verbatim
    if resp.body:
        console.print()
        click.echo(resp.body)

    if verbose:
        console.print(f"\n[dim]Content-Type: {escape(resp.content_type or 'N/A')} | "
                      f"Size: {len(resp.body_bytes):,} bytes[/dim]", highlight=False)


@cli.command("get")
@url_argument
@header_option
@verbose_option
@click.pass_context
def get_cmd(ctx, url: str, headers: list, verbose: bool):
    """Send a GET request to URL.

    \b
    Examples:
        httpcli get http://example.com
        httpcli get example.com -H "User-Agent=MyClient"
    """
    descriptor = build_descriptor(Method.GET, url, headers)
    run_request(ctx, descriptor, verbose)


@cli.command("post")
@url_argument
@header_option
@data_option
@file_option
@form_option
@verbose_option
@click.pass_context
def post_cmd(ctx, url: str, headers: list, data: str | None, file: str | None,
             form: bool, verbose: bool):
    """Send a POST request with inline data or a file.

    \b
    Examples:
        httpcli post http://example.com -d '{"key": "value"}' -H "Content-Type=application/json"
        httpcli post example.com -f file.txt
        httpcli post example.com -f photo.png --form
    """
    descriptor = build_descriptor(Method.POST, url, headers, data=data, file=file, multipart=form)
    run_request(ctx, descriptor, verbose)


@cli.command("put")
@url_argument
@header_option
@data_option
@file_option
@form_option
@verbose_option
@click.pass_context
def put_cmd(ctx, url: str, headers: list, data: str | None, file: str | None,
            form: bool, verbose: bool):
    """Send a PUT request with inline data or a file.

    \b
    Examples:
        httpcli put http://example.com -d '{"update": true}'
        httpcli put example.com -f update.txt
    """
    descriptor = build_descriptor(Method.PUT, url, headers, data=data, file=file, multipart=form)
    run_request(ctx, descriptor, verbose)


@cli.command("delete")
@url_argument
@header_option
@verbose_option
@click.pass_context
def delete_cmd(ctx, url: str, headers: list, verbose: bool):
    """Send a DELETE request to URL.

    \b
    Examples:
        httpcli delete http://example.com
    """
    descriptor = build_descriptor(Method.DELETE, url, headers)
    run_request(ctx, descriptor, verbose)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="httpcli")
