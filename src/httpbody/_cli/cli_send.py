import logging
from typing import Optional

import click

from .._http_client import HttpClient
from .._request import HttpMethod
from ..models.errors import RequestFailedError

logger = logging.getLogger(__name__)


def _split_pair(value: str, separator: str, option: str) -> tuple[str, str]:
    name, sep, rest = value.partition(separator)
    if not sep or not name.strip():
        raise click.BadParameter(
            f"expected NAME{separator}VALUE, got {value!r}", param_hint=option
        )
    return name.strip(), rest


@click.command()
@click.argument(
    "method", type=click.Choice([m.value for m in HttpMethod], case_sensitive=False)
)
@click.argument("url")
@click.option(
    "--param", "-p", "params", multiple=True, help="Form parameter as name=value"
)
@click.option(
    "--file", "-f", "files", multiple=True, help="File to attach as field=path"
)
@click.option("--file-mime", help="Mime type forced on every attached file")
@click.option("--body", "-b", help="Raw request body")
@click.option("--body-mime", help="Mime type of the raw body (default text/plain)")
@click.option("--charset", help="Charset for form, body and text parts")
@click.option(
    "--header", "-H", "headers", multiple=True, help='Request header as "Name: value"'
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def send(
    method: str,
    url: str,
    params: tuple[str, ...],
    files: tuple[str, ...],
    file_mime: Optional[str],
    body: Optional[str],
    body_mime: Optional[str],
    charset: Optional[str],
    headers: tuple[str, ...],
    verbose: bool,
) -> None:
    """Send a METHOD request to URL and print the response."""
    with HttpClient(debug=verbose or None) as client:
        request = client.create_request(method, url)

        for header in headers:
            name, value = _split_pair(header, ":", "--header")
            request.add_header(name, value.strip())

        if request.body is None and (params or files or body is not None):
            raise click.UsageError(
                f"{request.method.value} requests cannot carry "
                "parameters, files or a body"
            )

        if charset and not request.set_charset(charset):
            raise click.BadParameter(
                f"unknown charset {charset!r}", param_hint="--charset"
            )
        if body is not None:
            request.set_body_content(body, body_mime)
        for param in params:
            name, value = _split_pair(param, "=", "--param")
            request.add_parameter(name, value)
        for file in files:
            field, path = _split_pair(file, "=", "--file")
            if not request.add_file(field, None, path, file_mime):
                raise click.BadParameter(f"no such file: {path}", param_hint="--file")

        try:
            response = request.execute_request()
        except RequestFailedError as e:
            logger.debug("request failed", exc_info=True)
            click.echo(f"❌ {e}", err=True)
            raise click.exceptions.Exit(1) from e

    click.echo(f"{response.status_code} {response.status_reason_phrase}")
    text = response.get_response_body()
    if text:
        click.echo(text)
