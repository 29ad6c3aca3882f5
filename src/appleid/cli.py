"""Command-line interface for decoding and verifying ID tokens."""

from __future__ import annotations

import json
from pathlib import Path

import click
import structlog
from safir.asyncio import run_with_asyncio
from safir.click import display_help

from . import codec
from .config import Config
from .exceptions import AppleIDError
from .factory import Factory
from .keys import StaticKeySetSource
from .models.client import AppleIDClient, VerificationRequest
from .models.jwks import JWKS

__all__ = [
    "decode",
    "help",
    "main",
    "verify",
]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s", package_name="appleid")
def main() -> None:
    """Decode and verify Sign in with Apple ID tokens."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.argument("token")
def decode(token: str) -> None:
    """Print the header and claims of a token without verifying it."""
    try:
        id_token = codec.decode(token)
    except AppleIDError as e:
        raise click.ClickException(str(e)) from e
    result = {
        "header": id_token.header.model_dump(mode="json"),
        "claims": dict(id_token.claims.raw),
    }
    click.echo(json.dumps(result, indent=2, sort_keys=True))


@main.command()
@click.argument("token")
@click.option("--client-id", default=None, help="Expected audience.")
@click.option("--nonce", default=None, help="Expected nonce.")
@click.option("--state", default=None, help="State bound by s_hash.")
@click.option(
    "--access-token", default=None, help="Access token bound by at_hash."
)
@click.option("--code", default=None, help="Code bound by c_hash.")
@click.option(
    "--verify-signature/--no-verify-signature",
    default=True,
    help="Whether to check the signature.",
)
@click.option(
    "--jwks-file",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Key set to use instead of retrieving it from Apple.",
)
@click.option(
    "--config-path",
    envvar="APPLEID_CONFIG_PATH",
    type=click.Path(path_type=Path),
    default=None,
    help="Configuration file.",
)
@run_with_asyncio
async def verify(
    *,
    token: str,
    client_id: str | None,
    nonce: str | None,
    state: str | None,
    access_token: str | None,
    code: str | None,
    verify_signature: bool,
    jwks_file: Path | None,
    config_path: Path | None,
) -> None:
    """Verify the claims and, by default, the signature of a token."""
    config = Config.from_file(config_path) if config_path else Config()
    config.configure_logging()
    logger = structlog.get_logger("appleid")

    client = config.client
    if client_id:
        client = AppleIDClient(identifier=client_id)
    request = VerificationRequest(
        client=client,
        nonce=nonce,
        state=state,
        access_token=access_token,
        code=code,
        verify_signature=verify_signature,
    )

    key_source = None
    if jwks_file:
        jwks = JWKS.model_validate_json(jwks_file.read_text())
        key_source = StaticKeySetSource(jwks)

    try:
        id_token = codec.decode(token)
        async with Factory.standalone(config, logger=logger) as factory:
            verifier = factory.create_verifier(key_source)
            await verifier.verify(id_token, request)
    except AppleIDError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Token for {id_token.claims.sub} verified")
