"""
Mandataire CLI.

Usage:
    mandataire check PUBKEY [--rpc-url URL]
    mandataire check-many PUBKEY... [--rpc-url URL]
    mandataire ping PUBKEY --keypair PATH [--rpc-url URL]
"""

import asyncio
import json
import sys

import click

from mandataire import api
from mandataire.config.settings import load_config
from mandataire.domain.constants import MAGIC_ROUTER_URL
from mandataire.domain.entities import DelegationResult
from mandataire.domain.exceptions import MandataireException
from mandataire.infrastructure.blockchain import KeypairTransactionSigner


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def magic_router_hint(result: DelegationResult) -> str:
    """Curl example for reading a delegated account through Magic Router."""
    return (
        f'curl -X POST "{MAGIC_ROUTER_URL}/getAccountInfo" \\\n'
        f'  -H "Content-Type: application/json" \\\n'
        f"  -d '{{\"pubkey\": \"{result.account_pubkey}\"}}'"
    )


@click.group()
@click.option("--config", "-c", default=None, help="YAML config file")
@click.pass_context
def cli(ctx, config):
    """Mandataire - MagicBlock delegation checker."""
    try:
        ctx.obj = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


@cli.command()
@click.argument("pubkey")
@click.option("--rpc-url", default=None, help="Solana RPC URL")
@click.pass_obj
def check(settings, pubkey, rpc_url):
    """Check delegation status of one account."""
    try:
        result = asyncio.run(api.check_delegation(pubkey, rpc_url, settings))
    except MandataireException as e:
        _fail(f"Failed to check delegation: {e.message}")

    click.echo("=== DELEGATION CHECK RESULT ===")
    click.echo(json.dumps(result.to_dict(), indent=2))

    if result.is_delegated:
        click.echo("\nMagic Router API Usage:")
        click.echo(magic_router_hint(result))


@cli.command("check-many")
@click.argument("pubkeys", nargs=-1, required=True)
@click.option("--rpc-url", default=None, help="Solana RPC URL")
@click.pass_obj
def check_many(settings, pubkeys, rpc_url):
    """Check delegation status of several accounts."""
    try:
        results = asyncio.run(
            api.check_multiple_delegations(pubkeys, rpc_url, settings)
        )
    except MandataireException as e:
        _fail(e.message)

    click.echo(json.dumps([r.to_dict() for r in results], indent=2))


@cli.command()
@click.argument("pubkey")
@click.option(
    "--keypair", "-k", required=True, help="Fee payer keypair JSON file"
)
@click.option("--rpc-url", default=None, help="Solana RPC URL")
@click.pass_obj
def ping(settings, pubkey, keypair, rpc_url):
    """Send a zero-lamport ping transaction to an account."""
    try:
        signer = KeypairTransactionSigner.from_file(keypair)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    try:
        receipt = asyncio.run(api.send_ping(pubkey, signer, rpc_url, settings))
    except MandataireException as e:
        _fail(e.message)

    click.echo(f"Signature: {receipt.signature}")


def main():
    cli()


if __name__ == "__main__":
    main()
