# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``ssss split|combine|resplit|extend|regenerate``."""

from __future__ import annotations

import dataclasses
import logging
from contextlib import contextmanager
from typing import Iterator, List, TextIO

import click

from .errors import SSSSError
from .policy import SharingPolicy, load_policy
from .protocol import combine, extend, regenerate, resplit, split


@contextmanager
def _reported() -> Iterator[None]:
    try:
        yield
    except SSSSError as exc:
        raise click.ClickException(str(exc)) from exc


def _read_shares(source: TextIO) -> List[str]:
    return [line.strip() for line in source if line.strip()]


threshold_option = click.option(
    "-t", "--threshold", type=click.IntRange(min=1), required=True, help="Shares needed to recover the secret."
)
token_option = click.option("-w", "--token", default=None, help="Prefix for the generated shares.")
source_argument = click.argument("source", type=click.File("r"), default="-")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug information to stderr.")
@click.option("-D", "--no-diffusion", is_flag=True, help="Disable the diffusion layer.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, no_diffusion: bool) -> None:
    """Shamir's secret sharing over GF(2^n)."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")
    policy = load_policy()
    if no_diffusion:
        policy = dataclasses.replace(policy, diffusion=False)
    ctx.obj = policy


@main.command("split")
@threshold_option
@click.option("-n", "--shares", "number_of_keys", type=click.IntRange(min=1), required=True, help="Shares to issue.")
@token_option
@click.option("-x", "--hex", "input_is_hex", is_flag=True, help="The secret is a hex string.")
@click.option("--secret", default=None, help="Secret to split; prompted for when omitted.")
@click.option("--entropy", default=None, help="Hex string replacing the random coefficients.")
@click.option("--export-entropy", is_flag=True, help="Print the coefficients used to stderr.")
@click.pass_obj
def split_command(
    policy: SharingPolicy,
    threshold: int,
    number_of_keys: int,
    token: str | None,
    input_is_hex: bool,
    secret: str | None,
    entropy: str | None,
    export_entropy: bool,
) -> None:
    """Split a secret into shares, one per line."""
    if secret is None:
        secret = click.prompt("Enter the secret", hide_input=True)
    with _reported():
        result = split(
            secret,
            threshold=threshold,
            number_of_keys=number_of_keys,
            prefix=token,
            input_is_hex=input_is_hex,
            entropy=entropy,
            export_entropy=export_entropy,
            policy=policy,
        )
    if export_entropy:
        shares, exported = result
        click.echo(f"entropy: {exported}", err=True)
    else:
        shares = result
    for share in shares:
        click.echo(share)


@main.command("combine")
@threshold_option
@click.option("-x", "--hex", "input_is_hex", is_flag=True, help="Print the secret as hex.")
@source_argument
@click.pass_obj
def combine_command(policy: SharingPolicy, threshold: int, input_is_hex: bool, source: TextIO) -> None:
    """Recover the secret from shares read one per line."""
    with _reported():
        secret = combine(_read_shares(source), threshold=threshold, input_is_hex=input_is_hex, policy=policy)
    click.echo(secret)


@main.command("resplit")
@threshold_option
@click.option("-n", "--shares", "number_of_keys", type=int, required=True, help="New shares to issue.")
@token_option
@source_argument
@click.pass_obj
def resplit_command(
    policy: SharingPolicy, threshold: int, number_of_keys: int, token: str | None, source: TextIO
) -> None:
    """Issue a new batch of shares for the same secret."""
    with _reported():
        shares = resplit(
            _read_shares(source), threshold=threshold, number_of_keys=number_of_keys, prefix=token, policy=policy
        )
    for share in shares:
        click.echo(share)


@main.command("extend")
@threshold_option
@token_option
@source_argument
@click.pass_obj
def extend_command(policy: SharingPolicy, threshold: int, token: str | None, source: TextIO) -> None:
    """Issue one share at the first unused index."""
    with _reported():
        click.echo(extend(_read_shares(source), threshold, token, policy=policy))


@main.command("regenerate")
@threshold_option
@click.option("-i", "--index", type=click.IntRange(min=1), required=True, help="Index of the share to issue.")
@token_option
@source_argument
@click.pass_obj
def regenerate_command(policy: SharingPolicy, threshold: int, index: int, token: str | None, source: TextIO) -> None:
    """Issue the share at a given index."""
    with _reported():
        click.echo(regenerate(_read_shares(source), threshold, index, token, policy=policy))


if __name__ == "__main__":
    main()
