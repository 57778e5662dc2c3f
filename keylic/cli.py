"""
Command-line interface for keylic.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from keylic.common.config import Config
from keylic.common.exceptions import LicenseManagementError
from keylic.common.models import ConsumerParameters, License, VendorParameters
from keylic.common.store import FileStore
from keylic.consumer.manager import ConsumerLicenseManager
from keylic.repository.context import RepositoryModel
from keylic.vendor.keygen import KeyGenerator
from keylic.vendor.manager import VendorLicenseManager

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]


def _config(keys_dir: str | None) -> Config:
    if keys_dir:
        os.environ["KEYLIC_KEYS_DIR"] = keys_dir
    return Config()


def _run(operation: Callable[[], Any]) -> Any:
    try:
        return operation()
    except LicenseManagementError as err:
        msg = f"{err.kind.value}: {err}"
        raise click.ClickException(msg) from err
    except ValueError as err:
        raise click.ClickException(str(err)) from err


def _consumer_manager(config: Config, subject: str | None) -> ConsumerLicenseManager:
    subject = subject or config.SUBJECT
    if not subject:
        msg = "A subject is required (--subject or KEYLIC_SUBJECT)"
        raise click.ClickException(msg)
    key = _run(config.get_consumer_key)
    return ConsumerLicenseManager(
        ConsumerParameters(
            subject=subject,
            key=key,
            store=FileStore(config.LICENSE_KEY_PATH),
        )
    )


keys_dir_option = click.option(
    "--keys-dir",
    default=None,
    help="Directory holding the vendor keys (default: from KEYLIC_KEYS_DIR)",
)
subject_option = click.option(
    "--subject",
    default=None,
    help="Licensed product subject (default: from KEYLIC_SUBJECT)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log management operations")
def cli(verbose: bool) -> None:  # noqa: FBT001
    """keylic license key management"""
    if verbose:
        logging.basicConfig(level=Config().LOG_LEVEL)


@cli.command()
@subject_option
def subject(subject: str | None) -> None:
    """Show the licensed product subject"""
    subject = subject or Config().SUBJECT
    if not subject:
        msg = "A subject is required (--subject or KEYLIC_SUBJECT)"
        raise click.ClickException(msg)
    click.echo(subject)


@cli.command()
@keys_dir_option
def keygen(keys_dir: str | None) -> None:
    """Generate vendor Ed25519 keys and the artifact secret"""
    config = _config(keys_dir)
    KeyGenerator(config.KEYS_DIR).generate_keys()
    click.echo("Keys generated and saved")


@cli.command()
@keys_dir_option
@subject_option
@click.option("--holder", default=None, help="Licensee")
@click.option("--not-before", type=click.DateTime(DATE_FORMATS), default=None)
@click.option("--not-after", type=click.DateTime(DATE_FORMATS), default=None)
@click.option("--consumers", type=int, default=1, show_default=True)
@click.option("--consumer-type", default=None, help="Consumer type (default: User)")
@click.option("--info", default=None, help="Free-form license information")
@click.option(
    "--extra",
    multiple=True,
    metavar="KEY=VALUE",
    help="Custom attribute, may be repeated",
)
@click.option(
    "--version",
    "version",
    type=click.Choice([model.value for model in RepositoryModel]),
    default=None,
    help="Artifact format version (default: from KEYLIC_REPOSITORY_VERSION)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="File to write the license key to",
)
def issue(
    keys_dir: str | None,
    subject: str | None,
    holder: str | None,
    not_before: datetime | None,
    not_after: datetime | None,
    consumers: int,
    consumer_type: str | None,
    info: str | None,
    extra: tuple[str, ...],
    version: str | None,
    output: Path,
) -> None:
    """Issue a signed license key"""
    config = _config(keys_dir)
    subject = subject or config.SUBJECT
    if not subject:
        msg = "A subject is required (--subject or KEYLIC_SUBJECT)"
        raise click.ClickException(msg)
    attributes = {}
    for item in extra:
        name, sep, value = item.partition("=")
        if not sep or not name:
            msg = f"Invalid attribute {item!r}, expected KEY=VALUE"
            raise click.BadParameter(msg, param_hint="--extra")
        attributes[name] = value

    manager = _run(
        lambda: VendorLicenseManager(
            VendorParameters(
                subject=subject,
                key=config.get_vendor_key(),
                version=version or config.REPOSITORY_VERSION,
            ),
            config=config,
        )
    )
    license = License(
        subject=subject,
        holder=holder,
        not_before=not_before,
        not_after=not_after,
        consumer_amount=consumers,
        consumer_type=consumer_type,
        info=info,
        extra=attributes,
    )
    generator = _run(lambda: manager.generator(license))
    _run(lambda: generator.write_to(FileStore(output)))
    click.echo(f"License key written to {output}")


@cli.command()
@keys_dir_option
@subject_option
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def install(keys_dir: str | None, subject: str | None, key_file: Path) -> None:
    """Install a license key"""
    manager = _consumer_manager(_config(keys_dir), subject)
    _run(lambda: manager.install(FileStore(key_file)))
    click.echo(f"License key installed for {manager.subject}")


@cli.command()
@keys_dir_option
@subject_option
@click.option("--verify", is_flag=True, help="Verify the license as well")
def view(keys_dir: str | None, subject: str | None, verify: bool) -> None:  # noqa: FBT001
    """Show the installed license"""
    manager = _consumer_manager(_config(keys_dir), subject)
    license = _run(manager.view)
    if verify:
        _run(manager.verify)
    click.echo(license.model_dump_json(indent=2))


@cli.command()
@keys_dir_option
@subject_option
def uninstall(keys_dir: str | None, subject: str | None) -> None:
    """Uninstall the license key"""
    manager = _consumer_manager(_config(keys_dir), subject)
    _run(manager.uninstall)
    click.echo(f"License key uninstalled for {manager.subject}")


if __name__ == "__main__":
    cli()
