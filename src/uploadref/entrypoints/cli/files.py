"""uploadref file commands: ``parse`` and ``check``.

Behavior
- Results go to **stdout** (one line per value, or JSON with ``--json``);
  human-oriented notices go to **stderr**.
- ``check`` resolves temporary objects under a local storage root, given via
  ``--storage-root`` or ``UPLOADREF_STORAGE_ROOT``.

Exit codes
- ``parse``: 0 on success, 1 if the name holds no canonical UUID.
- ``check``: 0 if every value passes, 1 if any fails; usage errors exit 2.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from uploadref import config
from uploadref.bootstrap import bootstrap
from uploadref.domain.errors import MalformedNameError
from uploadref.domain.name_parser import DEFAULT_PLACEHOLDER, NameParser
from uploadref.domain.urls import is_url
from uploadref.interfaces.redactor import RedactorMode

from .helpers import error, success

MISSING_STORAGE_ROOT_MSG = (
    f"{config.STORAGE_ROOT_ENV} is not set.\n\n"
    "Pass --storage-root or set it before running this command, e.g.:\n"
    f"  export {config.STORAGE_ROOT_ENV}=/srv/uploads"
)


def _redactor_mode(obj: dict | None) -> RedactorMode:
    if not obj:
        return RedactorMode.LENIENT
    return obj.get("redactor_mode", RedactorMode.LENIENT)


@click.command()
@click.argument("name")
@click.option(
    "--placeholder",
    default=DEFAULT_PLACEHOLDER,
    show_default=True,
    help=(
        "Replacement for each character outside [A-Za-z0-9_-]. "
        "Empty (the default) drops such characters."
    ),
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def parse(name: str, placeholder: str, as_json: bool) -> None:
    """Split an upload file NAME into display name, UUID and extension."""
    try:
        parser = NameParser(placeholder=placeholder)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--placeholder") from e

    try:
        parsed = parser.parse(name)
    except MalformedNameError as e:
        raise click.ClickException(str(e)) from e

    fields = {
        "display_name": parsed.display_name,
        "unique_id": parsed.unique_id,
        "extension": parsed.extension,
        "moved_file_name": parsed.moved_file_name(),
    }
    if as_json:
        click.echo(json.dumps(fields, ensure_ascii=False))
        return
    for key, value in fields.items():
        click.echo(f"{key}: {value}")


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--field",
    "field_name",
    default="file",
    show_default=True,
    help="Form field name reported in diagnostics.",
)
@click.option(
    "--storage-root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=config.STORAGE_ROOT_ENV,
    show_envvar=True,
    help="Local directory holding the temporary uploads.",
)
@click.option(
    "--tmp-prefix",
    envvar=config.TMP_PREFIX_ENV,
    show_envvar=True,
    help=f"Prefix of temporary objects under the root [default: {config.DEFAULT_TMP_PREFIX}].",  # pylint: disable=line-too-long
)
@click.pass_context
def check(
    ctx: click.Context,
    values: tuple[str, ...],
    field_name: str,
    storage_root: Path | None,
    tmp_prefix: str | None,
) -> None:
    """Validate upload references (file names or URLs) in VALUES.

    URLs pass without a storage lookup. File names pass when they contain a
    canonical UUID and ``<root>/<tmp-prefix>/<uuid>`` exists.
    """
    redactor_mode = _redactor_mode(ctx.obj)
    try:
        container = bootstrap(
            storage_root=storage_root,
            tmp_prefix=tmp_prefix,
            redactor_mode=redactor_mode,
        )
    except config.StorageRootNotSetError as e:
        raise click.ClickException(MISSING_STORAGE_ROOT_MSG) from e

    validator = container.validator
    redactor = validator.redactor
    failures = 0
    for value in values:
        outcome = validator.check(field_name, value)
        shown = redactor.sanitize_url(value) if redactor and is_url(value) else value
        if outcome.passed:
            click.echo(f"PASS\t{shown}")
        else:
            failures += 1
            reason = outcome.reason.value if outcome.reason else "unknown"
            click.echo(f"FAIL\t{reason}\t{shown}")

    if failures:
        error(f"{failures} of {len(values)} value(s) failed.")
        ctx.exit(1)
    success(f"All {len(values)} value(s) passed.")
