"""CLI main entry point."""

import logging
from pathlib import Path

import click

from .config import Config
from .consts import CONFIG_PATH_DEFAULT
from .errors import SpecformException
from .form_schema import FormSchema
from .log import setup as setup_log
from .parsing import build_form_schema
from .schema import load_spec_file
from .utils import control_key, encode_json, iter_fields

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Config:
    cfg = Config.load_or_default(config_path, CONFIG_PATH_DEFAULT)
    setup_log(cfg.log.file, cfg.log.level)
    return cfg


def parse_schema_file(schema_file: str) -> FormSchema:
    """Load a schema file and build its form schema."""
    logger.info(f"Parsing connector schema: {schema_file}")
    form = build_form_schema(load_spec_file(schema_file))
    total = sum(1 for group in form.groups for _ in iter_fields(group.fields))
    logger.info(f"Built {len(form.groups)} group(s) with {total} field(s)")
    return form


def format_field_rows(form: FormSchema) -> list[str]:
    """Tab-separated rows describing every field of the form, one per node."""
    rows = ["group\tid\tcontrol\ttype\trequired\tparent_value"]
    for group in form.groups:
        for field in iter_fields(group.fields):
            parent = "" if field.parent_value is None else str(field.parent_value)
            rows.append(
                f"{group.id}\t{field.id}\t{control_key(field.path)}\t{field.type}\t"
                f"{'yes' if field.required else 'no'}\t{parent}"
            )
    return rows


@click.group()
@click.option(
    "--config", "-c", default=CONFIG_PATH_DEFAULT, help="Configuration file path"
)
@click.pass_context
def cli(ctx, config: str):
    """specform - build settings forms from connector configuration schemas."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command(name="parse")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None)
@click.option("--indent", type=int, default=None, help="Override JSON indent from config")
@click.pass_context
def parse(ctx, schema_file: str, output: str | None, indent: int | None):
    """Print the field groups of SCHEMA_FILE as JSON."""
    try:
        cfg = load_config(ctx.obj["config_path"])
        form = parse_schema_file(schema_file)
        content = encode_json(
            form.to_json_data(by_alias=cfg.output.by_alias),
            indent=cfg.output.indent if indent is None else indent,
        )
    except SpecformException as e:
        logger.error(f"Failed to parse {schema_file}: {e}")
        raise click.ClickException(str(e))

    if output:
        Path(output).write_text(content + "\n", encoding="utf-8")
        logger.info(f"Form schema written to {output}")
    else:
        click.echo(content)


@cli.command(name="fields")
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def fields(ctx, schema_file: str):
    """List every field of SCHEMA_FILE with its id and control key."""
    try:
        load_config(ctx.obj["config_path"])
        form = parse_schema_file(schema_file)
    except SpecformException as e:
        logger.error(f"Failed to parse {schema_file}: {e}")
        raise click.ClickException(str(e))

    for row in format_field_rows(form):
        click.echo(row)


@cli.command(name="serve")
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.pass_context
def serve(ctx, host, port):
    """Start the HTTP API."""
    try:
        cfg = load_config(ctx.obj["config_path"])
    except SpecformException as e:
        raise click.ClickException(str(e))

    host = host or cfg.web.host
    port = port or cfg.web.port

    import uvicorn

    from .api import create_app

    logger.info(f"Starting web service on http://{host}:{port}")
    uvicorn.run(create_app(cfg), host=host, port=port)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
