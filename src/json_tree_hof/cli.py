"""Command-line interface for json-tree-hof."""

import json
import logging
from pathlib import Path
import click
from . import __version__
from .parser import TreeParser
from .tree_hof import JsonTreeHof
from .types import TreeConfig, TreeError


def _parse_id(raw: str):
    """Interpret an id argument as JSON when possible (so 101 is an int)."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _run(ctx: click.Context, input_file: Path, operation):
    parser: TreeParser = ctx.obj["parser"]
    try:
        tree = parser.load(input_file)
        result = operation(ctx.obj["hof"], tree)
    except (TreeError, OSError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)
    click.echo(parser.dumps(result))


@click.group()
@click.version_option(version=__version__)
@click.option('--child-key', default='nodes', help='Field holding child nodes (default: nodes)')
@click.option('--id-key', default='id', help='Field compared by move-up/move-down (default: id)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx: click.Context, child_key: str, id_key: str, verbose: bool):
    """JSON tree tools - extract, reorder and reshape nested JSON lists."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        config = TreeConfig(child_key=child_key, id_key=id_key)
    except ValueError as e:
        raise click.BadParameter(str(e))

    ctx.ensure_object(dict)
    ctx.obj["hof"] = JsonTreeHof(config)
    ctx.obj["parser"] = TreeParser(config)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def leaves(ctx: click.Context, input_file: Path):
    """Print the leaves of a JSON tree file."""
    _run(ctx, input_file, lambda hof, tree: hof.leaves(tree))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def nodes(ctx: click.Context, input_file: Path):
    """Print the flattened nodes of a JSON tree file."""
    _run(ctx, input_file, lambda hof, tree: hof.nodes(tree))


@main.command('move-up')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('node_id')
@click.pass_context
def move_up(ctx: click.Context, input_file: Path, node_id: str):
    """Move the node with NODE_ID up among its siblings."""
    _run(ctx, input_file, lambda hof, tree: hof.move_up_by_id(tree, _parse_id(node_id)))


@main.command('move-down')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('node_id')
@click.pass_context
def move_down(ctx: click.Context, input_file: Path, node_id: str):
    """Move the node with NODE_ID down among its siblings."""
    _run(ctx, input_file, lambda hof, tree: hof.move_down_by_id(tree, _parse_id(node_id)))


@main.command('map')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('field')
@click.pass_context
def map_field(ctx: click.Context, input_file: Path, field: str):
    """Print FIELD of every node in pre-order."""
    _run(ctx, input_file, lambda hof, tree: hof.map_to_list(tree, lambda node: node.get(field)))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('fields', nargs=-1, required=True)
@click.pass_context
def prune(ctx: click.Context, input_file: Path, fields):
    """Print the tree keeping only FIELDS (and the child key) on each node."""
    keep = set(fields) | {ctx.obj["hof"].child_key}

    def pick(node):
        return {key: value for key, value in node.items() if key in keep}

    _run(ctx, input_file, lambda hof, tree: hof.map_nodes(tree, pick))


if __name__ == '__main__':
    main()
