"""CLI entry point for dotparse."""

import logging
import sys

import click

from dotparse.config import ParserConfig
from dotparse.errors import ParseError
from dotparse.ir.graph import GraphIR
from dotparse.parsers import parse
from dotparse.renderers.base import Renderer
from dotparse.renderers.dot import CanonicalRenderer, DotRenderer
from dotparse.syntax.types import Graph

_RENDERERS: dict[str, Renderer] = {
    "canonical": CanonicalRenderer(),
    "dot": DotRenderer(),
}


def _summary(graph: Graph) -> str:
    gir = GraphIR.from_ast(graph)
    lines = [
        f"graph: {graph.id or '(anonymous)'}",
        f"nodes: {gir.node_count()}",
        f"edges: {gir.edge_count()}",
        f"subgraphs: {len(gir.subgraph_members)}",
        f"assignments: {len(gir.assignments)}",
        f"acyclic: {'yes' if gir.is_dag() else 'no'}",
    ]
    return "\n".join(lines) + "\n"


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["canonical", "dot", "summary"]),
    default="canonical",
    help="Output format",
)
@click.option("--max-depth", "max_depth", type=int, default=ParserConfig.max_depth, help="Deepest subgraph nesting accepted")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log parser progress to stderr")
def main(input: str | None, fmt: str, max_depth: int, output: str | None, verbose: bool) -> None:
    """Parse a DOT digraph and print its syntax tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = parse(text, ParserConfig(max_depth=max_depth))
    except ParseError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    rendered = _summary(graph) if fmt == "summary" else _RENDERERS[fmt].render(graph)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
