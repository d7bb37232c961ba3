# -*- coding: utf-8 -*-

"""CLI for Gene Networks."""

import logging
import sys
from urllib.error import URLError

import click
import requests
from more_click import verbose_option
from SPARQLWrapper.SPARQLExceptions import SPARQLWrapperException

from .constants import DEFAULT_TRAIT, OUTPUT, WIKIDATA_ENDPOINT_URL

logger = logging.getLogger(__name__)

#: Errors from the endpoints and from bad input that are reported rather than raised
QUERY_ERRORS = (SPARQLWrapperException, URLError, requests.RequestException, ValueError)

disease_option = click.option('--disease-id', required=True, help='Wikidata item for the disease, like Q11081')
endpoint_option = click.option('--endpoint', default=WIKIDATA_ENDPOINT_URL, show_default=True)


def _fail(e: Exception):
    click.secho(f'Failed: {e}', fg='red', bold=True)
    sys.exit(1)


@click.group()
def main():
    """Run the Gene Networks CLI."""


@main.command()
@verbose_option
@click.option('--trait-id', default=DEFAULT_TRAIT, show_default=True)
@endpoint_option
def traits(trait_id: str, endpoint: str):
    """List genes associated with a trait."""
    from .client import get_gene_traits
    from .render import NO_RESULTS, format_gene_traits

    click.echo('Loading data...', err=True)
    try:
        rows = get_gene_traits(trait_id, endpoint_url=endpoint)
    except QUERY_ERRORS as e:
        logger.error('Error fetching data: %s', e)
        click.echo(NO_RESULTS)
        return
    click.echo(format_gene_traits(rows))


@main.command()
@verbose_option
@click.option('--limit', type=click.IntRange(min=1), default=100, show_default=True)
@click.option('--tablefmt', default='github', show_default=True)
@click.option('--output', type=click.File('w'), default='-')
def genage(limit: int, tablefmt: str, output):
    """Tabulate ageing-related genes from GenAge."""
    from .client import get_ageing_genes
    from .render import format_table, get_ageing_genes_df

    try:
        rows = get_ageing_genes(limit)
    except QUERY_ERRORS as e:
        _fail(e)
    df = get_ageing_genes_df(rows)
    click.echo(format_table(df, tablefmt=tablefmt), file=output)


@main.command()
@verbose_option
@disease_option
@click.option('--title', help='Defaults to "<disease id> Gene Statement Counts"')
@click.option('--output', type=click.Path(dir_okay=False), required=True)
@endpoint_option
def counts(disease_id: str, title, output: str, endpoint: str):
    """Chart how many statements each gene associated with a disease has."""
    from .client import get_gene_statement_counts
    from .render import plot_statement_counts

    try:
        rows = get_gene_statement_counts(disease_id, endpoint_url=endpoint)
    except QUERY_ERRORS as e:
        _fail(e)
    plot_statement_counts(rows, title=title or f'{disease_id} Gene Statement Counts', path=output)
    click.echo(f'Charted {len(rows)} genes to {output}')


@main.command()
@verbose_option
@disease_option
@click.option('--output', type=click.Path(dir_okay=False), help='Path for the network drawing')
@click.option('--json', 'json_path', type=click.Path(dir_okay=False), help='Path for vis-network JSON')
@endpoint_option
def network(disease_id: str, output, json_path, endpoint: str):
    """Build the protein interaction network for a disease."""
    from .client import get_interactions
    from .graph import build_graph
    from .render import draw_network, write_network_json

    try:
        pairs = get_interactions(disease_id, endpoint_url=endpoint)
        nodes, edges = build_graph(pairs)
    except QUERY_ERRORS as e:
        _fail(e)
    if output:
        draw_network(nodes, edges, path=output, title=f'{disease_id} Protein Interactions')
    if json_path:
        write_network_json(nodes, edges, json_path)
    click.echo(f'{len(nodes)} proteins, {len(edges)} interactions')


@main.command()
@verbose_option
@click.option('--directory', type=click.Path(file_okay=False), default=OUTPUT, show_default=True)
@endpoint_option
def report(directory: str, endpoint: str):
    """Chart and draw networks for Alzheimer's disease and ALS."""
    from .pipeline import DEFAULT_DISEASES, ReportConfig, run_report

    config = ReportConfig(directory=directory, diseases=DEFAULT_DISEASES, endpoint_url=endpoint)
    try:
        reports = run_report(config)
    except QUERY_ERRORS as e:
        _fail(e)
    for r in reports:
        click.echo(f'{r.disease.name}: {len(r.counts)} genes, {len(r.nodes)} proteins, {len(r.edges)} interactions')


if __name__ == '__main__':
    main()
