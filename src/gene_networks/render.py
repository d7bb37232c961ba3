# -*- coding: utf-8 -*-

"""Render query results as lists, tables, charts, and networks."""

import json
import logging
import os
from typing import Any, Iterable, List, Mapping, Optional, Sequence
from urllib.parse import quote

import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd
import seaborn as sns
from tabulate import tabulate

from .client import AgeingGene, GeneStatementCount, GeneTrait
from .constants import EDGE_COLOR, GENECARDS_URL, NODE_COLOR
from .graph import Edge, Node, to_networkx

__all__ = [
    'format_gene_traits',
    'get_ageing_genes_df',
    'format_table',
    'genecards_url',
    'get_statement_counts_df',
    'plot_statement_counts',
    'draw_network',
    'network_to_json',
    'write_network_json',
]

logger = logging.getLogger(__name__)

NO_RESULTS = 'No results found.'

AGEING_GENES_COLUMNS = ['Symbol', 'Organism', 'Lifespan Effect', 'Gene']
STATEMENT_COUNTS_COLUMNS = ['Gene', 'Statements']


def format_gene_traits(rows: Iterable[GeneTrait]) -> str:
    """Make one ``gene → trait`` line per row."""
    lines = [f'{row.gene} → {row.trait}' for row in rows]
    if not lines:
        return NO_RESULTS
    return '\n'.join(lines)


def get_ageing_genes_df(rows: Iterable[AgeingGene]) -> pd.DataFrame:
    """Get a table of GenAge genes, sorted by symbol."""
    df = pd.DataFrame(
        [(row.symbol, row.organism, row.effect, row.gene) for row in rows],
        columns=AGEING_GENES_COLUMNS,
    )
    return df.sort_values('Symbol', kind='stable').reset_index(drop=True)


def format_table(df: pd.DataFrame, tablefmt: str = 'github') -> str:
    """Render a dataframe with :mod:`tabulate`."""
    return tabulate(df.values, list(df.columns), tablefmt=tablefmt)


def genecards_url(gene: str) -> str:
    """Get the GeneCards SNP section for a gene symbol."""
    return f'{GENECARDS_URL}?gene={quote(gene)}#snp'


def get_statement_counts_df(rows: Iterable[GeneStatementCount]) -> pd.DataFrame:
    """Get a table of statement counts per gene."""
    return pd.DataFrame(
        [(row.gene, row.count) for row in rows],
        columns=STATEMENT_COUNTS_COLUMNS,
    )


def _ensure_parent(path: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)


def plot_statement_counts(rows: Sequence[GeneStatementCount], title: str, path: str) -> str:
    """Plot a bar chart of statement counts per gene and save it to the path."""
    df = get_statement_counts_df(rows)
    width = max(6, 0.35 * len(df.index))
    fig, ax = plt.subplots(figsize=(width, 5))
    if len(df.index):
        sns.barplot(
            x='Gene', y='Statements', data=df, ax=ax,
            color=NODE_COLOR, edgecolor=EDGE_COLOR, linewidth=1,
        )
        ax.set_ylim(bottom=0)
        ax.tick_params(axis='x', labelrotation=90)
    else:
        ax.text(0.5, 0.5, NO_RESULTS, ha='center', va='center', transform=ax.transAxes)
    legend = ax.get_legend()
    if legend is not None:
        legend.remove()
    ax.set_title(title, fontdict={'fontweight': 'bold'})
    ax.set_xlabel('')

    _ensure_parent(path)
    plt.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info('wrote chart for %d genes to %s', len(df.index), path)
    return path


def draw_network(nodes: List[Node], edges: List[Edge], path: str, title: Optional[str] = None) -> str:
    """Draw the interaction network and save it to the path."""
    graph = to_networkx(nodes, edges)
    fig, ax = plt.subplots(figsize=(10, 10))
    if graph.number_of_nodes():
        pos = nx.spring_layout(graph, seed=0)
        nx.draw_networkx(
            graph,
            pos=pos,
            ax=ax,
            labels=nx.get_node_attributes(graph, 'label'),
            node_size=150,
            node_color=NODE_COLOR,
            edgecolors=EDGE_COLOR,
            linewidths=2,
            edge_color=EDGE_COLOR,
            font_size=7,
        )
    else:
        ax.text(0.5, 0.5, NO_RESULTS, ha='center', va='center', transform=ax.transAxes)
    ax.set_axis_off()
    if title:
        ax.set_title(title, fontdict={'fontweight': 'bold'})

    _ensure_parent(path)
    plt.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info('wrote network with %d nodes and %d edges to %s', len(nodes), len(edges), path)
    return path


def network_to_json(nodes: Iterable[Node], edges: Iterable[Edge]) -> Mapping[str, List[Mapping[str, Any]]]:
    """Get nodes and edges in the shape vis-network data sets take."""
    return {
        'nodes': [{'id': node.id, 'label': node.label} for node in nodes],
        'edges': [{'from': edge.source, 'to': edge.target} for edge in edges],
    }


def write_network_json(nodes: Iterable[Node], edges: Iterable[Edge], path: str) -> str:
    """Write the vis-network JSON to the path."""
    _ensure_parent(path)
    with open(path, 'w', encoding='utf-8') as file:
        json.dump(network_to_json(nodes, edges), file, indent=2, ensure_ascii=False)
    return path
