# -*- coding: utf-8 -*-

"""Build the statement count charts and interaction networks for a set of diseases."""

import logging
import os
import time
from typing import List, Mapping, NamedTuple, Sequence

from tabulate import tabulate
from tqdm import tqdm

from .client import GeneStatementCount, get_gene_statement_counts, get_interactions
from .constants import ALS, ALZHEIMERS_DISEASE, OUTPUT, WIKIDATA_ENDPOINT_URL
from .graph import Edge, Node, build_graph
from .render import draw_network, plot_statement_counts, write_network_json

__all__ = [
    'DiseaseConfig',
    'ReportConfig',
    'DiseaseReport',
    'DEFAULT_DISEASES',
    'run_disease',
    'run_report',
]

logger = logging.getLogger(__name__)


class DiseaseConfig(NamedTuple):
    """A disease to report on."""

    #: The Wikidata item identifier, like Q11081
    disease_id: str
    #: The display name, used in titles
    name: str
    #: Prefix for file names
    slug: str


class ReportConfig(NamedTuple):
    """Where and what to report."""

    directory: str = OUTPUT
    diseases: Sequence[DiseaseConfig] = ()
    endpoint_url: str = WIKIDATA_ENDPOINT_URL


class DiseaseReport(NamedTuple):
    """The results and written files for a disease."""

    disease: DiseaseConfig
    counts: List[GeneStatementCount]
    nodes: List[Node]
    edges: List[Edge]
    paths: Mapping[str, str]


DEFAULT_DISEASES = [
    DiseaseConfig(ALZHEIMERS_DISEASE, "Alzheimer's disease", 'alzheimers'),
    DiseaseConfig(ALS, 'Amyotrophic lateral sclerosis', 'als'),
]


def run_disease(
    disease: DiseaseConfig,
    directory: str,
    endpoint_url: str = WIKIDATA_ENDPOINT_URL,
) -> DiseaseReport:
    """Query, chart, and draw the network for a single disease."""
    logger.info('getting statement counts for %s (%s)', disease.name, disease.disease_id)
    counts = get_gene_statement_counts(disease.disease_id, endpoint_url=endpoint_url)
    chart_path = plot_statement_counts(
        counts,
        title=f'{disease.name} Gene Statement Counts',
        path=os.path.join(directory, f'{disease.slug}_chart.png'),
    )

    logger.info('getting protein interactions for %s (%s)', disease.name, disease.disease_id)
    pairs = get_interactions(disease.disease_id, endpoint_url=endpoint_url)
    nodes, edges = build_graph(pairs)
    network_path = draw_network(
        nodes, edges,
        path=os.path.join(directory, f'{disease.slug}_network.png'),
        title=f'{disease.name} Protein Interactions',
    )
    json_path = write_network_json(nodes, edges, os.path.join(directory, f'{disease.slug}_network.json'))

    return DiseaseReport(
        disease=disease,
        counts=counts,
        nodes=nodes,
        edges=edges,
        paths={'chart': chart_path, 'network': network_path, 'json': json_path},
    )


def run_report(config: ReportConfig) -> List[DiseaseReport]:
    """Run each disease in the configuration and write a summary to ``index.md``."""
    diseases = config.diseases or DEFAULT_DISEASES
    os.makedirs(config.directory, exist_ok=True)

    reports = [
        run_disease(disease, config.directory, endpoint_url=config.endpoint_url)
        for disease in tqdm(diseases, desc='reporting on diseases', unit='disease')
    ]

    rows = [
        (
            report.disease.name,
            report.disease.disease_id,
            len(report.counts),
            len(report.nodes),
            len(report.edges),
        )
        for report in reports
    ]
    summary = tabulate(rows, ['Disease', 'Wikidata', 'Genes', 'Proteins', 'Interactions'], tablefmt='github')
    index_path = os.path.join(config.directory, 'index.md')
    with open(index_path, 'w', encoding='utf-8') as file:
        print('# Gene Network Summary\n', file=file)
        print(f'Generated on {time.asctime()}\n', file=file)
        print(summary, file=file)
    logger.info('wrote summary to %s', index_path)
    return reports
