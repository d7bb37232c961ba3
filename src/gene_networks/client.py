# -*- coding: utf-8 -*-

"""Run gene association queries and map their results to records."""

import logging
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Tuple

import requests
from SPARQLWrapper import JSON, SPARQLWrapper

from .constants import GENAGE_ENDPOINT_URL, MISSING, USER_AGENT, WIKIDATA_ENDPOINT_URL
from .graph import MalformedRowError, iter_label_pairs
from .queries import gene_statement_count_query, gene_trait_query, genage_query, protein_interaction_query

__all__ = [
    'GeneTrait',
    'GeneStatementCount',
    'AgeingGene',
    'SparqlResponseError',
    'get_results',
    'get_bindings',
    'get_gene_traits',
    'get_gene_statement_counts',
    'get_interactions',
    'get_ageing_genes',
]

logger = logging.getLogger(__name__)

Binding = Mapping[str, Mapping[str, str]]


class GeneTrait(NamedTuple):
    """A gene associated with a trait."""

    gene: str
    trait: str


class GeneStatementCount(NamedTuple):
    """The number of direct statements about a gene."""

    gene: str
    count: int


class AgeingGene(NamedTuple):
    """A gene from GenAge."""

    symbol: str
    organism: str
    effect: str
    gene: str


class SparqlResponseError(ValueError):
    """Raised when a response does not have a ``results.bindings`` section."""


def get_results(endpoint_url: str, query: str) -> Mapping[str, Any]:
    """Run the query and get the SPARQL JSON results document."""
    sparql = SPARQLWrapper(endpoint_url, agent=USER_AGENT)
    sparql.setQuery(query)
    sparql.setReturnFormat(JSON)
    return sparql.query().convert()


def _unpack_bindings(results: Any, endpoint_url: str) -> List[Binding]:
    try:
        bindings = results['results']['bindings']
    except (KeyError, TypeError):
        raise SparqlResponseError(f'no results.bindings in response from {endpoint_url}') from None
    logger.info('got %d rows from %s', len(bindings), endpoint_url)
    return bindings


def get_bindings(endpoint_url: str, query: str) -> List[Binding]:
    """Run the query and get its result rows."""
    logger.debug('querying %s:\n%s', endpoint_url, query)
    return _unpack_bindings(get_results(endpoint_url, query), endpoint_url)


def _iter_values(bindings: Iterable[Binding], *keys: str) -> Iterable[Tuple[str, ...]]:
    """Yield the values of the required variables from each binding.

    :raises MalformedRowError: if a binding is missing any of the variables
    """
    for index, binding in enumerate(bindings):
        try:
            yield tuple(binding[key]['value'] for key in keys)
        except (KeyError, TypeError):
            missing = ' or '.join(f'?{key}' for key in keys)
            raise MalformedRowError(index, binding, f'missing {missing}') from None


def get_gene_traits(trait_id: str, endpoint_url: str = WIKIDATA_ENDPOINT_URL) -> List[GeneTrait]:
    """Get the labels of genes associated with the trait."""
    bindings = get_bindings(endpoint_url, gene_trait_query(trait_id))
    return [
        GeneTrait(gene=gene, trait=trait)
        for gene, trait in _iter_values(bindings, 'geneLabel', 'traitLabel')
    ]


def get_gene_statement_counts(
    disease_id: str,
    endpoint_url: str = WIKIDATA_ENDPOINT_URL,
) -> List[GeneStatementCount]:
    """Get the genes associated with the disease and how many statements each has, most first."""
    bindings = get_bindings(endpoint_url, gene_statement_count_query(disease_id))
    rv = []
    for index, (gene, count) in enumerate(_iter_values(bindings, 'geneLabel', 'statementCount')):
        try:
            rv.append(GeneStatementCount(gene=gene, count=int(count)))
        except ValueError:
            raise MalformedRowError(index, bindings[index], f'statement count is not an integer: {count!r}') from None
    return rv


def get_interactions(disease_id: str, endpoint_url: str = WIKIDATA_ENDPOINT_URL) -> List[Tuple[str, str]]:
    """Get pairs of interacting protein labels for the disease."""
    bindings = get_bindings(endpoint_url, protein_interaction_query(disease_id))
    return list(iter_label_pairs(bindings))


def _get_value(binding: Binding, key: str) -> str:
    value: Optional[Mapping[str, str]] = binding.get(key)
    if not value or not value.get('value'):
        return MISSING
    return value['value']


def get_ageing_genes(limit: int = 100, endpoint_url: str = GENAGE_ENDPOINT_URL) -> List[AgeingGene]:
    """Get genes, their organisms, and their effects on lifespan from GenAge."""
    query = genage_query(limit)
    logger.debug('querying %s:\n%s', endpoint_url, query)
    res = requests.get(endpoint_url, params={'query': query, 'format': 'json'})
    res.raise_for_status()
    bindings = _unpack_bindings(res.json(), endpoint_url)
    return [
        AgeingGene(
            symbol=_get_value(binding, 'symbol'),
            organism=_get_value(binding, 'organism'),
            effect=_get_value(binding, 'effect'),
            gene=_get_value(binding, 'gene'),
        )
        for binding in bindings
    ]
