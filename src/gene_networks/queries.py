# -*- coding: utf-8 -*-

"""SPARQL queries for gene associations."""

import re

from .constants import ALZHEIMERS_DISEASE

__all__ = [
    'gene_trait_query',
    'gene_statement_count_query',
    'protein_interaction_query',
    'genage_query',
]

WIKIDATA_ID_PATTERN = re.compile(r'Q[0-9]+')

GENE_TRAIT_QUERY = """SELECT ?gene ?geneLabel ?trait ?traitLabel
WHERE {{
  ?gene wdt:P31 wd:Q7187 .
  ?gene wdt:P2293 ?trait .
  VALUES ?trait {{ wd:{trait_id} }}
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en". }}
}}
"""

GENE_STATEMENT_COUNT_QUERY = """SELECT ?gene ?geneLabel (COUNT(?p) AS ?statementCount)
WHERE {{
  ?gene wdt:P2293 wd:{disease_id} .
  ?gene ?p ?o .
  FILTER(STRSTARTS(STR(?p), "http://www.wikidata.org/prop/direct/"))
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en" }}
}}
GROUP BY ?gene ?geneLabel
ORDER BY DESC(?statementCount)
"""

# P688 encodes, P129 physically interacts with
PROTEIN_INTERACTION_QUERY = """SELECT DISTINCT ?p1Label ?p2Label
WHERE {{
  ?gene wdt:P2293 wd:{disease_id} .
  ?gene wdt:P688 ?p1 .
  ?p1 wdt:P129 ?p2 .
  FILTER(?p1 != ?p2)
  FILTER(STR(?p1) < STR(?p2))
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "en" }}
}}
ORDER BY ?p1Label ?p2Label
"""

GENAGE_QUERY = """PREFIX genage: <http://bio2rdf.org/genage:>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>

SELECT ?gene ?symbol ?organism ?effect
WHERE {{
  ?gene rdf:type genage:Gene .
  ?gene rdfs:label ?symbol .
  OPTIONAL {{ ?gene genage:organism ?organism }}
  OPTIONAL {{ ?gene genage:lifespan-effect ?effect }}
}}
LIMIT {limit}
"""


def _check_wikidata_id(identifier: str) -> str:
    if not isinstance(identifier, str) or not WIKIDATA_ID_PATTERN.fullmatch(identifier):
        raise ValueError(f'invalid Wikidata item identifier: {identifier!r}')
    return identifier


def gene_trait_query(trait_id: str = ALZHEIMERS_DISEASE) -> str:
    """Get a query for genes genetically associated with the given trait."""
    return GENE_TRAIT_QUERY.format(trait_id=_check_wikidata_id(trait_id))


def gene_statement_count_query(disease_id: str) -> str:
    """Get a query counting the direct statements on each gene associated with the disease."""
    return GENE_STATEMENT_COUNT_QUERY.format(disease_id=_check_wikidata_id(disease_id))


def protein_interaction_query(disease_id: str) -> str:
    """Get a query for physical interactions between proteins encoded by genes associated with the disease.

    Self interactions are filtered and each pair comes back in only one orientation.
    """
    return PROTEIN_INTERACTION_QUERY.format(disease_id=_check_wikidata_id(disease_id))


def genage_query(limit: int = 100) -> str:
    """Get a query for ageing-related genes in GenAge."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f'limit should be a positive integer: {limit!r}')
    return GENAGE_QUERY.format(limit=limit)
