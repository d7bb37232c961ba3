"""Tests for running queries and mapping their rows."""

from unittest.mock import MagicMock, patch

import pytest

from gene_networks.client import (
    AgeingGene,
    GeneStatementCount,
    GeneTrait,
    SparqlResponseError,
    get_ageing_genes,
    get_bindings,
    get_gene_statement_counts,
    get_gene_traits,
    get_interactions,
    get_results,
)
from gene_networks.constants import GENAGE_ENDPOINT_URL, WIKIDATA_ENDPOINT_URL
from gene_networks.graph import MalformedRowError


def _wrap(bindings):
    return {'head': {'vars': []}, 'results': {'bindings': bindings}}


class TestGetResults:

    @patch('gene_networks.client.SPARQLWrapper')
    def test_json(self, mock_wrapper):
        sparql = mock_wrapper.return_value
        sparql.query.return_value.convert.return_value = _wrap([])
        assert get_results(WIKIDATA_ENDPOINT_URL, 'SELECT * WHERE { ?s ?p ?o }') == _wrap([])
        sparql.setQuery.assert_called_once_with('SELECT * WHERE { ?s ?p ?o }')
        sparql.setReturnFormat.assert_called_once_with('json')

    @patch('gene_networks.client.get_results')
    def test_missing_envelope(self, mock_results):
        mock_results.return_value = {'boolean': True}
        with pytest.raises(SparqlResponseError):
            get_bindings(WIKIDATA_ENDPOINT_URL, 'ASK { ?s ?p ?o }')


@patch('gene_networks.client.get_results')
class TestWikidata:

    def test_gene_traits(self, mock_results):
        mock_results.return_value = _wrap([
            {'geneLabel': {'value': 'APOE'}, 'traitLabel': {'value': "Alzheimer's disease"}},
        ])
        assert get_gene_traits('Q11081') == [GeneTrait('APOE', "Alzheimer's disease")]
        endpoint, query = mock_results.call_args[0]
        assert endpoint == WIKIDATA_ENDPOINT_URL
        assert 'wd:Q11081' in query

    def test_statement_counts(self, mock_results, statement_count_bindings):
        mock_results.return_value = _wrap(statement_count_bindings)
        rows = get_gene_statement_counts('Q11081', endpoint_url='http://localhost:3030/sparql')
        assert rows == [GeneStatementCount('APOE', 87), GeneStatementCount('APP', 64)]
        assert isinstance(rows[0].count, int)
        assert mock_results.call_args[0][0] == 'http://localhost:3030/sparql'

    def test_interactions(self, mock_results, interaction_bindings):
        mock_results.return_value = _wrap(interaction_bindings)
        assert get_interactions('Q11081') == [
            ('ProteinA', 'ProteinB'),
            ('ProteinB', 'ProteinA'),
            ('ProteinA', 'ProteinC'),
        ]

    def test_interactions_malformed(self, mock_results):
        mock_results.return_value = _wrap([{'p1Label': {'value': 'ProteinA'}}])
        with pytest.raises(MalformedRowError):
            get_interactions('Q11081')

    def test_gene_traits_missing_label(self, mock_results):
        mock_results.return_value = _wrap([
            {'geneLabel': {'value': 'APOE'}, 'traitLabel': {'value': "Alzheimer's disease"}},
            {'gene': {'value': 'http://www.wikidata.org/entity/Q14859476'}},
        ])
        with pytest.raises(MalformedRowError) as exc_info:
            get_gene_traits('Q11081')
        assert exc_info.value.index == 1
        assert '?geneLabel' in str(exc_info.value)

    def test_statement_counts_missing_count(self, mock_results, statement_count_bindings):
        del statement_count_bindings[0]['statementCount']
        mock_results.return_value = _wrap(statement_count_bindings)
        with pytest.raises(MalformedRowError) as exc_info:
            get_gene_statement_counts('Q11081')
        assert exc_info.value.index == 0

    def test_statement_counts_not_integer(self, mock_results, statement_count_bindings):
        statement_count_bindings[1]['statementCount']['value'] = 'many'
        mock_results.return_value = _wrap(statement_count_bindings)
        with pytest.raises(MalformedRowError) as exc_info:
            get_gene_statement_counts('Q11081')
        assert exc_info.value.index == 1

    def test_invalid_identifier(self, mock_results):
        with pytest.raises(ValueError):
            get_interactions('alzheimers')
        mock_results.assert_not_called()


class TestGenAge:

    @patch('gene_networks.client.requests.get')
    def test_ageing_genes(self, mock_get):
        response = MagicMock()
        response.json.return_value = _wrap([
            {
                'gene': {'value': 'http://bio2rdf.org/genage:0001'},
                'symbol': {'value': 'daf-2'},
                'organism': {'value': 'Caenorhabditis elegans'},
                'effect': {'value': 'increase'},
            },
            {
                'gene': {'value': 'http://bio2rdf.org/genage:0002'},
                'symbol': {'value': 'SIRT1'},
            },
        ])
        mock_get.return_value = response

        rows = get_ageing_genes(limit=2)

        assert rows == [
            AgeingGene('daf-2', 'Caenorhabditis elegans', 'increase', 'http://bio2rdf.org/genage:0001'),
            AgeingGene('SIRT1', 'N/A', 'N/A', 'http://bio2rdf.org/genage:0002'),
        ]
        response.raise_for_status.assert_called_once_with()
        args, kwargs = mock_get.call_args
        assert args == (GENAGE_ENDPOINT_URL,)
        assert kwargs['params']['format'] == 'json'
        assert 'LIMIT 2' in kwargs['params']['query']
