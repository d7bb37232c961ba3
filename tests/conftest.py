"""Shared fixtures for the Gene Networks tests."""

import matplotlib

matplotlib.use('Agg')

import pytest  # noqa:E402


def _literal(value):
    return {'type': 'literal', 'xml:lang': 'en', 'value': value}


@pytest.fixture
def interaction_bindings():
    """Rows as the interaction query returns them."""
    return [
        {'p1Label': _literal('ProteinA'), 'p2Label': _literal('ProteinB')},
        {'p1Label': _literal('ProteinB'), 'p2Label': _literal('ProteinA')},
        {'p1Label': _literal('ProteinA'), 'p2Label': _literal('ProteinC')},
    ]


@pytest.fixture
def statement_count_bindings():
    return [
        {
            'gene': {'type': 'uri', 'value': 'http://www.wikidata.org/entity/Q14859476'},
            'geneLabel': _literal('APOE'),
            'statementCount': {
                'type': 'literal',
                'datatype': 'http://www.w3.org/2001/XMLSchema#integer',
                'value': '87',
            },
        },
        {
            'gene': {'type': 'uri', 'value': 'http://www.wikidata.org/entity/Q414043'},
            'geneLabel': _literal('APP'),
            'statementCount': {
                'type': 'literal',
                'datatype': 'http://www.w3.org/2001/XMLSchema#integer',
                'value': '64',
            },
        },
    ]
