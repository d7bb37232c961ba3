# -*- coding: utf-8 -*-

"""Query SPARQL endpoints for gene associations and render them as lists, tables, charts and networks."""

from .graph import Edge, MalformedRowError, Node, build_graph  # noqa:F401

__version__ = '0.1.0'
