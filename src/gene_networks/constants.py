# -*- coding: utf-8 -*-

"""Constants for Gene Networks."""

#: Charts, networks, and summaries are written here, relative to the working directory
OUTPUT = 'output'

#: The Wikidata Query Service
WIKIDATA_ENDPOINT_URL = 'https://query.wikidata.org/sparql'
#: The Bio2RDF GenAge Virtuoso endpoint
GENAGE_ENDPOINT_URL = 'http://genage.bio2rdf.org/sparql'

#: Alzheimer's disease
ALZHEIMERS_DISEASE = 'Q11081'
#: Amyotrophic lateral sclerosis
ALS = 'Q131755'
DEFAULT_TRAIT = ALZHEIMERS_DISEASE

GENECARDS_URL = 'https://www.genecards.org/cgi-bin/carddisp.pl'

NODE_COLOR = '#ff4fa3'
EDGE_COLOR = '#b1005a'

#: Placeholder for optional values missing from a result row
MISSING = 'N/A'

#: Wikidata asks clients to identify themselves
USER_AGENT = 'gene-networks/0.1.0 (SPARQLWrapper)'
