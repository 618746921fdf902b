"""Convert GraphQL introspection results to cross-linked Markdown."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
