"""portfolio-cli: manage the projects showcase of a portfolio site."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
