"""
Maven Feed - release feeds for Maven Central libraries.

This package polls the Maven Central search API for a configured set of
library coordinates and serves the latest versions as RSS, Atom and JSON Feed.
"""

__version__ = "0.1.0"
