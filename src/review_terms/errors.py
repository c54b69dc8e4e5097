"""Exception types.

InputError is raised at the ingestion boundary, before any pipeline work.
ConfigError covers bad thresholds, unknown stage/source/writer names and similar.

Empty results (every document normalizes to nothing, or pruning removes every
term) are not errors; they are logged and flow through as an empty ranking.
"""

from __future__ import annotations


class ReviewTermsError(Exception):
    """Base class for all package errors."""


class InputError(ReviewTermsError, ValueError):
    """Source has no text field, yields no documents, or holds rejected values."""


class ConfigError(ReviewTermsError, ValueError):
    """Invalid configuration value."""
