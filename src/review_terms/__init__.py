"""review_terms

Config-driven term salience for short review corpora.

Public API surface:
- review_terms.cli.main : CLI entrypoint
- review_terms.pipeline.build.run_pipeline : normalize -> tokenize -> DTM -> prune -> rank
- review_terms.sources : add/extend input sources
- review_terms.stages : add/extend normalization stages
- review_terms.dtm : document-term matrix, sparsity pruning, ranking

The core is pure and in-memory; writing results is left to the caller (the CLI does it).
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
