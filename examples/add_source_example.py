"""Example: Adding a new source dynamically without modifying registry.py.

Registers an in-memory source kind and runs the pipeline through it.
"""

from typing import Any, List

from review_terms.pipeline.build import run_pipeline
from review_terms.policies.loader import NormalizationConfig
from review_terms.sources.base import DataSource, SourceSpec
from review_terms.sources.registry import list_sources, load_texts, register_source


class InlineSource(DataSource):
    """Serves reviews held in SourceSpec.options (handy for notebooks and demos)."""
    kind = "inline"

    def read_column(self) -> List[Any]:
        return list(self.spec.options.get("rows", []))


register_source("inline", InlineSource)
print("Registered sources:", list_sources())

spec = SourceSpec(
    name="demo",
    kind="inline",
    dataset="<memory>",
    options={"rows": ["Great dress, not great fit.", "Love this dress!", None]},
)
texts = load_texts(spec)  # the None row is coerced to ""

result = run_pipeline(texts, NormalizationConfig.for_language("english", sparse_threshold=0.99))
for tf in result.ranking:
    print(tf.term, tf.total_count, tf.document_count)
