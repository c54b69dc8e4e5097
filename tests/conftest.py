from __future__ import annotations
import logging
import pytest

from review_terms import logging_
from review_terms.policies.loader import NormalizationConfig, load_stopwords


@pytest.fixture(autouse=True)
def _detach_run_log_handlers():
    yield
    root = logging.getLogger()
    for h in logging_._HANDLERS:
        root.removeHandler(h)
        h.close()
    logging_._HANDLERS.clear()


@pytest.fixture
def example_texts():
    return ["Great dress, not great fit.", "Love this dress!"]


@pytest.fixture
def example_config():
    return NormalizationConfig(stopwords={"great", "this"}, sparse_threshold=0.99)


@pytest.fixture(scope="session")
def english_stopwords():
    return load_stopwords("english")


@pytest.fixture
def reviews():
    return [
        "Love this dress! Fits perfectly and the fabric is soft.",
        "Great dress, not great fit. Too tight in the waist.",
        "Soft fabric, lovely color. Would buy again.",
        "Not worth the price. The fabric feels cheap and the color faded.",
        "",
        "Perfect fit, perfect length. Love it!",
        "The color is nice but the dress runs small.",
    ]
