from .enrichment import EnrichmentResolver
from .classifier import classify
from .filtering import filter_transactions
from .feed import FeedAssembler, filter_options

__all__ = [
    "EnrichmentResolver",
    "classify",
    "filter_transactions",
    "FeedAssembler",
    "filter_options",
]
