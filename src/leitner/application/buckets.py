"""
Conversions between the two bucket representations.

A BucketMap is the sparse, authoritative form; BucketSets is a dense view
built on demand for index-based scans and never written back.
"""

from leitner.domain.models import BucketMap, BucketRange, BucketSets


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Render a bucket mapping as a list indexed by bucket number.

    Sets are placed by reference, not copied. Indices with no bucket in the
    mapping hold a fresh empty set.

    Args:
        buckets: Mapping of bucket number to cards.

    Returns:
        List of length max(keys) + 1, or an empty list for an empty mapping.
    """
    if not buckets:
        return []

    bucket_sets: BucketSets = [set() for _ in range(max(buckets) + 1)]
    for number, cards in buckets.items():
        bucket_sets[number] = cards

    return bucket_sets


def get_bucket_range(bucket_sets: BucketSets) -> BucketRange | None:
    """
    Find the lowest and highest bucket that hold any cards.

    Returns None when every bucket is empty.
    """
    occupied = [i for i, cards in enumerate(bucket_sets) if cards]
    if not occupied:
        return None
    return BucketRange(min_bucket=min(occupied), max_bucket=max(occupied))
