import logging
import random
from typing import Callable, Dict, List

import psutil

from tagindex.benchmark.config import BenchmarkConfig
from tagindex.index.tagged_index import TaggedIndex
from tagindex.utility.formatter import format_bytes, format_integer, format_rate
from tagindex.utility.logging.scoped_logger import ScopedLogger

EXTRA_TAG = "tag_extra"


def run_benchmark(config: BenchmarkConfig) -> Dict:
    """Fills an index with random tag assignments, then times mutations and every query family against it.

    Returns the index statistics taken once filled, the resident memory growth while filling it, and the elapsed
    seconds of each timed step.
    """

    rng = random.Random(config.seed)
    process = psutil.Process()

    tags = [f"tag_{i}" for i in range(config.number_of_tags)]
    index: TaggedIndex[str, int] = TaggedIndex()
    timings: Dict[str, float] = {}

    rss_before = process.memory_info().rss
    fill_message = f"assign {config.tags_per_value} tags to {format_integer(config.number_of_values)} values"
    with ScopedLogger(fill_message) as timer:
        for value in range(config.number_of_values):
            index.assign(value, rng.sample(tags, config.tags_per_value))

    timings["assign"] = timer.elapsed().total_seconds()
    rss_growth = process.memory_info().rss - rss_before
    statistics = index.statistics()

    queries = [rng.sample(tags, config.tags_per_query) for _ in range(config.query_rounds)]
    for name, query in _get_query_families(index).items():
        with ScopedLogger(f"{format_integer(len(queries))} {name} queries") as timer:
            for query_tags in queries:
                query(query_tags)

        timings[name] = timer.elapsed().total_seconds()

    sampled_values = rng.sample(range(config.number_of_values), min(config.query_rounds, config.number_of_values))
    with ScopedLogger(f"add and remove {EXTRA_TAG} on {format_integer(len(sampled_values))} values") as timer:
        for value in sampled_values:
            index.add(value, [EXTRA_TAG])
            index.remove(value, [EXTRA_TAG])

    timings["add_remove"] = timer.elapsed().total_seconds()

    with ScopedLogger(f"delete {format_integer(len(tags))} tags") as timer:
        index.delete_tag(tags)

    timings["delete_tag"] = timer.elapsed().total_seconds()

    logging.info(
        f"index held {format_integer(statistics['values'])} values, {format_integer(statistics['tags'])} tags and "
        f"{format_integer(statistics['links'])} links in {format_bytes(max(rss_growth, 0))}, "
        f"filled at {format_rate(config.number_of_values, timings['assign'])}"
    )

    return {"statistics": statistics, "rss_growth": rss_growth, "timings": timings}


def _get_query_families(index: TaggedIndex) -> Dict[str, Callable[[List[str]], List[int]]]:
    return {
        "intersect": index.intersect,
        "union": index.union,
        "exact": index.exact,
        "difference": lambda tags: index.difference(tags[0], tags[1:]),
        "complement": lambda tags: index.complement(tags[0]),
        "symmetric_difference": index.symmetric_difference,
    }
