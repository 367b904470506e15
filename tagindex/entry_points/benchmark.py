import argparse

from tagindex.benchmark.config import (
    DEFAULT_NUMBER_OF_TAGS,
    DEFAULT_NUMBER_OF_VALUES,
    DEFAULT_QUERY_ROUNDS,
    DEFAULT_TAGS_PER_QUERY,
    DEFAULT_TAGS_PER_VALUE,
    BenchmarkConfig,
)
from tagindex.benchmark.runner import run_benchmark
from tagindex.utility.logging.utility import LoggingLevel, setup_logger


def get_args():
    parser = argparse.ArgumentParser("tagged index benchmark", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument(
        "--number-of-values", "-nv", type=int, default=DEFAULT_NUMBER_OF_VALUES, help="number of values to tag"
    )
    parser.add_argument(
        "--number-of-tags", "-nt", type=int, default=DEFAULT_NUMBER_OF_TAGS, help="size of the tag vocabulary"
    )
    parser.add_argument(
        "--tags-per-value", "-tv", type=int, default=DEFAULT_TAGS_PER_VALUE, help="number of tags given to each value"
    )
    parser.add_argument(
        "--tags-per-query", "-tq", type=int, default=DEFAULT_TAGS_PER_QUERY, help="number of tags in each query"
    )
    parser.add_argument(
        "--query-rounds", "-qr", type=int, default=DEFAULT_QUERY_ROUNDS, help="number of queries per query family"
    )
    parser.add_argument("--seed", "-s", type=int, default=None, help="random seed, for reproducible workloads")
    parser.add_argument(
        "--logging-paths",
        "-lp",
        nargs="*",
        type=str,
        default=("/dev/stdout",),
        help='specify where benchmark log should be written to, it can accept multiple files, default is "/dev/stdout"',
    )
    parser.add_argument(
        "--logging-level",
        "-ll",
        type=str,
        choices=LoggingLevel.allowed_types(),
        default=LoggingLevel.INFO.name,
        help="specify the logging level",
    )
    parser.add_argument(
        "--logging-config-file",
        "-lc",
        type=str,
        default=None,
        help="use standard python .conf file to specify python logging file configuration format, this will bypass "
        "--logging-paths and --logging-level at the same time",
    )
    return parser.parse_args()


def main():
    args = get_args()
    setup_logger(args.logging_paths, args.logging_config_file, args.logging_level)

    config = BenchmarkConfig(
        number_of_values=args.number_of_values,
        number_of_tags=args.number_of_tags,
        tags_per_value=args.tags_per_value,
        tags_per_query=args.tags_per_query,
        query_rounds=args.query_rounds,
        seed=args.seed,
    )
    run_benchmark(config)


if __name__ == "__main__":
    main()
