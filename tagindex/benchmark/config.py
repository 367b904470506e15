import dataclasses
from typing import Optional

DEFAULT_NUMBER_OF_VALUES = 100_000
DEFAULT_NUMBER_OF_TAGS = 200
DEFAULT_TAGS_PER_VALUE = 5
DEFAULT_TAGS_PER_QUERY = 3
DEFAULT_QUERY_ROUNDS = 1_000


@dataclasses.dataclass
class BenchmarkConfig:
    number_of_values: int = DEFAULT_NUMBER_OF_VALUES
    number_of_tags: int = DEFAULT_NUMBER_OF_TAGS
    tags_per_value: int = DEFAULT_TAGS_PER_VALUE
    tags_per_query: int = DEFAULT_TAGS_PER_QUERY
    query_rounds: int = DEFAULT_QUERY_ROUNDS
    seed: Optional[int] = None

    def __post_init__(self):
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if field.name == "seed" and value is None:
                continue

            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{field.name} should be integer, given {value!r}")

        if self.number_of_values <= 0:
            raise ValueError(f"number_of_values should be positive, given {self.number_of_values}")

        if self.number_of_tags <= 0:
            raise ValueError(f"number_of_tags should be positive, given {self.number_of_tags}")

        if not 0 < self.tags_per_value <= self.number_of_tags:
            raise ValueError(f"tags_per_value should be in [1, {self.number_of_tags}], given {self.tags_per_value}")

        if not 0 < self.tags_per_query <= self.number_of_tags:
            raise ValueError(f"tags_per_query should be in [1, {self.number_of_tags}], given {self.tags_per_query}")

        if self.query_rounds < 0:
            raise ValueError(f"query_rounds should not be negative, given {self.query_rounds}")
