"""Result objects describing a completed load."""

from dataclasses import dataclass


@dataclass
class LoadStatistics:
    """Statistics gathered while loading one document."""

    node_count: int = 0
    attribute_count: int = 0
    max_depth: int = 0
    characters_processed: int = 0
    processing_time_ms: float = 0.0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def attributes_per_node(self) -> float:
        """Calculate the mean number of attributes per node."""
        if self.node_count == 0:
            return 0.0
        return self.attribute_count / self.node_count
