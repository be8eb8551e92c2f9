"""Configuration classes for graphwalk components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for strategy selection in all-pairs searches."""

    # Dense (Floyd-Warshall) regime when num_pois**2 > dense_ratio * num_nodes
    dense_ratio: float = 1.0

    def prefers_dense(self, num_pois: int, num_nodes: int) -> bool:
        """Return True when an all-pairs relaxation beats one search per POI.

        Args:
            num_pois: Number of distinct points of interest present in the graph.
            num_nodes: Number of nodes in the graph.

        Returns:
            True for the dense regime, False for the sparse one.
        """
        if num_pois == 0:
            return False
        return num_pois * num_pois > self.dense_ratio * num_nodes


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
