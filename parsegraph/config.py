"""Configuration classes for parsegraph components."""

from dataclasses import dataclass

#: Recognized path search strategies.
STRATEGIES = ("recursive", "iterative")


def check_strategy(strategy: str) -> None:
    """Raise ValueError unless ``strategy`` is one of ``STRATEGIES``."""
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Invalid strategy '{strategy}'. Valid values are: "
            f"{', '.join(STRATEGIES)}"
        )


@dataclass
class SearchConfig:
    """Configuration for graph entry lookup, path search and path rendering."""

    # Name of the state where every enumeration begins
    entry_state: str = "start"

    # "recursive" uses the call stack; "iterative" keeps an explicit frame stack
    strategy: str = "iterative"

    # Separator placed after (or between) state names when rendering a path
    delimiter: str = "; "
    trailing_delimiter: bool = True

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If the entry state name is empty or the strategy is unknown.
        """
        if not isinstance(self.entry_state, str) or not self.entry_state:
            raise ValueError("entry_state must be a non-empty string")
        check_strategy(self.strategy)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
