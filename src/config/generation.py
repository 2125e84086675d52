"""Generation run configuration: a frozen, slotted dataclass."""

from dataclasses import dataclass

from src.encoding.views import MAX2SAT, MODES, OUTPUTS
from src.graph.model import ErModel


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Everything needed to produce one rendered instance.

    Cross-field validation runs in __post_init__ to reject invalid
    configurations before any sampling starts. Model-level constraints
    (p range, n vs. self loops) are enforced by ErModel itself.
    """

    n: int  # vertices, or boolean variables in max2sat mode
    p: float  # edge probability
    digraph: bool = False
    self_loops: bool = False
    mode: str = "graph"  # one of MODES
    output: str = "dimacs"  # one of OUTPUTS, case-insensitive
    weights: tuple[int, ...] | None = None  # weight candidates to resample from
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")
        if self.mode not in MODES:
            raise ValueError(
                f"mode must be one of {MODES}, got {self.mode!r}"
            )
        if self.output.lower() not in OUTPUTS:
            raise ValueError(
                f"output must be one of {OUTPUTS}, got {self.output!r}"
            )
        if self.weights is not None and len(self.weights) == 0:
            raise ValueError("weights must not be empty when given")


def model_for(config: GeneratorConfig) -> ErModel:
    """Build the ErModel a config samples from.

    Max-2-SAT instances are drawn over 2 * n vertices: one per literal.
    """
    n = 2 * config.n if config.mode == MAX2SAT else config.n

    # built in one step: a one-vertex model is only valid with self loops
    return ErModel(
        n, config.p, directed=config.digraph, self_loops=config.self_loops
    )
