"""Built-in reference instances, addressable by name from the config."""

from __future__ import annotations

from .models import ProblemModel

# 3 jobs x 3 machines
EXAMPLE = ProblemModel(
    jobs=(
        ((0, 1), (2, 1), (2, 3)),
        ((0, 1), (0, 2), (1, 3)),
        ((1, 3), (2, 4)),
    ),
    machines_number=3,
)

# 4 jobs x 5 machines
DATASET = ProblemModel(
    jobs=(
        ((0, 1), (2, 1), (2, 3), (3, 3)),
        ((0, 1), (3, 2), (0, 2), (1, 3), (4, 1)),
        ((1, 3), (2, 4), (3, 1), (4, 4)),
        ((2, 1), (3, 1), (0, 1), (4, 1)),
    ),
    machines_number=5,
)

BUILTIN_INSTANCES: dict[str, ProblemModel] = {
    "example": EXAMPLE,
    "dataset": DATASET,
}
