from backend.engine.gamecost.cost import (
    CostModel,
    Discipline,
    manhattan_sum,
    misplaced_tiles,
    path_cost,
)

__all__ = ["CostModel", "Discipline", "manhattan_sum", "misplaced_tiles", "path_cost"]
