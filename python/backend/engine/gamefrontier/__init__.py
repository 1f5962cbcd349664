from backend.engine.gamefrontier.frontier import (
    Frontier,
    HeapFrontier,
    QueueFrontier,
    make_frontier,
)

__all__ = ["Frontier", "HeapFrontier", "QueueFrontier", "make_frontier"]
