from backend.engine.gameactions.actions import legal_directions, successors

__all__ = ["legal_directions", "successors"]
