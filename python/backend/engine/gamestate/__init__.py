from backend.engine.gamestate.state import State, StateArena

__all__ = ["State", "StateArena"]
