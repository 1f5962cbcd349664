from backend.engine.gamegenerator.generator import PRESETS, GameGenerator, Preset

__all__ = ["GameGenerator", "PRESETS", "Preset"]
