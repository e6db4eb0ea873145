from slidoku.engine.prng.seeded import SeededRandom

__all__ = ["SeededRandom"]
