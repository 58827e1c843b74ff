import random
import tempfile
import unittest
import wave
from pathlib import Path

from tictactoe.confetti import ConfettiBurst
from tictactoe.tones import tone_samples, write_wav


class TestTones(unittest.TestCase):
    def test_sample_count_and_range(self):
        samples = tone_samples(440.0, 100, sample_rate=8000)
        self.assertEqual(len(samples), 800)
        self.assertTrue(all(-32768 <= s <= 32767 for s in samples))
        # faded edges
        self.assertEqual(samples[0], 0)
        self.assertLess(abs(samples[-1]), 2000)

    def test_write_wav(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cue.wav"
            write_wav(path, [(440.0, 50), (880.0, 50)], sample_rate=8000)
            with wave.open(str(path), 'rb') as wav:
                self.assertEqual(wav.getnchannels(), 1)
                self.assertEqual(wav.getsampwidth(), 2)
                self.assertEqual(wav.getframerate(), 8000)
                self.assertEqual(wav.getnframes(), 800)


class TestConfetti(unittest.TestCase):
    def make(self, **kwargs):
        return ConfettiBurst((200.0, 0.0), rng=random.Random(5), **kwargs)

    def test_spawns_count_at_origin(self):
        burst = self.make(count=150)
        self.assertEqual(len(burst.particles), 150)
        self.assertTrue(all((p.x, p.y) == (200.0, 0.0) for p in burst.particles))
        self.assertEqual(burst.opacity, 1.0)

    def test_gravity_pulls_down(self):
        burst = self.make(count=20)
        for _ in range(60):
            burst.step(1 / 60)
        self.assertTrue(all(p.vy > 0 for p in burst.particles))

    def test_fades_then_finishes(self):
        burst = self.make(count=5, lifetime=2.0)
        self.assertTrue(burst.step(1.5))
        self.assertAlmostEqual(burst.opacity, 0.5)
        self.assertFalse(burst.step(1.0))
        self.assertTrue(burst.finished)
        self.assertEqual(burst.opacity, 0.0)
        self.assertFalse(burst.step(0.1))


if __name__ == "__main__":
    unittest.main()
