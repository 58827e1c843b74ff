import math
import struct
import wave

from .config import SAMPLE_RATE

FADE_MS = 8     # ramp in/out, avoids clicks at the edges


def tone_samples(freq, duration_ms, sample_rate=SAMPLE_RATE, volume=0.8):
    """
    16-bit mono sine samples with short linear fades
    """
    n = int(sample_rate * duration_ms / 1000)
    fade = min(n // 2, int(sample_rate * FADE_MS / 1000))
    peak = int(32767 * volume)
    out = []
    for i in range(n):
        env = 1.0
        if fade:
            if i < fade:
                env = i / fade
            elif i >= n - fade:
                env = (n - 1 - i) / fade
        out.append(int(peak * env * math.sin(2 * math.pi * freq * i / sample_rate)))
    return out


def write_wav(path, notes, sample_rate=SAMPLE_RATE):
    """
    write a sequence of (hz, ms) notes as a mono 16-bit wav
    """
    samples = []
    for freq, duration_ms in notes:
        samples.extend(tone_samples(freq, duration_ms, sample_rate))
    with wave.open(str(path), 'wb') as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(struct.pack(f'<{len(samples)}h', *samples))
    return path
