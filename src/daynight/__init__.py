"""Day-night cycle: in-universe clock and time-of-day screen tones."""
