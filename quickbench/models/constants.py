"""Constants shared by the runner, models and CLI."""

# Number of untimed execute() calls made before measurement when warmup is on.
WARMUP_ITERATIONS = 5

DEFAULT_COUNT = 100

MICROSECONDS_PER_SECOND = 1_000_000
