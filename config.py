import numpy as np

# Sampling area for random point sets
LOWER_BOUNDS = np.array([0.0, 0.0])
UPPER_BOUNDS = np.array([10.0, 10.0])

RANDOM_SEED = 42

# Size of the randomized self-match test set
RANDOM_TEST_POINTS = 3000

BENCHMARK_POINTS = 5000
BENCHMARK_QUERIES = 500
BENCHMARK_RADIUS = 0.5
