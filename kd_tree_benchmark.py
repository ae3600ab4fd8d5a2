import numpy as np
from kd_tree import KDTree
from point import Point2, PointTrait
from query_profiler import QueryProfiler
from config import BENCHMARK_POINTS, BENCHMARK_QUERIES, BENCHMARK_RADIUS, LOWER_BOUNDS, UPPER_BOUNDS, RANDOM_SEED

def run_benchmark(num_points=BENCHMARK_POINTS, num_queries=BENCHMARK_QUERIES, radius=BENCHMARK_RADIUS, seed=RANDOM_SEED, profiler=None, verbose=True):
    if num_points < 1 or num_queries < 1:
        raise ValueError("num_points and num_queries must be at least 1")
    profiler = profiler or QueryProfiler()
    rng = np.random.default_rng(seed)
    points = [Point2(*p) for p in rng.uniform(LOWER_BOUNDS, UPPER_BOUNDS, size=(num_points, 2)).tolist()]
    queries = [Point2(*q) for q in rng.uniform(LOWER_BOUNDS, UPPER_BOUNDS, size=(num_queries, 2)).tolist()]

    tree = KDTree()
    insert = profiler.profile("insert")(tree.insert)
    for point in points:
        insert(point)

    nearest = profiler.profile("nearest")(tree.nearest)
    range_query = profiler.profile("range_query")(tree.range_query)

    @profiler.profile("brute_force_nearest")
    def brute_force_nearest(query):
        return min(points, key=lambda p: PointTrait.dist_sq(p, query))

    @profiler.profile("brute_force_range_query")
    def brute_force_range_query(query):
        return [p for p in points if PointTrait.dist_sq(p, query) <= radius * radius]

    for i, query in enumerate(queries):
        found = nearest(query)
        expected = brute_force_nearest(query)
        # Ties can pick a different point at the same distance
        if PointTrait.dist_sq(found, query) != PointTrait.dist_sq(expected, query):
            raise RuntimeError(f"nearest mismatch for {query}: {found} vs {expected}")
        range_query(query, radius)
        brute_force_range_query(query)
        if verbose:
            print(f"🔍 Querying: {i+1}/{num_queries}", end="\r", flush=True)

    summaries = {name: profiler.summary(name) for name in profiler.profiles}
    if verbose:
        print()
        print("=====================================")
        print(f"Benchmark: {num_points} points, {num_queries} queries, radius {radius}")
        for name, summary in summaries.items():
            print(f"Average {name} duration: {summary['mean']:.3e} s")
        print("=====================================")
    return summaries

if __name__ == '__main__':
    profiler = QueryProfiler()
    run_benchmark(profiler=profiler)
    profiler.plot("nearest", "brute_force_nearest")
