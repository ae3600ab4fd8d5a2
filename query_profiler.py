import functools
import time
import seaborn as sns
import matplotlib.pyplot as plt
import numpy as np

class QueryProfiler:
    def __init__(self):
        self.profiles = {}

    def profile(self, name):
        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                result = func(*args, **kwargs)
                elapsed_time = time.perf_counter() - start_time
                self.profiles.setdefault(name, []).append(elapsed_time)
                return result

            return wrapper

        return decorator

    def timings(self, name) -> np.ndarray:
        if name not in self.profiles:
            raise ValueError(f"No data found for query '{name}'")
        return np.array(self.profiles[name])

    def summary(self, name) -> dict:
        data = self.timings(name)
        return {
            'count': len(data),
            'mean': float(np.mean(data)),
            'median': float(np.median(data)),
            'max': float(np.max(data)),
        }

    def plot(self, *names, show=True):
        # Kernel density of the recorded timings, one curve per query name
        names = names or tuple(self.profiles)
        fig = plt.figure(figsize=(8, 6))
        plt.title("Kernel Density Plots for Queries")
        plt.xlabel("Execution Time (seconds)")
        plt.ylabel("Density")

        for name in names:
            if name in self.profiles:
                sns.kdeplot(self.timings(name), fill=True, label=name)
            else:
                print(f"No data found for query '{name}'")

        plt.legend()
        if show:
            plt.show()
        return fig
