# metrics_tracker.py - running sums/averages kept for the current session

from collections import defaultdict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def count(self, key):
        return self.n[key]

    def summary(self):
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in self.m}

    def reset(self):
        self.m.clear()
        self.n.clear()
