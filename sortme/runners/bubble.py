"""Bubble sort with early exit on a swap-free pass."""

from .base import AlgorithmRunner, EventRecorder


class BubbleRunner(AlgorithmRunner):
    name = "bubble"

    def simulate(self, rec: EventRecorder) -> None:
        a = rec.a
        n = len(a)
        for i in range(n - 1):
            swapped = False
            for j in range(n - 1 - i):
                rec.compare(j, j + 1)
                if a[j] > a[j + 1]:
                    rec.swap(j, j + 1)
                    swapped = True
            rec.mark_sorted(n - 1 - i)
            if not swapped:
                # remaining prefix is already in order
                rec.mark_range_sorted(0, n - 2 - i)
                return
        rec.mark_sorted(0)
