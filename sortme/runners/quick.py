"""Quicksort with Lomuto partitioning and a last-element pivot."""

from .base import AlgorithmRunner, EventRecorder


class QuickRunner(AlgorithmRunner):
    name = "quick"

    def simulate(self, rec: EventRecorder) -> None:
        self._sort(rec, 0, len(rec.a) - 1)

    def _sort(self, rec: EventRecorder, l: int, r: int) -> None:  # noqa: E741
        if l > r:
            return
        if l == r:
            rec.mark_sorted(l)
            return
        p = self._partition(rec, l, r)
        self._sort(rec, l, p - 1)
        self._sort(rec, p + 1, r)

    def _partition(self, rec: EventRecorder, l: int, r: int) -> int:  # noqa: E741
        a = rec.a
        pivot = a[r]
        rec.pivot(r)
        i = l - 1
        for j in range(l, r):
            rec.compare(j, r)
            if a[j] < pivot:
                i += 1
                if i != j:
                    rec.swap(i, j)
        if i + 1 != r:
            rec.swap(i + 1, r)
        rec.mark_sorted(i + 1)
        return i + 1
