"""Selection sort."""

from .base import AlgorithmRunner, EventRecorder


class SelectionRunner(AlgorithmRunner):
    """
    For each slot i, scan the unsorted suffix for its minimum.

    Each scanned element is reported as Compare(i, j): the slot being filled
    against the element under inspection.
    """

    name = "selection"

    def simulate(self, rec: EventRecorder) -> None:
        a = rec.a
        n = len(a)
        for i in range(n):
            lo = i
            for j in range(i + 1, n):
                rec.compare(i, j)
                if a[j] < a[lo]:
                    lo = j
            if lo != i:
                rec.swap(i, lo)
            rec.mark_sorted(i)
