"""Top-down merge sort."""

from .base import AlgorithmRunner, EventRecorder


class MergeRunner(AlgorithmRunner):
    name = "merge"

    def simulate(self, rec: EventRecorder) -> None:
        self._sort(rec, 0, len(rec.a) - 1)

    def _sort(self, rec: EventRecorder, l: int, r: int) -> None:  # noqa: E741
        if l >= r:
            return
        m = (l + r) // 2
        self._sort(rec, l, m)
        self._sort(rec, m + 1, r)
        self._merge(rec, l, m, r)
        rec.mark_range_sorted(l, r)

    def _merge(self, rec: EventRecorder, l: int, m: int, r: int) -> None:  # noqa: E741
        """
        Merge a[l..m] and a[m+1..r].

        Compares are reported at the halves' original positions; ties take
        the left element, which keeps the sort stable.
        """
        a = rec.a
        left = a[l:m + 1]
        right = a[m + 1:r + 1]
        i = j = 0
        k = l
        while i < len(left) and j < len(right):
            rec.compare(l + i, m + 1 + j)
            if left[i] <= right[j]:
                rec.write(k, left[i])
                i += 1
            else:
                rec.write(k, right[j])
                j += 1
            k += 1
        for value in left[i:]:
            rec.write(k, value)
            k += 1
        for value in right[j:]:
            rec.write(k, value)
            k += 1
