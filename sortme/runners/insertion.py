"""Insertion sort with shifting writes."""

from .base import AlgorithmRunner, EventRecorder


class InsertionRunner(AlgorithmRunner):
    """
    Shifts larger elements right one Write at a time, then writes the key.

    After each key is placed the whole processed prefix [0, i] is reported
    sorted. That is a display convention: the prefix is ordered but not yet
    in its final global position until the run ends.
    """

    name = "insertion"

    def simulate(self, rec: EventRecorder) -> None:
        a = rec.a
        rec.mark_sorted(0)
        for i in range(1, len(a)):
            key = a[i]
            j = i - 1
            while j >= 0:
                rec.compare(j, i)
                if a[j] <= key:
                    break
                rec.write(j + 1, a[j])
                j -= 1
            rec.write(j + 1, key)
            rec.mark_range_sorted(0, i)
