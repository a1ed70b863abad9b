"""
Concurrency tests for fuzzyrank.

Tests cover:
- Shared comparators used from many threads
- Parallel ranking calls on disjoint inputs
- Internal worker pools keep the stable ordering
"""

import concurrent.futures

import fuzzyrank as fz


class TestSharedComparator:
    """A comparator built once can be shared across threads."""

    def test_comparator_shared_between_threads(self):
        compare = fz.build_comparator()
        words = [f"word_{i}" for i in range(200)]

        def worker(word):
            return compare("WORD_50", word)

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, words))

        assert results == [compare("WORD_50", w) for w in words]
        assert results[50] == 0


class TestParallelRanking:
    """Ranking calls on disjoint inputs do not interfere."""

    def test_parallel_closest_string(self):
        def worker(thread_id):
            candidates = [f"item_{thread_id}_{i}" for i in range(100)]
            return fz.closest_string(f"item_{thread_id}_50", candidates)

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(worker, i) for i in range(4)]
            results = [f.result() for f in futures]

        assert results == [f"item_{i}_50" for i in range(4)]

    def test_parallel_sort_by_similarity(self):
        candidates = ["world", "help", "hello", "test", "hep", "heap"]
        expected = fz.sort_by_similarity(candidates, "hep")

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = [
                executor.submit(fz.sort_by_similarity, candidates, "hep") for _ in range(20)
            ]
            results = [f.result() for f in futures]

        assert all(r == expected for r in results)


class TestWorkerPool:
    """Distances computed on a pool are ordered exactly like serial ones."""

    def test_ties_keep_input_order_with_workers(self):
        # Every candidate is one edit away; order must follow the input
        candidates = [f"ab{chr(ord('a') + i)}" for i in range(26)]
        result = fz.rank("ab", candidates, workers=8)
        assert [r.text for r in result] == candidates
        assert all(r.distance == 1 for r in result)

    def test_custom_comparator_with_workers(self):
        opts = fz.MatchingOptions(compare_fn=lambda a, b: abs(len(a) - len(b)))
        candidates = ["aaaa", "a", "aaa", "aa", "b"]
        result = fz.rank("a", candidates, opts, workers=3)
        assert [r.text for r in result] == ["a", "b", "aa", "aaa", "aaaa"]
