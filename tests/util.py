import functools


def graph_from_bits(left_size, right_size, bits):
    """Build a graph with an edge (Li, Rj) for every set bit i*right_size+j"""
    graph = {}
    for u in range(left_size):
        for v in range(right_size):
            if bits & (1 << (u * right_size + v)):
                graph.setdefault(f"L{u}", []).append(f"R{v}")
    return graph


def random_graph(left_size, right_size, probability, rng):
    bits = 0
    for i in range(left_size * right_size):
        if rng.random() < probability:
            bits |= 1 << i
    return graph_from_bits(left_size, right_size, bits)


def fully_connected(left_size, right_size):
    return graph_from_bits(left_size, right_size, (1 << left_size * right_size) - 1)


def brute_force_matching_size(graph):
    """Size of a maximum matching, by trying every choice for every u"""
    left = list(graph)

    @functools.lru_cache(maxsize=None)
    def best(idx, used):
        if idx == len(left):
            return 0
        result = best(idx + 1, used)
        for v in graph[left[idx]]:
            if v not in used:
                result = max(result, 1 + best(idx + 1, used | frozenset([v])))
        return result

    return best(0, frozenset())


def assert_valid_matching(graph, matching):
    for u, v in matching.items():
        assert v in graph[u], f"{u!r} -> {v!r} is not an edge of {graph!r}"
    assert len(set(matching.values())) == len(matching)
    assert dict(matching.inverse) == {v: u for u, v in matching.items()}
