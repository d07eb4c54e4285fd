# pylint: disable=invalid-name
import collections
import collections.abc
import logging

from ._bimap import MutableBiMap

logger = logging.getLogger(__name__)


def find_matching(G):
    """Find the most pairs in a bipartite graph.

    The problem is better known as maximum cardinality matching. The bipartite
    graph `G` is described as a Mapping, where the keys are the vertices of one
    set (U) and the values are an Iterable of vertices of the other set (V),
    which describe the edges (E) of the graph. For example the graph with
    U=(U0, U1), V=(V0, V1) and E=((U0, V0), (U0, V1), (U1, V0)) can be written
    as:

        G = {
            'U0': ['V0', 'V1'],
            'U1': ['V0'],
        }

    Alternatively `G` can be an Iterable of (u, v) edges:

        G = [('U0', 'V0'), ('U0', 'V1'), ('U1', 'V0')]

    Vertices are compared by equality and must be hashable. None is not a
    valid vertex and raises an InvalidGraphError. `G` is not modified.

    The return value is a maximum matching M, described as a read-only BiMap
    from all matched vertices in U to their matched vertex in V. For the
    example above, the return value would be:

        M = BiMap({
            'U0': 'V1',
            'U1': 'V0',
        })

    If there are multiple maximum matchings, the order of U in `G` decides,
    which one is returned.
    """
    # This is an implementation of the Hopcroft-Karp algorithm.
    G = _adjacency(G)

    # M is the current matching. It starts as an empty matching and is updated
    # until it is a maximum matching.
    M = MutableBiMap()

    round_ = 0
    while True:
        round_ += 1
        layer, target_layer = _breadth_first_search(G, M)
        if target_layer is None:
            break

        logger.debug(
            "Round %d: shortest augmenting paths end after layer %d",
            round_,
            target_layer,
        )

        # At least one augmenting path was found. Start a depth-first search at
        # every free vertex in U.
        for u in G:
            if u not in M:
                _depth_first_search(G, M, layer, target_layer, u)

        logger.debug("Round %d: matching has %d pairs", round_, len(M))

    logger.debug("Found maximum matching with %d pairs", len(M))
    return M.frozen()


def find_unmatched(G, M, V=()):
    """Return the vertices of `G`, which are not part of the matching `M`.

    The result is a tuple of two lists: the free vertices in U, in the order
    of `G`, and the free vertices in V, in the order they first appear in `G`.
    Vertices in V without any edge can be passed in as `V`. They are appended
    to the free vertices in V, if they are not already part of `G`.
    """
    G = _adjacency(G)
    V = list(V)
    for v in V:
        _check_vertex(v)

    free_u = [u for u in G if u not in M]

    matched_v = M.inverse

    free_v = {}
    for vs in [*G.values(), V]:
        for v in vs:
            if v not in matched_v:
                free_v[v] = None

    return free_u, list(free_v)


def _adjacency(G):
    adjacency = {}

    if isinstance(G, collections.abc.Mapping):
        for u, vs in G.items():
            _check_vertex(u)
            adjacency[u] = _neighbors(u, vs)
        return adjacency

    # collect edges into a dict of dicts, to keep the order and drop duplicates
    edges = collections.defaultdict(dict)
    for edge in G:
        try:
            u, v = edge
        except (TypeError, ValueError) as e:
            raise InvalidGraphError(f"Edge {edge!r} is not a pair (u, v)") from e
        _check_vertex(u)
        _check_vertex(v)
        edges[u][v] = None

    for u, vs in edges.items():
        adjacency[u] = list(vs)
    return adjacency


def _neighbors(u, vs):
    if isinstance(vs, (str, bytes)) or not isinstance(vs, collections.abc.Iterable):
        raise InvalidGraphError(f"Neighbors of {u!r} must be an Iterable")

    neighbors = {}
    for v in vs:
        _check_vertex(v)
        neighbors[v] = None
    return list(neighbors)


def _check_vertex(vertex):
    if vertex is None:
        raise InvalidGraphError("None is not a valid vertex")


# This breadth-first search finds the shortest augmenting paths. An augmenting
# path is a special path with the following rules:
# - the path starts at a free vertex in U
# - the path can only traverse unmatched edges from U to V
# - the path can only traverse matched edges from V to U
# - the path ends at a free vertex in V
# The search saves the layer of each vertex in U, at which it was encountered
# in the search, to guide the following depth-first search. It returns these
# layers and the layer, in which the first free v was reached, or None if no
# free v is reachable.
def _breadth_first_search(G, M):
    queue = collections.deque()
    layer = {}
    target_layer = None

    # find free vertices in U to use as starting points
    for u in G:
        if u not in M:
            layer[u] = 1
            queue.append(u)

    M_reverse = M.inverse
    while queue:
        u = queue.popleft()

        # don't look for longer paths, than the shortest one
        if target_layer is not None and layer[u] > target_layer:
            break

        for v in G[u]:
            # Go from v to u over a matched edge. next_u is None, if v is free.
            next_u = M_reverse.get(v)
            if next_u is None:
                if target_layer is None:
                    target_layer = layer[u]
            elif next_u not in layer:  # if not visited, yet
                layer[next_u] = layer[u] + 1
                queue.append(next_u)

    return layer, target_layer


# This depth-first search is guided by the layers found in the breadth-first
# search to find the shortest augmenting paths and update the matching M along
# the way. All previously matched edges in the path are replaced by the
# unmatched edges in the path. Since the augmenting paths start and end at a
# free vertex, every found path increases the number of pairs by one.
#
# The search uses an explicit stack instead of recursion, because a path can be
# as long as U is big. Every u is entered at most once per round: once it is
# left, either a path through it was applied or none exists, so it is removed
# from `layer`.
def _depth_first_search(G, M, layer, target_layer, start):
    M_reverse = M.inverse
    path = []  # edges (u, v) taken to reach the top of the stack
    stack = [(start, iter(G[start]))]

    while stack:
        u, edges = stack[-1]
        for v in edges:
            # Go from v to u over a matched edge. next_u is None, if v is free.
            next_u = M_reverse.get(v)
            if next_u is None:
                # Flip the path. Going backwards, every force_put replaces the
                # matched edge of the following u.
                M.force_put(u, v)
                for path_u, path_v in reversed(path):
                    M.force_put(path_u, path_v)
                for path_u, _ in path:
                    layer.pop(path_u, None)
                layer.pop(u, None)
                return True

            next_layer = layer.get(next_u)
            if next_layer == layer[u] + 1 and next_layer <= target_layer:
                path.append((u, v))
                stack.append((next_u, iter(G[next_u])))
                break
        else:
            # No path found for this u. Mark it, to not try again.
            stack.pop()
            del layer[u]
            if path:
                path.pop()

    return False


class InvalidGraphError(ValueError):
    pass
