"""Depth- and breadth-first graph algorithms: colouring, bridges, cycles, SCCs, ordering.

Nodes are numbered ``1..n`` throughout.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

__all__ = [
    "is_bipartite",
    "find_bridges",
    "find_directed_cycle",
    "find_undirected_cycle",
    "find_simple_cycle",
    "strongly_connected_components",
    "condensation",
    "topological_sort",
]


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside [1, {n}]")


def _adjacency(n: int, edges: Iterable[tuple[int, int]], directed: bool) -> list[list[int]]:
    if n < 0:
        raise ValueError("n must be non-negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph can be two-coloured."""
    adj = _adjacency(n, edges, directed=False)
    colour = [-1] * (n + 1)
    for start in range(1, n + 1):
        if colour[start] != -1:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nb in adj[node]:
                if colour[nb] == -1:
                    colour[nb] = colour[node] ^ 1
                    queue.append(nb)
                elif colour[nb] == colour[node]:
                    return False
    return True


def find_bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph as ``(parent, child)`` DFS tree edges.

    Bridges are listed in the order their child finishes.
    """
    edge_list = list(edges)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for eid, (u, v) in enumerate(edge_list):
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append((v, eid))
        adj[v].append((u, eid))
    tin = [-1] * (n + 1)
    low = [0] * (n + 1)
    timer = 0
    bridges: list[tuple[int, int]] = []
    for root in range(1, n + 1):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent_edge, it = stack[-1]
            for nb, eid in it:
                if eid == parent_edge:
                    continue
                if tin[nb] != -1:
                    low[node] = min(low[node], tin[nb])
                else:
                    tin[nb] = low[nb] = timer
                    timer += 1
                    stack.append((nb, eid, iter(adj[nb])))
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    if low[node] > tin[parent]:
                        bridges.append((parent, node))
                    low[parent] = min(low[parent], low[node])
    return bridges


def find_directed_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return one cycle of a directed graph, or None when it is acyclic.

    Each node of the result has an arc to the next, and the last to the first.
    """
    adj = _adjacency(n, edges, directed=True)
    colour = [0] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if colour[start]:
            continue
        colour[start] = 1
        stack = [(start, iter(adj[start]))]
        while stack:
            node, it = stack[-1]
            for nb in it:
                if colour[nb] == 0:
                    parent[nb] = node
                    colour[nb] = 1
                    stack.append((nb, iter(adj[nb])))
                    break
                if colour[nb] == 1:
                    cycle = [nb]
                    v = node
                    while v != nb:
                        cycle.append(v)
                        v = parent[v]
                    cycle.reverse()
                    return cycle
            else:
                colour[node] = 2
                stack.pop()
    return None


def find_undirected_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return one cycle of an undirected graph, first node repeated at the end.

    Returns None when the graph is a forest.
    """
    adj = _adjacency(n, edges, directed=False)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, 0, iter(adj[start]))]
        while stack:
            node, par, it = stack[-1]
            for nb in it:
                if nb == par:
                    continue
                if visited[nb]:
                    cycle = [nb]
                    v = node
                    while v != nb:
                        cycle.append(v)
                        v = parent[v]
                    cycle.append(nb)
                    cycle.reverse()
                    return cycle
                visited[nb] = True
                parent[nb] = node
                stack.append((nb, node, iter(adj[nb])))
                break
            else:
                stack.pop()
    return None


def _is_chordless(path: list[int], adj: list[list[int]]) -> bool:
    successor = dict(zip(path, path[1:] + path[:1]))
    members = set(path)
    return all(
        son not in members or successor[node] == son for node in path for son in adj[node]
    )


def find_simple_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a directed cycle with no other arcs among its nodes, or None.

    The cycle is found from the smallest root that has one.
    """
    adj = _adjacency(n, edges, directed=True)
    for root in range(1, n + 1):
        parent = {root: 0}
        stack = [(root, iter(adj[root]))]
        while stack:
            node, it = stack[-1]
            for son in it:
                if son == root:
                    path = [node]
                    while path[-1] != root:
                        path.append(parent[path[-1]])
                    path.reverse()
                    if _is_chordless(path, adj):
                        return path
                if son in parent:
                    continue
                parent[son] = node
                stack.append((son, iter(adj[son])))
                break
            else:
                stack.pop()
    return None


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return the strongly connected components in the order Tarjan's method closes them.

    Nodes within a component are in the order they leave the stack.
    """
    adj = _adjacency(n, edges, directed=True)
    index = [0] * (n + 1)
    low = [0] * (n + 1)
    on_stack = [False] * (n + 1)
    pending: list[int] = []
    components: list[list[int]] = []
    timer = 0
    for start in range(1, n + 1):
        if index[start]:
            continue
        timer += 1
        index[start] = low[start] = timer
        pending.append(start)
        on_stack[start] = True
        work = [(start, iter(adj[start]))]
        while work:
            node, it = work[-1]
            for son in it:
                if index[son] and on_stack[son]:
                    low[node] = min(low[node], index[son])
                elif not index[son]:
                    timer += 1
                    index[son] = low[son] = timer
                    pending.append(son)
                    on_stack[son] = True
                    work.append((son, iter(adj[son])))
                    break
            else:
                work.pop()
                if low[node] == index[node]:
                    component = []
                    while True:
                        x = pending.pop()
                        on_stack[x] = False
                        component.append(x)
                        if x == node:
                            break
                    components.append(component)
                if work and on_stack[node]:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
    return components


def condensation(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[list[int], list[list[int]]]:
    """Collapse each strongly connected component to one node.

    Returns ``(membership, successors)``: ``membership[i]`` is the component
    index of node ``i + 1`` (indices follow :func:`strongly_connected_components`),
    and ``successors[c]`` lists, ascending, the components reached by an arc from ``c``.
    """
    edge_list = list(edges)
    components = strongly_connected_components(n, edge_list)
    membership = [0] * n
    for c, component in enumerate(components):
        for node in component:
            membership[node - 1] = c
    successors: list[set[int]] = [set() for _ in components]
    for u, v in edge_list:
        cu, cv = membership[u - 1], membership[v - 1]
        if cu != cv:
            successors[cu].add(cv)
    return membership, [sorted(s) for s in successors]


def topological_sort(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order the nodes so every arc points forward (Kahn's method).

    Raises ValueError when the graph has a cycle.
    """
    adj = _adjacency(n, edges, directed=True)
    indegree = [0] * (n + 1)
    for targets in adj:
        for v in targets:
            indegree[v] += 1
    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adj[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != n:
        raise ValueError("the graph has a cycle")
    return order