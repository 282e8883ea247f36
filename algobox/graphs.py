"""Graph questions: dependency resolution, complete components and AND-weighted walks."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Sequence


def find_all_recipes(
    recipes: Sequence[str],
    ingredients: Sequence[Sequence[str]],
    supplies: Sequence[str],
) -> list[str]:
    """Return the recipes that can be made, in the order they become available."""
    needed_by: defaultdict[str, list[str]] = defaultdict(list)
    missing: dict[str, int] = {}
    for recipe, needs in zip(recipes, ingredients, strict=True):
        missing[recipe] = len(needs)
        for ingredient in needs:
            needed_by[ingredient].append(recipe)

    made: list[str] = []
    queue = deque(supplies)
    while queue:
        item = queue.popleft()
        for recipe in needed_by.get(item, ()):
            missing[recipe] -= 1
            if missing[recipe] == 0:
                made.append(recipe)
                queue.append(recipe)
    return made


def count_complete_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Count the connected components of an undirected graph that are cliques."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    seen = [False] * n
    complete = 0
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        component: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            component.append(node)
            for neighbour in adjacency[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    queue.append(neighbour)
        if all(len(adjacency[node]) == len(component) - 1 for node in component):
            complete += 1
    return complete


def minimum_cost(
    n: int, edges: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """Answer each query with the least AND-cost of a walk between its two nodes.

    The answer is 0 for a node to itself and -1 when the nodes are not connected.
    """
    parent = list(range(n))
    weight = [-1] * n

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            following = parent[node]
            parent[node] = root
            node = following
        return root

    for u, v, w in edges:
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_v] = root_u
            weight[root_u] &= weight[root_v]
        weight[root_u] &= w

    answers: list[int] = []
    for u, v in queries:
        if u == v:
            answers.append(0)
            continue
        root_u, root_v = find(u), find(v)
        answers.append(weight[root_u] if root_u == root_v else -1)
    return answers