import logging

from gridpath import SearchEngine, Topology

width, height = 7, 7
start = (1, 3)
goal = (5, 2)

blocked = [(1, 2), (3, 2), (3, 4), (4, 3)]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    engine = SearchEngine.create(Topology.SQUARE, width, height).mark_obstacles(*blocked)
    result = engine.search(start, goal)
    print("state:", result.state.value)
    for cell, g in zip(result.path, result.costs):
        print(f"(x={cell.x}, y={cell.y}) g={g}")
