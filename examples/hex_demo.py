from gridpath import NoPathFoundError, SearchEngine, Topology

width, height = 7, 7
start = (0, 1)
goal = (5, 2)

blocked = [(1, 2), (2, 1), (3, 0)]


if __name__ == "__main__":
    engine = SearchEngine.create(Topology.HEX, width, height).mark_obstacles(*blocked)
    try:
        route = engine.find_path(start, goal)
    except NoPathFoundError as exc:
        print("no route:", exc)
    else:
        for cell in route:
            print(f"(x={cell.x}, y={cell.y}, z={cell.z})")
