import sys
import logging

from gridpath.grid import Grid
from gridpath.viewer import Viewer


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )
    # Optional map file path, default map otherwise
    grid = Grid.load(sys.argv[1]) if len(sys.argv) > 1 else Grid.load()
    path = grid.find_path(grid.start or (0, 0), grid.target or (0, 0))
    print("Length:", len(path) - 1 if path else -1)
    for x, y in path:
        print(grid.index_of(x, y))
    Viewer(grid).run()


if __name__ == "__main__":
    main()
