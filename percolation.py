import numpy as np

from union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n-by-n grid of sites, all blocked at creation, opened one at a time.

    Two union-find structures share the grid elements 1 .. n*n:
      - wqfGrid has a virtual top (0) and a virtual bottom (n*n + 1) and
        answers percolates()
      - wqfFull has only the virtual top and answers isFull(), so an open
        site touching the bottom row can never reach the top through the
        virtual bottom (backwash)
    """

    # order in which neighbours are unioned: up, left, down, right
    NEIGHBOURS = ((-1, 0), (0, -1), (1, 0), (0, 1))

    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"grid size n must be a positive integer, got {n}")

        self.size = n
        self.gridSquare = n * n
        self.grid = np.zeros(self.gridSquare, dtype=bool)

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2)
        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)

        self.virtualTop = 0
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

        for col in range(1, n + 1):
            top = self.flattenGrid(1, col)
            bottom = self.flattenGrid(n, col)
            self.wqfGrid.union(self.virtualTop, top)
            self.wqfGrid.union(self.virtualBottom, bottom)
            self.wqfFull.union(self.virtualTop, top)

    def __repr__(self) -> str:
        return (f"Percolation(n={self.size}, open={self.openSite}, "
                f"percolates={self.percolates()})")

    # open the site (row, col) if it's not open yet
    def open(self, row: int, col: int) -> None:
        self.validState(row, col)
        if self.isOpen(row, col):
            return

        flatIndex = self.flattenGrid(row, col)
        self.grid[flatIndex - 1] = True
        self.openSite += 1

        for dRow, dCol in self.NEIGHBOURS:
            nRow, nCol = row + dRow, col + dCol
            if self.isOnGrid(nRow, nCol) and self.isOpen(nRow, nCol):
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfGrid.union(flatIndex, neighbour)
                self.wqfFull.union(flatIndex, neighbour)

    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[self.flattenGrid(row, col) - 1])

    # is the site open and reachable from the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        return self.wqfFull.connected(self.virtualTop, self.flattenGrid(row, col))

    def connected(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """
        Returns True if the two sites are in the same component of wqfGrid.

        Blocking is not checked: a site is always connected to itself, and
        row-1 sites share the virtual top (row-n sites the virtual bottom), so
        two sites on the same boundary row are connected even while blocked.
        """
        self.validState(row1, col1)
        self.validState(row2, col2)
        return self.wqfGrid.connected(self.flattenGrid(row1, col1),
                                      self.flattenGrid(row2, col2))

    def percolates(self) -> bool:
        # a single site touches both terminals before it is opened
        if self.size == 1:
            return self.isOpen(1, 1)
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(
                f"site ({row}, {col}) is outside the grid [1, {self.size}] x [1, {self.size}]")

    # row-major, 1 .. n*n; 0 and n*n + 1 belong to the virtual sites
    def flattenGrid(self, row: int, col: int) -> int:
        return self.size * (row - 1) + col

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.size and 1 <= col <= self.size
