class WeightedQuickUnionUF:
    """
    Weighted quick-union over the elements 0 .. n-1.

    Roots of smaller trees are linked under roots of larger trees and
    every find re-points the nodes it visits at their root, so a sequence
    of operations costs near O(1) amortized per call.
    """

    def __init__(self, n: int):
        """
        Creates 'n' singleton sets.

        :param n: The number of elements, must be positive.
        """
        if n <= 0:
            raise ValueError(f"number of elements must be > 0, got {n}")

        # parent[i] == i marks a root
        self.parent = list(range(n))

        # size[r] = number of elements in the tree rooted at r, only kept
        # up to date for roots
        self.size = [1] * n

        self.components = n

    def __len__(self) -> int:
        return len(self.parent)

    def count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.components

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"element {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Returns the root of the set containing 'p', compressing the path
        from 'p' to that root on the way.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        while p != root:
            nxt = self.parent[p]
            self.parent[p] = root
            p = nxt

        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """
        Merges the set containing 'p' with the set containing 'q'.
        """
        rootP = self.find(p)
        rootQ = self.find(q)
        if rootP == rootQ:
            return

        # smaller tree goes under the larger one
        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP
        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]

        self.components -= 1
