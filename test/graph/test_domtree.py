""" Test dominator tree queries and the dominance frontier """

import unittest
from compactgraph import Graph, DominatorTree


class DominatorTreeTestCase(unittest.TestCase):
    def setUp(self):
        """ figure 19.4 from Appel """
        self.graph = Graph.from_edges([
            (1, 2), (2, 3), (2, 4), (3, 5), (3, 6), (5, 7), (6, 7), (7, 2)])
        self.tree = self.graph.dominator_tree(1)

    def test_structure(self):
        tree = self.tree
        self.assertEqual(1, tree.root)
        self.assertEqual(7, len(tree))
        self.assertIn(7, tree)
        self.assertNotIn(0, tree)
        self.assertEqual([2], tree.children(1))
        self.assertEqual([3, 4], sorted(tree.children(2)))
        self.assertEqual([5, 6, 7], sorted(tree.children(3)))
        self.assertEqual([], tree.children(7))
        self.assertIsNone(tree.immediate_dominator(1))
        self.assertEqual(3, tree.immediate_dominator(7))
        self.assertEqual({1, 2, 3, 4, 5, 6, 7}, set(tree))

    def test_dominates(self):
        tree = self.tree
        self.assertTrue(tree.dominates(1, 7))
        self.assertTrue(tree.dominates(2, 7))
        self.assertTrue(tree.dominates(3, 7))
        self.assertTrue(tree.dominates(7, 7))
        self.assertFalse(tree.dominates(4, 7))
        self.assertFalse(tree.dominates(5, 7))
        self.assertFalse(tree.dominates(7, 2))
        self.assertTrue(tree.strictly_dominates(2, 4))
        self.assertFalse(tree.strictly_dominates(4, 4))

    def test_outside_tree(self):
        with self.assertRaises(KeyError):
            self.tree.immediate_dominator(0)
        with self.assertRaises(KeyError):
            self.tree.dominates(0, 2)
        with self.assertRaises(KeyError):
            self.tree.dominates(1, 0)
        with self.assertRaises(KeyError):
            self.tree.children(0)

    def test_walks(self):
        top_down = list(self.tree.pre_order())
        bottom_up = list(self.tree.bottom_up())
        self.assertEqual(1, top_down[0])
        self.assertEqual(1, bottom_up[-1])
        self.assertEqual(sorted(top_down), sorted(bottom_up))
        self.assertEqual(7, len(top_down))
        for vertex in self.tree:
            dominator = self.tree.immediate_dominator(vertex)
            if dominator is not None:
                self.assertLess(
                    top_down.index(dominator), top_down.index(vertex))
                self.assertGreater(
                    bottom_up.index(dominator), bottom_up.index(vertex))

    def test_dominance_frontier(self):
        df = self.tree.dominance_frontier(self.graph)
        expected = {
            1: set(), 2: {2}, 3: {2}, 4: set(), 5: {7}, 6: {7}, 7: {2},
        }
        self.assertEqual(expected, df)

    def test_diamond_frontier(self):
        graph = Graph.from_edges([(0, 2), (0, 1), (2, 3), (1, 3)])
        tree = DominatorTree(graph.dominators(0), 0)
        self.assertEqual(
            {0: set(), 1: {3}, 2: {3}, 3: set()},
            tree.dominance_frontier(graph))


if __name__ == '__main__':
    unittest.main()
