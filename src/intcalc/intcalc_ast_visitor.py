"""
Base visitor for intcalc expression trees.

Dispatch is driven by the visitor, keyed on the node's class, so tree nodes never
need to know which traversals exist.
"""

from typing import Callable, Generic, List, Tuple, TypeVar

from intcalc.intcalc_ast import IntCalcASTBinary, IntCalcASTNode
from intcalc.intcalc_error import IntCalcEvalError


R = TypeVar('R')


class IntCalcASTVisitor(Generic[R]):
    """
    Base visitor class for expression tree traversal.

    Subclasses implement one `visit_<NodeClassName>` method per node type they handle.
    Leaf handlers take just the node; binary handlers also receive the results already
    computed for the left and right children.

    The tree is walked in post-order using an explicit stack rather than recursion, so
    trees of any depth can be visited.
    """

    def visit(self, root: IntCalcASTNode) -> R:
        """
        Visit a tree, calling the handler for every node after those of its children.

        Args:
            root: The root of the tree to visit

        Returns:
            The result of the handler for the root node

        Raises:
            IntCalcEvalError: If a node has no handler
        """
        results: List[R] = []
        pending: List[Tuple[IntCalcASTNode, bool]] = [(root, False)]

        while pending:
            node, children_done = pending.pop()
            if not isinstance(node, IntCalcASTBinary):
                results.append(self._handler(node)(node))
                continue

            if not children_done:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue

            right = results.pop()
            left = results.pop()
            results.append(self._handler(node)(node, left, right))

        return results.pop()

    def _handler(self, node: IntCalcASTNode) -> Callable[..., R]:
        method_name = f'visit_{node.__class__.__name__}'
        return getattr(self, method_name, self.generic_visit)

    def generic_visit(self, node: IntCalcASTNode, *_child_results: R) -> R:
        """
        Handle nodes with no specific visit method.

        Args:
            node: The node to visit

        Raises:
            IntCalcEvalError: Always, as every node type must be handled explicitly
        """
        raise IntCalcEvalError(
            message=f"{self.__class__.__name__} cannot handle node type {node.__class__.__name__}",
            received=node.__class__.__name__
        )
