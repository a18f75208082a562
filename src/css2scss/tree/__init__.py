from css2scss.tree.builder import count_declarations, create_rule_tree
from css2scss.tree.printer import print_rule_tree

__all__ = ["create_rule_tree", "count_declarations", "print_rule_tree"]
