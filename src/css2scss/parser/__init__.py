from css2scss.parser.errors import MalformedInputError
from css2scss.parser.selector import parse_selector
from css2scss.parser.stylesheet import parse_rules

__all__ = ["MalformedInputError", "parse_rules", "parse_selector"]
