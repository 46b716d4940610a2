from cssbuilder.model.category import CATEGORY_ORDER, Category
from cssbuilder.model.combinator import Combinator
from cssbuilder.model.compound import CompoundSelector
from cssbuilder.model.fragment import SelectorFragment
from cssbuilder.model.selector import Selector

__all__ = [
    "CATEGORY_ORDER",
    "Category",
    "Combinator",
    "CompoundSelector",
    "Selector",
    "SelectorFragment",
]
