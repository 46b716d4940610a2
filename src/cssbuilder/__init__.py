"""cssbuilder - build CSS selector strings from ordered parts."""

__version__ = "0.1.0"

from cssbuilder.builder import (  # noqa: E402
    SelectorBuilder,
    attr,
    build,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.config import BuildConfig  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    DuplicateSelectorPartError,
    InvalidOrderError,
    SelectorError,
    UnknownCategoryError,
)
from cssbuilder.model import (  # noqa: E402
    CATEGORY_ORDER,
    Category,
    Combinator,
    CompoundSelector,
    Selector,
    SelectorFragment,
)

__all__ = [
    "__version__",
    "BuildConfig",
    "CATEGORY_ORDER",
    "Category",
    "Combinator",
    "CompoundSelector",
    "DuplicateSelectorPartError",
    "InvalidOrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "UnknownCategoryError",
    "attr",
    "build",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
