"""Turns recipe categories into a readable menu sentence.

Example::

    >>> format_menu([("Entrees", ["Pizza", "with Sauce", "Burger"]), ("Grain", ["Rice"])])
    'Pizza with Sauce or Burger with Rice.'
"""

from collections.abc import Callable, Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from .models import CategoryKind


ALTERNATIVE_MARKERS = ("box lunch", "choice 2", "choice two", "includes fruit")
ENTREE_MARKERS = ("entree", "main")


def _contains_any(*markers: str) -> Callable[[str], bool]:
    return lambda label: any(marker in label for marker in markers)


# Evaluated in order against the lowercased label, first match wins.
# Alternatives come first since some of their labels also mention entrees.
CATEGORY_RULES: list[tuple[Callable[[str], bool], CategoryKind]] = [
    (_contains_any(*ALTERNATIVE_MARKERS), CategoryKind.ALTERNATIVE),
    (_contains_any(*ENTREE_MARKERS), CategoryKind.ENTREE),
]


class FormatOptions(BaseModel):
    """How menu sentences are phrased"""

    model_config = ConfigDict(frozen=True)

    entree_joiner: str = " or "
    show_category_labels: bool = False
    use_oxford_comma: bool = True
    alternative_label: str = ""


def join_with_conjunction(items: Sequence[str], conjunction: str = "and", oxford_comma: bool = True) -> str:
    """Join items the way a person would write a list: ``A, B, and C``."""
    if len(items) == 0:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"

    comma = "," if oxford_comma else ""
    return f"{', '.join(items[:-1])}{comma} {conjunction} {items[-1]}"


def merge_with_items(recipes: Sequence[str]) -> list[str]:
    """Attach items starting with "with" to the preceding recipe.

    ``["Pizza", "with Sauce", "with Cheese"]`` becomes ``["Pizza with Sauce with Cheese"]``.
    A leading "with" item has nothing to attach to and stays on its own.
    """
    merged: list[str] = []
    for recipe in recipes:
        if merged and recipe.strip().lower().startswith("with "):
            merged[-1] = f"{merged[-1]} {recipe}"
        else:
            merged.append(recipe)
    return merged


def classify_category(category_name: str) -> CategoryKind:
    """Map a free-text category label to entree, side or alternative."""
    label = category_name.lower()
    for matches, kind in CATEGORY_RULES:
        if matches(label):
            return kind
    # Grain, Fruit, Vegetable, Milk, Condiment, ...
    return CategoryKind.SIDE


def format_menu(
    categories: Iterable[tuple[str, Sequence[str]]],
    options: FormatOptions | None = None,
) -> str:
    """Build one sentence for a meal from ``(category name, recipe names)`` pairs.

    Entrees are joined with ``options.entree_joiner``, sides are listed after them
    ("with Rice, Beans, and Corn") and every alternative category becomes its own
    trailing sentence ("Or Turkey Sandwich and Chips"). The result always ends with
    a period, so a meal without any categories comes out as ``"."``.
    """
    options = options or FormatOptions()

    grouped: dict[CategoryKind, list[tuple[str, list[str]]]] = {kind: [] for kind in CategoryKind}
    for category_name, recipes in categories:
        kind = classify_category(category_name)
        grouped[kind].append((category_name, merge_with_items(recipes)))

    main_parts = []
    alternative_parts = []

    entrees = [recipe for _, recipes in grouped[CategoryKind.ENTREE] for recipe in recipes]
    if entrees:
        entrees_text = options.entree_joiner.join(entrees)
        if options.show_category_labels:
            entrees_text = f"Entrees: {entrees_text}"
        main_parts.append(entrees_text)

    sides = [recipe for _, recipes in grouped[CategoryKind.SIDE] for recipe in recipes]
    if sides:
        sides_text = join_with_conjunction(sides, "and", options.use_oxford_comma)
        if options.show_category_labels:
            sides_text = f"Sides: {sides_text}"
        elif entrees:
            sides_text = f"with {sides_text}"
        main_parts.append(sides_text)

    for category_name, recipes in grouped[CategoryKind.ALTERNATIVE]:
        if not recipes:
            continue
        items_text = join_with_conjunction(recipes, "and", options.use_oxford_comma)
        if options.alternative_label == "":
            alternative_parts.append(f"Or {items_text}")
        else:
            label = options.alternative_label.replace("{categoryName}", category_name, 1)
            alternative_parts.append(f"{label} {items_text}")

    result = " ".join(main_parts)
    if alternative_parts:
        result += ". " + ". ".join(alternative_parts)

    return result + "."


def has_menu_content(sentence: str | None) -> bool:
    """True when a sentence names at least one dish (``"."`` or whitespace does not)."""
    return bool(sentence) and any(char.isalnum() for char in sentence)
