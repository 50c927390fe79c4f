"""
Small DOM helpers shared by the table parsers.
"""
from typing import List

from bs4 import Tag

SORTABLE_TABLE = "table.wikitable.sortable"
MONOSPACE_SELECTOR = '[style*="monospace"]'


def normalized_text(node: Tag) -> str:
    """Cell text with runs of whitespace (including &nbsp;) collapsed."""
    return " ".join(node.get_text().split())


def row_cells(row: Tag) -> List[Tag]:
    """Direct td/th children of a table row."""
    return row.find_all(["td", "th"], recursive=False)


def cell_index(cell: Tag) -> int:
    """Position of a cell among the cells of its row."""
    for index, candidate in enumerate(row_cells(cell.parent)):
        if candidate is cell:
            return index
    raise ValueError("cell is not a direct child of its parent row")


def monospace_text(cell: Tag) -> str:
    """
    Text of the first monospace-styled element in a cell, or of the whole cell.

    ISO codes are rendered in a monospace span, separate from any
    decorative text around them.
    """
    code_node = cell.select_one(MONOSPACE_SELECTOR) or cell
    return code_node.get_text()


def is_hidden(tag: Tag) -> bool:
    style = tag.get("style") or ""
    return "display:none" in style.replace(" ", "").lower()


def remove_hidden(node: Tag):
    """Remove descendants styled ``display:none`` (sort keys, disambiguation hints)."""
    for tag in node.find_all(is_hidden):
        if not tag.decomposed:
            tag.decompose()
