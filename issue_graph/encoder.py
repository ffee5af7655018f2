"""Graphviz statements for single items and links."""

from issue_graph.models import Item, Link
from issue_graph.styles import DEFAULT_STYLES, WHITE, StyleRules
from issue_graph.text import KEY_WIDTH, SUMMARY_WIDTH, format_cell

INNER_TABLE_OPEN = '<TABLE BORDER="0" CELLBORDER="1" CELLPADDING="4" CELLSPACING="0">'
EXIT_FRAME_OPEN = '<TABLE BORDER="1" CELLBORDER="0" CELLPADDING="2" CELLSPACING="0"><TR><TD>'
ENTRY_FRAME_OPEN = '<TABLE BORDER="4" CELLBORDER="0" CELLPADDING="0" CELLSPACING="0"><TR><TD>'
FRAME_CLOSE = "</TD></TR></TABLE>"


def format_score(score: float) -> str:
    """Format a score, dropping the fraction of whole numbers."""
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def _item_table(item: Item, styles: StyleRules) -> str:
    status_text = f"{styles.priority_glyph(item)} {format_score(item.analysis.total_score)}"
    return (
        INNER_TABLE_OPEN
        + "<TR>"
        + f'<TD BGCOLOR="{styles.type_color(item)}">{styles.type_label(item)}</TD>'
        + f'<TD BGCOLOR="{styles.label_color(item)}" ALIGN="TEXT">{format_cell(item.key, KEY_WIDTH)}</TD>'
        + f'<TD BGCOLOR="{styles.status_color(item)}">{status_text}</TD>'
        + "</TR>"
        + f'<TR><TD COLSPAN="3" BGCOLOR="{WHITE}">{format_cell(item.summary, SUMMARY_WIDTH)}</TD></TR>'
        + "</TABLE>"
    )


def encode_node(item: Item, styles: StyleRules = DEFAULT_STYLES) -> str:
    """Render an item as a node statement with an HTML-like table label.

    Items without outgoing dependencies get a thin frame around the table;
    items without incoming dependencies get a heavy frame around that.
    """
    label = _item_table(item, styles)
    if item.analysis.exit:
        label = EXIT_FRAME_OPEN + label + FRAME_CLOSE
    if item.analysis.entry:
        label = ENTRY_FRAME_OPEN + label + FRAME_CLOSE
    return f'"{item.key}"[label=<{label}>];'


def encode_link(link: Link) -> str:
    """Render a link as a directed edge statement."""
    return f'"{link.src_key}"->"{link.dst_key}";'
