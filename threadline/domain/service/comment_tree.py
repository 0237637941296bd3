"""Reply tree construction.

Turns the flat, oldest-first comment list returned by the backend into a
forest of reply trees.
"""

from typing import Iterable

from threadline.domain.model.comment import CommentNode, CommentRecord
from threadline.domain.value import CommentId


def build_comment_tree(
    records: Iterable[CommentRecord], include_orphans: bool = False
) -> list[CommentNode]:
    """Build the reply forest for a page.

    Algorithm:
    1. Create an empty node for every record, keyed by comment ID
    2. Walk the records again in input order and attach each node to its
       parent, or to the roots when it has no parent
    3. Sort the roots newest first

    Replies keep the input order (oldest first) at every depth; only the
    roots are re-sorted. The root sort is stable, so roots created at the
    same instant keep their input order.

    A reply whose parent is not among the records (for example because the
    parent was removed) is dropped together with its own replies, unless
    ``include_orphans`` is set, in which case it becomes a root.

    Args:
        records: Comments of one page, ordered by ascending creation time
        include_orphans: Surface replies with an unknown parent as roots

    Returns:
        Root nodes, newest first
    """
    records = list(records)
    nodes: dict[CommentId, CommentNode] = {
        record.id: CommentNode(record=record) for record in records
    }
    roots: list[CommentNode] = []

    for record in records:
        node = nodes[record.id]
        if record.parent_id is None:
            roots.append(node)
        elif record.parent_id in nodes:
            nodes[record.parent_id].children.append(node)
        elif include_orphans:
            roots.append(node)

    roots.sort(key=lambda node: node.record.created_at, reverse=True)
    return roots

