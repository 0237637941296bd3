"""Visitor identity.

Anonymous visitors type their display details into the comment form. They
may opt in to having them remembered on this device.
"""

from threadline.domain.model.common import DomainModel


class Identity(DomainModel):
    """Display details a visitor comments under.

    Only persisted when ``remember`` is set.
    """

    name: str = ""
    email: str = ""
    website: str = ""
    remember: bool = False
