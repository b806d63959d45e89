from ..spec import ArgumentSet
from .model import ArgRow, ArgSection, GroupedArgs, get_or_insert


def group_entries(entries: ArgumentSet | None) -> GroupedArgs:
    """Partition entries into ungrouped rows, subsections and sections.

    Routing, checked in order:

    1. ``category`` set: into that section; its ungrouped rows when there is
       no ``subcategory``, else the named subsection inside it.
    2. ``subcategory`` set: the top-level subsection of that name.
    3. Otherwise: top-level ungrouped rows.

    Empty strings count as unset. Rows keep input order within each
    sequence, and sections/subsections appear in the order their first row
    was seen.

    Args:
        entries: Key -> entry mapping, already filtered. ``None`` is accepted.

    Returns:
        GroupedArgs: A freshly built hierarchy; empty for empty input.
    """
    cls_grouped = GroupedArgs()
    if not entries:
        return cls_grouped

    for c_key, cls_entry in entries.items():
        cls_row = ArgRow(key=c_key, entry=cls_entry)
        cls_placement = cls_entry.placement
        c_category = cls_placement.category if cls_placement else None
        c_subcategory = cls_placement.subcategory if cls_placement else None

        if c_category:
            cls_section = get_or_insert(cls_grouped.sections, c_category, ArgSection)
            if c_subcategory:
                get_or_insert(cls_section.subsections, c_subcategory, list).append(cls_row)
            else:
                cls_section.ungrouped.append(cls_row)
        elif c_subcategory:
            get_or_insert(
                cls_grouped.ungrouped_subsections, c_subcategory, list
            ).append(cls_row)
        else:
            cls_grouped.ungrouped.append(cls_row)

    return cls_grouped
