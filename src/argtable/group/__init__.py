from .facts import ReportPresentationFacts, SpecDisplayOptions, derive_facts
from .filter import PlacementPredicate, filter_entries, is_entry_displayed
from .grouper import group_entries
from .model import ArgRow, ArgSection, GroupedArgs, Subsection, get_or_insert

__all__ = [
    # Models
    "ArgRow",
    "ArgSection",
    "GroupedArgs",
    "Subsection",
    "get_or_insert",
    # Filter
    "PlacementPredicate",
    "filter_entries",
    "is_entry_displayed",
    # Grouper
    "group_entries",
    # Presentation facts
    "ReportPresentationFacts",
    "SpecDisplayOptions",
    "derive_facts",
]
