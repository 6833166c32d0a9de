"""Contextual help text describing where a string is used."""

from typing import Optional

from ..models.string_record import StringRecord, UsageSite

HEADER = "Used in:"


def format_usage(site: UsageSite, browse_uri: Optional[str] = None) -> str:
    """
    Render one usage site.

    With a browse URI the site becomes an external link in wiki markup,
    pointing at "<browse_uri><file>$<line>".
    """
    if browse_uri:
        uri = f"{browse_uri}{site.file}${site.line}"
        return f"[{uri} {site.label}]"
    return site.label


def build_context(record: StringRecord, browse_uri: Optional[str] = None) -> str:
    """Build the "Used in:" block for a record, or "" if it has no uses."""
    if not record.uses:
        return ""

    usage = [format_usage(site, browse_uri) for site in record.uses]
    return HEADER + "\n\n" + "\n".join(usage) + "\n"
