"""Builds export bundles from extracted string records."""

from typing import Callable, Iterable, Mapping, Optional, Tuple, Union

from ..formatting.placeholder_rewriter import PlaceholderRewriter
from ..formatting.string_keyer import string_key
from ..formatting.usage_context import build_context
from ..models.export_bundle import ExportBundle, ExportStats, RewriteResult
from ..models.string_record import StringRecord


class ExportOrchestrator:
    """
    Turns extracted string records into an ExportBundle.

    Each record is keyed, rewritten to positional placeholders and annotated
    with its usage sites. Records that can not be rewritten are left out of
    all three mappings.
    """

    def __init__(
        self,
        browse_uri: Optional[str] = None,
        rewriter: Optional[PlaceholderRewriter] = None,
        on_skip: Optional[Callable[[RewriteResult], None]] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            browse_uri: Base URI for linking usage sites (no links if empty)
            rewriter: Placeholder rewriter to use
            on_skip: Called with the result of every unsupported string
        """
        self.browse_uri = browse_uri
        self.rewriter = rewriter or PlaceholderRewriter()
        self.on_skip = on_skip

    def export(
        self,
        records: Union[Mapping[str, StringRecord], Iterable[StringRecord]],
        read_callback: Optional[Callable[[int], None]] = None,
    ) -> Tuple[ExportBundle, ExportStats]:
        """
        Export a batch of records.

        Args:
            records: Records in extraction order, as a mapping keyed by raw
                     string or as a plain iterable
            read_callback: Called with the number of records read

        Returns:
            Tuple of (bundle sorted by key, statistics)
        """
        if isinstance(records, Mapping):
            records = list(records.values())
        else:
            records = list(records)

        stats = ExportStats(read=len(records))
        if read_callback:
            read_callback(stats.read)

        bundle = ExportBundle()
        for record in records:
            key = string_key(record.string)

            result = self.rewriter.rewrite(record.string)
            if not result.supported:
                stats.skipped += 1
                stats.skipped_strings.append(result)
                if self.on_skip:
                    self.on_skip(result)
                continue

            bundle.add(
                key,
                string=result.value,
                context=build_context(record, self.browse_uri),
                raw=record.string,
            )

        stats.exported = len(bundle)
        return bundle.sorted(), stats
