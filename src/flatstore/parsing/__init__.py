"""Record text parsing."""

from flatstore.parsing.record_parser import parse_record, split_sections, strip_bom

__all__ = ["parse_record", "split_sections", "strip_bom"]
