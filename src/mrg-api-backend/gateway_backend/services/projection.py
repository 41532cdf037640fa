"""Projection of provider records into client-facing asset summaries."""

# Standard Library
from typing import Iterable, List

# Local Modules
from gateway_backend.models import AssetRecord, AssetSummary


def project_record(record: AssetRecord) -> AssetSummary:
    """Maps a provider record onto the fixed ``AssetSummary`` field set.

    Values are copied verbatim; nothing is converted or renamed beyond the
    field mapping itself.
    """
    return AssetSummary(
        public_id=record.public_id,
        src=record.secure_url,
        format=record.format,
        width=record.width,
        height=record.height,
        bytes=record.bytes,
        created_at=record.created_at,
    )


def project_records(records: Iterable[AssetRecord]) -> List[AssetSummary]:
    return [project_record(record) for record in records]
