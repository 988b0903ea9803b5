"""
Bundled sample composers used by the seed endpoint.

The records live in ``seed_composers.json`` next to this module and use
the same camelCase keys as the HTTP API.
"""

import json
import logging
from pathlib import Path

from composers_api.domain.catalog.entities import ComposerDraft

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).with_name("seed_composers.json")


def load_seed_drafts(path: Path = SEED_FILE) -> list[ComposerDraft]:
    """Read sample composers from a JSON file.

    Args:
        path: JSON array of composer objects.

    Returns:
        One ComposerDraft per record, in file order.
    """
    with path.open(encoding="utf-8") as fh:
        records = json.load(fh)

    drafts = [
        ComposerDraft(
            name=record["name"],
            born=record["born"],
            death=record.get("death"),
            era=record["era"],
            bio=record["bio"],
            notable_works=tuple(record.get("notableWorks", ())),
        )
        for record in records
    ]
    logger.debug("Loaded %d seed composers from %s", len(drafts), path)
    return drafts
