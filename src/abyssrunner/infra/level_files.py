from __future__ import annotations

import json
from pathlib import Path

from abyssrunner.domain.campaign import Campaign
from abyssrunner.infra.exceptions import LevelDecodeError
from abyssrunner.infra.level_codec import decode_campaign


def load_campaign_from_path(path: Path) -> Campaign:
    try:
        data = path.read_text(encoding="utf-8")
        obj = json.loads(data)
        return decode_campaign(obj)
    except LevelDecodeError:
        raise
    except Exception as e:
        raise LevelDecodeError(f"Failed to load level pack from {path}: {e}") from e
