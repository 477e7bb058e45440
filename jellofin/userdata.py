"""Per-user playback state of items as clients see it."""

from __future__ import annotations

from jellofin.types import UserData

NEVER_PLAYED = "0001-01-01T00:00:00Z"


def default_user_data(item_id: str) -> UserData:
    """Return the user data of an item nobody has played, rated or resumed."""
    return UserData(
        playback_position_ticks=0,
        played_percentage=0.0,
        play_count=0,
        is_favorite=False,
        last_played_date=NEVER_PLAYED,
        played=False,
        key=item_id,
        unplayed_item_count=0,
    )