# Metadata parsing for `playerctl --all-players metadata --format ...`
#
# One line per active player:
#   <playerName> US <mpris:trackid> US <mpris:artUrl> US ... (US = 0x1F)
# Fields playerctl has no value for come back as the "(none)" sentinel.

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import MetadataParseError

DELIMITER = "\x1f"
SENTINEL = "(none)"

# (playerctl key, PlayerMetadata attribute), in request order
FIELDS = (
    ("mpris:trackid", "mpris_trackid"),
    ("mpris:artUrl", "mpris_art_url"),
    ("mpris:length", "mpris_length"),
    ("xesam:title", "xesam_title"),
    ("xesam:album", "xesam_album"),
    ("xesam:artist", "xesam_artist"),
    ("xesam:albumArtist", "xesam_album_artist"),
    ("xesam:contentCreated", "xesam_content_created"),
)

INT_FIELDS = {"mpris:length"}
INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PlayerMetadata:
    """
    What one player reports about its current track.

    Typed attributes are None when the player did not provide the field.
    `raw` keeps every field exactly as playerctl printed it, sentinel included.
    """
    mpris_trackid: Optional[str] = None
    mpris_art_url: Optional[str] = None
    mpris_length: Optional[int] = None  # microseconds
    xesam_title: Optional[str] = None
    xesam_album: Optional[str] = None
    xesam_artist: Optional[str] = None
    xesam_album_artist: Optional[str] = None
    xesam_content_created: Optional[str] = None
    raw: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def to_dict(self):
        out = {attr: getattr(self, attr) for _, attr in FIELDS}
        out["raw"] = dict(self.raw)
        return out


def format_template() -> str:
    """
    Build the --format argument: player name first, then each field
    with the sentinel as its fallback.
    """
    parts = ["{{playerName}}"]
    for key, _ in FIELDS:
        parts.append(f'{{{{default({key}, "{SENTINEL}")}}}}')
    return DELIMITER.join(parts)


def _is_absent(value: str) -> bool:
    return value == "" or value == SENTINEL


def parse_line(line: str):
    """
    Parse one output line into (player_name, PlayerMetadata).
    """
    tokens = line.split(DELIMITER)
    player = tokens[0].strip()
    if not player:
        raise MetadataParseError("metadata line has no player name", line=line)

    values = tokens[1:]
    if len(values) > len(FIELDS):
        raise MetadataParseError(
            f"expected at most {len(FIELDS)} fields for {player!r}, got {len(values)}",
            line=line,
        )

    raw = {}
    typed = {}
    for (key, attr), value in zip(FIELDS, values):
        raw[key] = value
        if _is_absent(value):
            continue
        if key in INT_FIELDS:
            # int() alone would also take "1_000", " 42 " and non-ASCII digits
            if not INT_RE.fullmatch(value):
                raise MetadataParseError(
                    f"{key} for {player!r} is not an integer: {value!r}",
                    line=line, field=key, value=value,
                )
            typed[attr] = int(value)
        else:
            typed[attr] = value

    return player, PlayerMetadata(raw=MappingProxyType(raw), **typed)


def parse_metadata(text: str) -> Dict[str, PlayerMetadata]:
    """
    Parse the whole metadata output into {player_name: PlayerMetadata}.
    Blank lines are skipped, so empty output means no players.
    """
    result = {}
    # not splitlines(): it also breaks on 0x1C-0x1E
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line.strip(" \t"):
            continue
        player, md = parse_line(line)
        result[player] = md
    return result
