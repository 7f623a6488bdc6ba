# This file provides playerctl control (play/pause/seek/metadata logic)
#
# What it does in production:
# - run playerctl play / pause / play-pause / stop / next / previous
# - run playerctl position N+ / N- and volume N+ / N-
# - parse playerctl status
# - parse playerctl --all-players metadata --format ...

import enum
import logging
import math
import subprocess

from . import metadata as md
from .errors import ExecutionError, LaunchError
from .helpers.config import base_cmd

logger = logging.getLogger(__name__)

NO_PLAYERS = "No players found"


class TrackStatus(enum.Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


def run_cmd(cmd):
    """
    Run a command, capture stdout/stderr, return (rc, out, err).
    Raises LaunchError if the executable can't be started.
    """
    logger.debug("running %s", cmd)
    try:
        proc = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise LaunchError(cmd, e.strerror or str(e)) from e
    out, err = proc.communicate()
    logger.debug("%s exited with %s", cmd[0], proc.returncode)
    # only newlines: str.strip() would also eat 0x1F field separators
    return proc.returncode, out.rstrip("\r\n"), err.strip()

def _run(*args):
    """
    Run playerctl with args, return stdout or raise ExecutionError.
    """
    cmd = base_cmd() + list(args)
    rc, out, err = run_cmd(cmd)
    if rc != 0:
        raise ExecutionError(cmd, rc, err)
    return out

def _offset_arg(offset):
    offset = float(offset)
    if not math.isfinite(offset):
        raise ValueError(f"offset must be a finite number, got {offset!r}")
    if offset < 0:
        return f"{-offset}-"
    return f"{abs(offset)}+"

def play():
    """
    Dispatch a 'play' command to the player
    """
    _run("play")

def pause():
    """
    Dispatch a 'pause' command to the player
    """
    _run("pause")

def play_pause():
    """
    Toggle between play and pause
    """
    _run("play-pause")

def stop():
    _run("stop")

def next_track():
    _run("next")

def previous():
    _run("previous")

def position(offset_seconds: float):
    """
    Seek forward (positive) or backward (negative) by offset_seconds.
    Zero is sent as-is.
    """
    _run("position", _offset_arg(offset_seconds))

def volume(offset: float):
    """
    Raise (positive) or lower (negative) the volume; 1.0 is full volume.
    """
    _run("volume", _offset_arg(offset))

def status() -> TrackStatus:
    """
    Gets the playback status of the player
    """
    out = _run("status").strip()
    if out == TrackStatus.PLAYING.value:
        return TrackStatus.PLAYING
    if out == TrackStatus.PAUSED.value:
        return TrackStatus.PAUSED
    return TrackStatus.STOPPED

def metadata():
    """
    Gets {player_name: PlayerMetadata} for every active player.
    No running players gives an empty dict.
    """
    cmd = base_cmd() + ["--all-players", "metadata", "--format", md.format_template()]
    rc, out, err = run_cmd(cmd)
    if rc != 0:
        if NO_PLAYERS in err:
            return {}
        raise ExecutionError(cmd, rc, err)
    return md.parse_metadata(out)


class Playerctl:
    """
    Namespace wrapper so callers can write Playerctl.play(), Playerctl.metadata(), ...
    """
    play = staticmethod(play)
    pause = staticmethod(pause)
    play_pause = staticmethod(play_pause)
    stop = staticmethod(stop)
    next_track = staticmethod(next_track)
    previous = staticmethod(previous)
    position = staticmethod(position)
    volume = staticmethod(volume)
    status = staticmethod(status)
    metadata = staticmethod(metadata)
