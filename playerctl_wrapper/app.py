# Flask routes only

from flask import Flask, jsonify, request
import os
import shutil

from . import playerctl
from .errors import ExecutionError, LaunchError, MetadataParseError
from .helpers.config import load_config

app = Flask(__name__)

# ---- Config / helpers ---------------------------------------------------------

ACTIONS = {
    "play": playerctl.play,
    "pause": playerctl.pause,
    "play-pause": playerctl.play_pause,
    "stop": playerctl.stop,
    "next": playerctl.next_track,
    "previous": playerctl.previous,
}

def error_response(e: Exception):
    if isinstance(e, LaunchError):
        return jsonify({"ok": False, "error": str(e)}), 503
    if isinstance(e, ExecutionError):
        code = 404 if playerctl.NO_PLAYERS in e.stderr else 502
        return jsonify({"ok": False, "error": str(e), "returncode": e.returncode}), code
    # MetadataParseError
    return jsonify({"ok": False, "error": str(e), "line": e.line}), 502

def read_offset():
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict) or body.get("offset") is None:
        raise ValueError("missing 'offset'")
    return float(body["offset"])

def _startup_binary_validation():
    binary = load_config()["binary"]
    found = shutil.which(binary)
    if found:
        print(f"[startup] {binary} found at {found}")
    else:
        print(f"[startup] {binary} NOT found on PATH")

if os.environ.get("PLAYERCTL_SKIP_STARTUP") != "1":
    _startup_binary_validation()

# ---- Routes -------------------------------------------------------------------

@app.route("/status", methods=["GET"])
def status():
    try:
        st = playerctl.status()
    except (LaunchError, ExecutionError) as e:
        return error_response(e)
    return jsonify({"ok": True, "status": st.value})

@app.route("/metadata", methods=["GET"])
def metadata():
    try:
        players = playerctl.metadata()
    except (LaunchError, ExecutionError, MetadataParseError) as e:
        return error_response(e)
    return jsonify({
        "ok": True,
        "players": {name: m.to_dict() for name, m in players.items()},
    })

@app.route("/<action>", methods=["POST"])
def control(action):
    fn = ACTIONS.get(action)
    if fn is None:
        return jsonify({"ok": False, "error": f"unknown action '{action}'"}), 404
    try:
        fn()
    except (LaunchError, ExecutionError) as e:
        return error_response(e)
    return jsonify({"ok": True, "action": action})

@app.route("/position", methods=["POST"])
def position():
    """
    Body: {"offset": 10.0}   seconds, negative seeks backward
    """
    try:
        offset = read_offset()
        playerctl.position(offset)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"offset must be a number: {e}"}), 400
    except (LaunchError, ExecutionError) as e:
        return error_response(e)
    return jsonify({"ok": True, "offset": offset})

@app.route("/volume", methods=["POST"])
def volume():
    """
    Body: {"offset": -0.1}   fraction of full volume, negative lowers it
    """
    try:
        offset = read_offset()
        playerctl.volume(offset)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"offset must be a number: {e}"}), 400
    except (LaunchError, ExecutionError) as e:
        return error_response(e)
    return jsonify({"ok": True, "offset": offset})

if __name__ == "__main__":
    # local dev runner
    app.run(host="127.0.0.1", port=5002, debug=True)
